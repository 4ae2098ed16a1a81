#!/usr/bin/env python3
"""
report.py - Print views of a checklist movie log

Read-only.  Parses the log once and prints one view:
  all        newest first, with a CURRENT marker and year dividers
  ranked     watched + rated, best first
  watchlist  unwatched only (grouped by year unless --flat)
  stats      counts, average rating, top N, rating distribution

If the log cannot be read, the view is printed empty.

Usage:
  python report.py stats
  python report.py all --no-current
  python report.py ranked --csv output/ranked.csv
  python report.py watchlist --flat --source https://example.com/movies.txt
"""

import sys
import csv
import logging
import argparse
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from movielog.config import ConfigError, load_config
from movielog.constants import DEFAULT_CONFIG_PATH
from movielog.display import distribution_bars, format_entry, format_rating
from movielog.parser import MovieEntry, MovieLog, Section
from movielog.source import load_movie_log
from movielog.stats import MovieStats, compute_stats
from movielog.views import (
    Divider, TimelineRow, newest_first, ranked, timeline, watchlist, watchlist_sections, watchlist_timeline,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

VIEWS = ['all', 'ranked', 'watchlist', 'stats']

CSV_FIELDS = ['title', 'rating', 'watched', 'year']

DatedEntry = Tuple[Optional[str], MovieEntry]


def dated_entries(sections: Sequence[Section]) -> List[DatedEntry]:
    """(year, entry) pairs in document order"""
    return [(s.year, e) for s in sections for e in s.items]


def with_years(entries: Sequence[MovieEntry], pairs: Sequence[DatedEntry]) -> List[DatedEntry]:
    """Re-attach section years to entries drawn from the same (year, entry) pairs"""
    years = {id(e): y for y, e in pairs}
    return [(years.get(id(e)), e) for e in entries]


def render_timeline(rows: Sequence[TimelineRow]) -> List[str]:
    lines = []
    for row in rows:
        if isinstance(row, Divider):
            lines.append(f"---------- {row.label} ----------")
        else:
            lines.append(f"  {format_entry(row)}")
    return lines


def render_ranked(entries: Sequence[MovieEntry]) -> List[str]:
    return [f"{i:>3}. {format_entry(e)}" for i, e in enumerate(entries, 1)]


def render_stats(stats: MovieStats) -> List[str]:
    lines = [
        f"Watched:         {stats.watched_count}",
        f"Unwatched:       {stats.unwatched_count}",
        f"Average rating:  {format_rating(stats.average_rating)}",
        "",
        f"Top {len(stats.top)}:",
    ]
    lines.extend(render_ranked(stats.top))
    lines.append("")
    lines.append("Rating distribution:")
    bars = distribution_bars(stats.distribution)
    for label, count in stats.distribution.items():
        bar = '#' * round(bars[label] / 5)
        lines.append(f"  {label:>8}  {bar:<20} {count}")
    return lines


def build_view(
    view: str,
    log: MovieLog,
    top_n: int,
    include_current: bool = True,
    flat: bool = False,
) -> Tuple[List[str], List[DatedEntry]]:
    """
    Render one view of a parsed log.

    Returns:
        (printable lines, (year, entry) rows for CSV export)
    """
    if view == 'all':
        rows = dated_entries(newest_first(log.sections))
        return render_timeline(timeline(log.sections, include_current)), rows

    if view == 'ranked':
        pairs = dated_entries(log.sections)
        ordered = ranked([e for _, e in pairs])
        return render_ranked(ordered), with_years(ordered, pairs)

    if view == 'watchlist':
        if flat:
            entries = watchlist(log.entries)
            return [f"  {format_entry(e)}" for e in entries], [(None, e) for e in entries]
        sections = watchlist_sections(log.sections)
        rows = dated_entries(newest_first(sections))
        return render_timeline(watchlist_timeline(log.sections, include_current)), rows

    if view == 'stats':
        pairs = dated_entries(log.sections)
        stats = compute_stats([e for _, e in pairs], top_n=top_n)
        return render_stats(stats), with_years(stats.top, pairs)

    raise ValueError(f"Unknown view: {view}")


def write_csv(rows: Sequence[DatedEntry], output_path: Path) -> None:
    """Write (year, entry) rows to CSV"""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', newline='', encoding='utf-8') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for year, entry in rows:
            writer.writerow({
                'title': entry.title,
                'rating': '' if entry.rating is None else entry.rating,
                'watched': entry.watched,
                'year': year or '',
            })
    logger.info(f"Wrote {len(rows)} rows to {output_path}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description='Print views and statistics of a checklist movie log',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument('view', choices=VIEWS, help='View to print')
    parser.add_argument('--config', type=Path, default=DEFAULT_CONFIG_PATH,
                        help=f'Configuration file (default: {DEFAULT_CONFIG_PATH})')
    parser.add_argument('--source', help='Movie log path or URL (overrides config)')
    parser.add_argument('--top', type=int, dest='top_n', help='Length of the top list (overrides config)')
    parser.add_argument('--no-current', action='store_true', default=False, dest='no_current',
                        help='Omit the CURRENT marker above the newest section')
    parser.add_argument('--flat', action='store_true', default=False,
                        help='Watchlist as a flat list instead of grouped by year')
    parser.add_argument('--csv', type=Path, dest='csv_path',
                        help='Also write the view\'s entries to this CSV file')

    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    source = args.source or config['source']
    top_n = args.top_n if args.top_n is not None else int(config['top_n'])
    include_current = bool(config['include_current']) and not args.no_current

    log = load_movie_log(source, timeout=float(config['timeout']))
    lines, rows = build_view(args.view, log, top_n, include_current, args.flat)

    print()
    print("=" * 60)
    print(f"{args.view.upper()}: {source}")
    print("=" * 60)
    for line in lines:
        print(line)
    print()

    if args.csv_path:
        write_csv(rows, args.csv_path)

    return 0


if __name__ == '__main__':
    sys.exit(main())
