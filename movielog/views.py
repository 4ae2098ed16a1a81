#!/usr/bin/env python3
"""
View projections over a parsed movie log

Pure reorderings and filters, no parsing. Sections come in document order
(oldest header first) and the most recently appended line is at the bottom
of each section, so the timeline reverses both.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Union

from movielog.constants import CURRENT_LABEL
from movielog.parser import MovieEntry, Section
from movielog.stats import top_rated


@dataclass(frozen=True)
class Divider:
    """Boundary row in a timeline: the CURRENT marker or a section's year"""
    label: str
    current: bool = False


TimelineRow = Union[Divider, MovieEntry]


def newest_first(sections: Sequence[Section]) -> List[Section]:
    """Latest section first, and within each section the last line first"""
    return [Section(year=s.year, items=tuple(reversed(s.items))) for s in reversed(sections)]


def timeline(sections: Sequence[Section], include_current: bool = True) -> List[TimelineRow]:
    """
    Flatten sections into display rows, newest first.

    Layout:
      CURRENT                 (optional)
      <entries of newest section>
      <its year>              (only if the section has a year)
      <entries of the next section>
      ...
    """
    rows: List[TimelineRow] = []
    if include_current:
        rows.append(Divider(CURRENT_LABEL, current=True))

    for section in newest_first(sections):
        rows.extend(section.items)
        if section.year:
            rows.append(Divider(section.year))

    return rows


def ranked(entries: Iterable[MovieEntry]) -> List[MovieEntry]:
    """Every watched+rated entry, best first (stable for ties)"""
    return top_rated(entries, n=None)


def watchlist(entries: Iterable[MovieEntry]) -> List[MovieEntry]:
    return [e for e in entries if not e.watched]


def watchlist_sections(sections: Sequence[Section]) -> List[Section]:
    """
    Unwatched entries per section; sections left empty are dropped.

    Returned in document order, same as parse_sections output. Pass the result
    to timeline() or newest_first() for the newest-first ordering of the all
    view, or use watchlist_timeline().
    """
    filtered = (
        Section(year=s.year, items=tuple(e for e in s.items if not e.watched))
        for s in sections
    )
    return [s for s in filtered if s.items]


def watchlist_timeline(sections: Sequence[Section], include_current: bool = True) -> List[TimelineRow]:
    """Sectioned watchlist laid out exactly like the all view"""
    return timeline(watchlist_sections(sections), include_current)
