#!/usr/bin/env python3
"""
Formatting helpers shared by the CLI report and the dashboard
"""

from typing import Dict, Optional

from movielog.constants import RATING_BANDS, RATING_BAND_LOWEST
from movielog.parser import MovieEntry


def rating_band(rating: Optional[float]) -> str:
    """Colour band class for a rating ('' when unrated)"""
    if rating is None:
        return ''
    for lower, band in RATING_BANDS:
        if rating >= lower:
            return band
    return RATING_BAND_LOWEST


def format_rating(rating: Optional[float]) -> str:
    """'8.0' style, one decimal; '' when unrated"""
    if rating is None:
        return ''
    return f"{rating:.1f}"


def shows_rating(entry: MovieEntry) -> bool:
    """Ratings are displayed only for watched entries"""
    return entry.watched and entry.rating is not None


def format_entry(entry: MovieEntry) -> str:
    """Plain-text rendering of one entry, e.g. '[x] Title  8.5/10'"""
    box = '[x]' if entry.watched else '[ ]'
    line = f"{box} {entry.title}"
    if shows_rating(entry):
        line += f"  {format_rating(entry.rating)}/10"
    return line


def distribution_bars(distribution: Dict[str, int]) -> Dict[str, float]:
    """Bar width per bucket as a percentage of the largest bucket"""
    max_count = max(distribution.values(), default=0)
    return {
        label: (count / max_count * 100 if max_count > 0 else 0.0)
        for label, count in distribution.items()
    }
