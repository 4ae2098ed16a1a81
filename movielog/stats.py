#!/usr/bin/env python3
"""
Aggregate statistics over parsed movie entries

Only watched entries with a rating count towards the average, the top list
and the distribution. An unwatched entry that happens to carry a rating is
ignored there.
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from movielog.constants import DEFAULT_TOP_N, DISTRIBUTION_BUCKETS
from movielog.parser import MovieEntry


@dataclass(frozen=True)
class MovieStats:
    """Summary numbers for one movie log"""
    watched_count: int = 0
    unwatched_count: int = 0
    average_rating: float = 0.0
    top: Tuple[MovieEntry, ...] = ()
    distribution: Mapping[str, int] = field(default_factory=lambda: MappingProxyType({}))


def rated_entries(entries: Iterable[MovieEntry]) -> List[MovieEntry]:
    """Watched entries that have a rating, in input order"""
    return [e for e in entries if e.watched and e.rating is not None]


def round_rating(value: float) -> float:
    """Round to one decimal, halves away from zero (8.25 -> 8.3)"""
    if not math.isfinite(value):
        return value
    return float(Decimal(value).quantize(Decimal('0.1'), rounding=ROUND_HALF_UP))


def average_rating(entries: Iterable[MovieEntry]) -> float:
    """Mean rating of watched+rated entries, 0.0 when there are none"""
    rated = rated_entries(entries)
    if not rated:
        return 0.0
    return round_rating(sum(e.rating for e in rated) / len(rated))


def top_rated(entries: Iterable[MovieEntry], n: Optional[int] = DEFAULT_TOP_N) -> List[MovieEntry]:
    """
    Highest rated watched entries, best first.

    sorted() is stable, so equal ratings keep their input order.
    n=None returns every rated entry.
    """
    ranked = sorted(rated_entries(entries), key=lambda e: e.rating, reverse=True)
    return ranked if n is None else ranked[:max(n, 0)]


def bucket_for(rating: float) -> str:
    """Label of the first distribution bucket whose lower bound the rating reaches"""
    for label, lower in DISTRIBUTION_BUCKETS:
        if lower is None or rating >= lower:
            return label
    return DISTRIBUTION_BUCKETS[-1][0]


def rating_distribution(entries: Iterable[MovieEntry]) -> Dict[str, int]:
    """Count of watched+rated entries per bucket, all five buckets always present"""
    distribution = {label: 0 for label, _ in DISTRIBUTION_BUCKETS}
    for entry in rated_entries(entries):
        distribution[bucket_for(entry.rating)] += 1
    return distribution


def compute_stats(entries: Iterable[MovieEntry], top_n: int = DEFAULT_TOP_N) -> MovieStats:
    entries = list(entries)
    return MovieStats(
        watched_count=sum(1 for e in entries if e.watched),
        unwatched_count=sum(1 for e in entries if not e.watched),
        average_rating=average_rating(entries),
        top=tuple(top_rated(entries, top_n)),
        distribution=MappingProxyType(rating_distribution(entries)),
    )
