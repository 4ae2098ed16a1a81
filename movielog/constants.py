#!/usr/bin/env python3
"""
Shared constants for the movie log parser and views

Single source of truth for the checklist grammar, rating buckets and defaults.
DO NOT duplicate these values in other modules - import from here instead.
"""

from pathlib import Path

# Characters accepted between a title and its rating ("Title - 8/10", "Title: 8/10")
# Hyphen, en-dash, em-dash, colon. Nothing else.
RATING_SEPARATORS = '-\u2013\u2014:'

# Checkbox markers
WATCHED_MARKER = 'x'
UNWATCHED_MARKER = ' '

# Rating distribution buckets, checked top-down (inclusive lower bound).
# The last bucket has no lower bound and catches everything below 6.0.
DISTRIBUTION_BUCKETS = [
    ('9.0+', 9.0),
    ('8.0-8.9', 8.0),
    ('7.0-7.9', 7.0),
    ('6.0-6.9', 6.0),
    ('<6.0', None),
]

# Colour band classes for a single rating, highest first
RATING_BANDS = [
    (9.7, 'rating-10'),
    (9.0, 'rating-9'),
    (8.0, 'rating-8'),
    (7.0, 'rating-7'),
    (6.0, 'rating-6'),
]
RATING_BAND_LOWEST = 'rating-lt6'

DEFAULT_TOP_N = 10

# Label of the divider that sits above the most recent section
CURRENT_LABEL = 'CURRENT'

DEFAULT_CONFIG_PATH = Path('config.yaml')
DEFAULT_SOURCE = 'data/movies.txt'
DEFAULT_TIMEOUT = 10  # seconds, HTTP sources only
