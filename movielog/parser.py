#!/usr/bin/env python3
"""
Movie log parser for checklist-style watch logs

Grammar (one record per line, surrounding whitespace ignored):
  - [x] Title - 8.5/10     watched, rated
  - [X] Title              watched, unrated
  - [ ] Title              unwatched
  ## 2024                  section header (exactly 4 digits)

Anything else is skipped silently. Parsing never raises.
"""

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Tuple

from movielog.constants import RATING_SEPARATORS, WATCHED_MARKER

logger = logging.getLogger(__name__)

BYTE_ORDER_MARK = '\ufeff'

_SEP = '[' + re.escape(RATING_SEPARATORS) + ']'


@dataclass(frozen=True)
class MovieEntry:
    """One parsed checklist line"""
    title: str
    rating: Optional[float] = None  # Not range-checked; only meaningful when watched
    watched: bool = False


@dataclass(frozen=True)
class Section:
    """Entries under one '## YYYY' header (year is None before the first header)"""
    year: Optional[str] = None
    items: Tuple[MovieEntry, ...] = ()


@dataclass(frozen=True)
class MovieLog:
    """A whole document parsed once, both as a flat list and as sections"""
    entries: Tuple[MovieEntry, ...] = ()
    sections: Tuple[Section, ...] = ()


def split_lines(text: str) -> List[str]:
    """Split on LF or CRLF, strip each line, drop blanks."""
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK):]
    lines = (line.strip() for line in re.split(r'\r?\n', text))
    return [line for line in lines if line]


class MovieLogParser:
    """Parse movie entries and year sections from checklist text"""

    # Checkbox marker is the only case-insensitive part of the grammar.
    # The body excludes line terminators so a stray CR never ends up in a title.
    LINE_PATTERN = re.compile(r'- \[([xX ])\] ([^\r\n\u2028\u2029]+)\Z')

    # Optional separator, optional whitespace, decimal number, '/10' at end of line
    RATING_PATTERN = re.compile(r'(?:\s*' + _SEP + r')?\s*([0-9]+(?:\.[0-9]+)?)/10\Z')

    # "Dune -" with nothing after the separator
    DANGLING_SEPARATOR = re.compile(r'\s*' + _SEP + r'\s*\Z')

    YEAR_HEADER = re.compile(r'##\s*([0-9]{4})\s*\Z')

    def _split_title(self, raw: str) -> Tuple[str, Optional[float]]:
        """Separate the title from a trailing 'N/10' rating, if any"""
        match = self.RATING_PATTERN.search(raw)
        if match:
            return raw[:match.start()].strip(), float(match.group(1))

        return self.DANGLING_SEPARATOR.sub('', raw, count=1).strip(), None

    def parse_line(self, line: str) -> Optional[MovieEntry]:
        """
        Parse one trimmed, non-empty line.

        Returns None for headers, prose and malformed checkboxes
        (e.g. '- [y] Title' or '- [  ] Title').
        """
        match = self.LINE_PATTERN.match(line)
        if not match:
            return None

        watched = match.group(1).lower() == WATCHED_MARKER
        title, rating = self._split_title(match.group(2).strip())
        return MovieEntry(title=title, rating=rating, watched=watched)

    def parse_year(self, line: str) -> Optional[str]:
        """Return the 4-digit year of a '## YYYY' header line, else None"""
        match = self.YEAR_HEADER.match(line)
        return match.group(1) if match else None

    def parse_entries(self, text: str) -> List[MovieEntry]:
        """All entries in document order, ignoring section headers"""
        lines = split_lines(text)
        entries = []
        for line in lines:
            entry = self.parse_line(line)
            if entry:
                entries.append(entry)

        logger.debug(f"Parsed {len(entries)} entries from {len(lines)} lines")
        return entries

    def parse_sections(self, text: str) -> List[Section]:
        """
        Group entries by '## YYYY' headers, in document order.

        Entries before the first header form a section with year=None, which
        is dropped when it has no entries. A header with no entries after it
        still produces an (empty) section.
        """
        sections = []
        year = None
        items: List[MovieEntry] = []

        def flush():
            if items or year is not None:
                sections.append(Section(year=year, items=tuple(items)))

        for line in split_lines(text):
            header_year = self.parse_year(line)
            if header_year is not None:
                flush()
                year, items = header_year, []
                continue

            entry = self.parse_line(line)
            if entry:
                items.append(entry)

        flush()
        logger.debug(f"Parsed {len(sections)} sections")
        return sections

    def parse_document(self, text: str) -> MovieLog:
        """Parse text once into both flat and sectioned forms"""
        return MovieLog(
            entries=tuple(self.parse_entries(text)),
            sections=tuple(self.parse_sections(text)),
        )


_default_parser = MovieLogParser()

parse_line = _default_parser.parse_line
parse_entries = _default_parser.parse_entries
parse_sections = _default_parser.parse_sections
parse_document = _default_parser.parse_document
