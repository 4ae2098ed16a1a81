#!/usr/bin/env python3
"""
Test suite for movielog/parser.py - checklist line and section parsing
"""

import pytest
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from movielog.parser import (
    MovieEntry, MovieLog, MovieLogParser, Section,
    parse_document, parse_entries, parse_line, parse_sections, split_lines,
)


@pytest.fixture
def parser():
    return MovieLogParser()


class TestCheckboxMarker:
    """Only 'x', 'X' and a single space are valid markers"""

    def test_lowercase_x_is_watched(self, parser):
        entry = parser.parse_line("- [x] Heat")
        assert entry == MovieEntry(title="Heat", rating=None, watched=True)

    def test_uppercase_x_is_watched(self, parser):
        assert parser.parse_line("- [X] Heat").watched is True

    def test_space_is_unwatched(self, parser):
        entry = parser.parse_line("- [ ] Stalker")
        assert entry == MovieEntry(title="Stalker", rating=None, watched=False)

    @pytest.mark.parametrize("line", [
        "- [y] Heat",
        "- [  ] Heat",
        "- [\t] Heat",
        "- [] Heat",
        "- [xx] Heat",
    ])
    def test_other_markers_rejected(self, parser, line):
        assert parser.parse_line(line) is None


class TestNotAnEntry:
    """Lines that are not checklist entries return None"""

    @pytest.mark.parametrize("line", [
        "",
        "## 2024",
        "Heat - 8/10",
        "* [x] Heat",
        "-[x] Heat",
        "- [x]Heat",
        "- x Heat",
        "Some prose about movies",
    ])
    def test_returns_none(self, parser, line):
        assert parser.parse_line(line) is None

    def test_checkbox_without_title(self, parser):
        """'- [x]' with nothing after it (already trimmed) is not an entry"""
        assert parser.parse_line("- [x]") is None


class TestRatingExtraction:
    """Trailing 'N/10' ratings with optional separators"""

    def test_hyphen_separator(self, parser):
        entry = parser.parse_line("- [x] Inception - 8.8/10")
        assert entry.title == "Inception"
        assert entry.rating == 8.8

    def test_colon_no_spaces(self, parser):
        entry = parser.parse_line("- [x] Arrival:9/10")
        assert entry.title == "Arrival"
        assert entry.rating == 9.0

    def test_en_dash(self, parser):
        entry = parser.parse_line("- [x] Heat – 8.5/10")
        assert entry.title == "Heat"
        assert entry.rating == 8.5

    def test_em_dash(self, parser):
        entry = parser.parse_line("- [x] Godzilla Minus One — 9.2/10")
        assert entry.title == "Godzilla Minus One"
        assert entry.rating == 9.2

    def test_no_separator(self, parser):
        entry = parser.parse_line("- [x] Alien 9/10")
        assert entry.title == "Alien"
        assert entry.rating == 9.0

    def test_colon_inside_title_kept(self, parser):
        entry = parser.parse_line("- [x] Dune: Part Two: 8/10")
        assert entry.title == "Dune: Part Two"
        assert entry.rating == 8.0

    def test_number_in_title_kept(self, parser):
        entry = parser.parse_line("- [x] Mickey 17 - 6.4/10")
        assert entry.title == "Mickey 17"
        assert entry.rating == 6.4

    def test_rating_not_range_checked(self, parser):
        assert parser.parse_line("- [x] Cats - 12/10").rating == 12.0

    def test_unwatched_may_carry_rating(self, parser):
        """Parser does not gate rating on watched state"""
        entry = parser.parse_line("- [ ] Rewatch - 7/10")
        assert entry.watched is False
        assert entry.rating == 7.0

    def test_rating_not_at_end_is_title(self, parser):
        entry = parser.parse_line("- [x] 8/10 Would Watch Again")
        assert entry.title == "8/10 Would Watch Again"
        assert entry.rating is None

    @pytest.mark.parametrize("line", [
        "- [x] Heat - 8./10",
        "- [x] Heat - 8/100",
    ])
    def test_malformed_rating_left_in_title(self, parser, line):
        entry = parser.parse_line(line.strip())
        assert entry.rating is None

    def test_non_ascii_digits_not_a_rating(self, parser):
        entry = parser.parse_line("- [x] Heat - ٨/10")
        assert entry.rating is None


class TestDanglingSeparator:
    """Unrated titles ending in a bare separator"""

    def test_trailing_hyphen_stripped(self, parser):
        entry = parser.parse_line("- [ ] Dune -")
        assert entry.title == "Dune"
        assert entry.rating is None

    def test_trailing_colon_stripped(self, parser):
        assert parser.parse_line("- [ ] Dune:").title == "Dune"

    def test_only_last_separator_stripped(self, parser):
        assert parser.parse_line("- [ ] Heat--").title == "Heat-"

    def test_inner_separator_kept(self, parser):
        assert parser.parse_line("- [ ] Spider-Man").title == "Spider-Man"


class TestYearHeader:

    @pytest.mark.parametrize("line,year", [
        ("## 2024", "2024"),
        ("##2024", "2024"),
        ("##   1999", "1999"),
    ])
    def test_valid_headers(self, parser, line, year):
        assert parser.parse_year(line) == year

    @pytest.mark.parametrize("line", [
        "# 2024",
        "### 2024",
        "## 24",
        "## 20245",
        "## 2024 favourites",
        "## Year 2024",
    ])
    def test_invalid_headers(self, parser, line):
        assert parser.parse_year(line) is None


class TestSplitLines:

    def test_crlf_and_lf(self):
        assert split_lines("a\r\nb\nc") == ["a", "b", "c"]

    def test_blank_lines_dropped(self):
        assert split_lines("\n  \n a \n\n") == ["a"]

    def test_leading_byte_order_mark_dropped(self):
        assert split_lines("\ufeff- [x] A\r\n- [ ] B") == ["- [x] A", "- [ ] B"]


class TestParseEntries:

    def test_document_order(self):
        text = "- [x] A - 9/10\n## 2024\n- [ ] B\nnotes\n- [X] C"
        assert [e.title for e in parse_entries(text)] == ["A", "B", "C"]

    def test_crlf_document(self):
        text = "- [x] A - 9/10\r\n- [ ] B\r\n"
        assert parse_entries(text) == [
            MovieEntry("A", 9.0, True),
            MovieEntry("B", None, False),
        ]

    def test_indented_lines(self):
        assert parse_entries("   - [x] A   \n\t- [ ] B")[1].title == "B"

    def test_empty_document(self):
        assert parse_entries("") == []

    def test_idempotent(self):
        text = "## 2024\n- [x] A - 9/10\n- [ ] B"
        assert parse_entries(text) == parse_entries(text)


class TestParseSections:

    def test_empty_document(self):
        assert parse_sections("") == []

    def test_header_only(self):
        assert parse_sections("## 2024") == [Section(year="2024", items=())]

    def test_byte_order_mark_before_first_header(self):
        sections = parse_sections("\ufeff## 2024\n- [ ] B\n")
        assert sections == [Section(year="2024", items=(MovieEntry("B", None, False),))]

    def test_byte_order_mark_before_first_entry(self):
        assert [e.title for e in parse_entries("\ufeff- [x] A - 9/10\n- [ ] B")] == ["A", "B"]

    def test_headerless_leading_section(self):
        sections = parse_sections("- [x] A\n## 2024\n- [ ] B")
        assert sections == [
            Section(year=None, items=(MovieEntry("A", None, True),)),
            Section(year="2024", items=(MovieEntry("B", None, False),)),
        ]

    def test_prose_before_first_header_dropped(self):
        sections = parse_sections("# My movies\nsome notes\n## 2024\n- [ ] B")
        assert [s.year for s in sections] == ["2024"]

    def test_consecutive_headers_keep_empty_sections(self):
        sections = parse_sections("## 2023\n## 2024\n- [x] A")
        assert [(s.year, len(s.items)) for s in sections] == [("2023", 0), ("2024", 1)]

    def test_entries_flatten_to_parse_entries(self):
        text = "- [x] A\n## 2024\n- [ ] B\n- [x] C - 7/10\n## 2025\n- [x] D"
        flattened = [e for s in parse_sections(text) for e in s.items]
        assert flattened == parse_entries(text)


class TestParseDocument:

    def test_both_forms(self):
        log = parse_document("## 2024\n- [x] A - 9/10")
        assert isinstance(log, MovieLog)
        assert log.entries == (MovieEntry("A", 9.0, True),)
        assert log.sections == (Section("2024", (MovieEntry("A", 9.0, True),)),)

    def test_empty(self):
        assert parse_document("") == MovieLog()


class TestModuleFunctions:

    def test_parse_line_shortcut(self):
        assert parse_line("- [x] Heat - 8/10") == MovieEntry("Heat", 8.0, True)

    def test_entries_are_immutable(self):
        entry = parse_line("- [x] Heat")
        with pytest.raises(AttributeError):
            entry.title = "Other"
