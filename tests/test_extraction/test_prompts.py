"""Tests for instruction text assembly."""

from calendar_parser.extraction.hints import ExtractionHints
from calendar_parser.extraction.prompts import (
    FULL_YEAR_HINT,
    build_instructions,
    format_weekdays,
)


class TestBuildInstructions:
    """Tests for build_instructions."""

    def test_year_substituted(self):
        text = build_instructions(2031)
        assert "Assume the year is 2031" in text
        assert "{year}" not in text

    def test_single_line(self):
        assert "\n" not in build_instructions(2025)

    def test_mentions_days_of_week_rule(self):
        text = build_instructions(2025)
        assert "days_of_week" in text
        assert "Never expand a weekly pattern" in text

    def test_no_hint_lines_without_hints(self):
        text = build_instructions(2025, ExtractionHints())
        assert "mentions these weekdays" not in text
        assert FULL_YEAR_HINT not in text

    def test_weekday_hint_only(self):
        text = build_instructions(2025, ExtractionHints(weekdays=(2,)))
        assert "Tuesday (2)" in text
        assert FULL_YEAR_HINT not in text

    def test_full_year_hint(self):
        text = build_instructions(2025, ExtractionHints(weekdays=(0, 6), full_year=True))
        assert "Sunday (0), Saturday (6)" in text
        assert FULL_YEAR_HINT in text


def test_format_weekdays():
    assert format_weekdays([1, 4]) == "Monday (1), Thursday (4)"
