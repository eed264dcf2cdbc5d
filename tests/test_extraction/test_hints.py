"""Tests for weekday and whole-year detection."""

import pytest

from calendar_parser.extraction.hints import (
    YEAR_INTENT_PHRASES,
    ExtractionHints,
    analyze_text,
    detect_weekdays,
    implies_full_year,
)


class TestDetectWeekdays:
    """Tests for detect_weekdays."""

    @pytest.mark.parametrize(
        "name,ordinal",
        [
            ("Sunday", 0),
            ("sun", 0),
            ("MONDAY", 1),
            ("Mon", 1),
            ("tuesday", 2),
            ("Tues", 2),
            ("tue", 2),
            ("Wednesday", 3),
            ("weds", 3),
            ("wed", 3),
            ("Thursday", 4),
            ("thurs", 4),
            ("Thu", 4),
            ("friday", 5),
            ("FRI", 5),
            ("Saturday", 6),
            ("sat", 6),
        ],
    )
    def test_single_weekday(self, name, ordinal):
        """Full and abbreviated names map to their ordinal in any case."""
        assert detect_weekdays(f"Open {name} evenings") == [ordinal]

    def test_multiple_weekdays_sorted_unique(self):
        """Results are sorted and de-duplicated."""
        text = "Thursday and Monday, plus another Monday session"
        assert detect_weekdays(text) == [1, 4]

    def test_no_weekdays(self):
        assert detect_weekdays("Dentist appointment May 3 at 2pm") == []

    def test_empty_text(self):
        assert detect_weekdays("") == []

    def test_matches_inside_longer_words(self):
        """Possessives and abbreviations with punctuation still count."""
        assert detect_weekdays("Monday's class, Thurs. lab") == [1, 4]


class TestImpliesFullYear:
    """Tests for implies_full_year."""

    @pytest.mark.parametrize("phrase", YEAR_INTENT_PHRASES)
    def test_every_phrase_detected(self, phrase):
        assert implies_full_year(f"Classes run {phrase} at the studio") is True

    @pytest.mark.parametrize("phrase", YEAR_INTENT_PHRASES)
    def test_case_insensitive(self, phrase):
        assert implies_full_year(phrase.upper()) is True

    def test_extra_whitespace_between_words(self):
        assert implies_full_year("open all   year") is True

    def test_no_phrase(self):
        assert implies_full_year("Concert on March 3rd") is False

    def test_empty_text(self):
        assert implies_full_year("") is False


class TestAnalyzeText:
    """Tests for analyze_text and ExtractionHints."""

    def test_weekly_year_pattern(self):
        hints = analyze_text("Yoga every Monday and Thursday all year")

        assert hints.weekdays == (1, 4)
        assert hints.full_year is True
        assert hints.should_backfill_weekdays is True

    def test_weekdays_without_year_intent(self):
        hints = analyze_text("Meeting Tuesday at 10")

        assert hints.weekdays == (2,)
        assert hints.full_year is False
        assert hints.should_backfill_weekdays is False

    def test_year_intent_without_weekdays(self):
        hints = analyze_text("Gym membership valid all year")

        assert hints.weekdays == ()
        assert hints.should_backfill_weekdays is False

    def test_default_hints_are_empty(self):
        hints = ExtractionHints()
        assert hints.weekdays == ()
        assert hints.full_year is False
