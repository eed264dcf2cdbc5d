"""Heuristic pre-analysis of request text.

Detects weekday names and whole-year recurrence phrasing. The results are
embedded in the model instructions and drive the weekday backfill that runs
after the model call. Matching is substring based: weekday names
inside longer words ("Monday's", "Thurs.") still count.
"""

import re
from dataclasses import dataclass

# Sunday=0 ... Saturday=6
_WEEKDAY_PATTERNS: tuple[tuple[int, re.Pattern[str]], ...] = (
    (0, re.compile(r"sun(?:day)?", re.IGNORECASE)),
    (1, re.compile(r"mon(?:day)?", re.IGNORECASE)),
    (2, re.compile(r"tue(?:s(?:day)?)?", re.IGNORECASE)),
    (3, re.compile(r"wed(?:s|nesday)?", re.IGNORECASE)),
    (4, re.compile(r"thu(?:r(?:s(?:day)?)?)?", re.IGNORECASE)),
    (5, re.compile(r"fri(?:day)?", re.IGNORECASE)),
    (6, re.compile(r"sat(?:urday)?", re.IGNORECASE)),
)

YEAR_INTENT_PHRASES: tuple[str, ...] = (
    "all year",
    "throughout the year",
    "every week",
    "for the year",
    "of the year",
    "entire year",
    "whole year",
    "year round",
    "year-round",
)


def _phrase_pattern(phrase: str) -> str:
    # Any run of whitespace between words; a hyphen stays literal.
    return r"\s+".join(re.escape(word) for word in phrase.split())


_YEAR_INTENT_RE = re.compile(
    "|".join(_phrase_pattern(p) for p in YEAR_INTENT_PHRASES),
    re.IGNORECASE,
)


def detect_weekdays(text: str) -> list[int]:
    """
    Find weekday names mentioned anywhere in the text.

    Args:
        text: Free-form request text.

    Returns:
        Sorted, de-duplicated weekday ordinals (Sunday=0 ... Saturday=6).
    """
    if not text:
        return []
    return [ordinal for ordinal, pattern in _WEEKDAY_PATTERNS if pattern.search(text)]


def implies_full_year(text: str) -> bool:
    """Return True when the text implies recurrence across the whole year."""
    if not text:
        return False
    return _YEAR_INTENT_RE.search(text) is not None


@dataclass(frozen=True)
class ExtractionHints:
    """Hints derived from the request text before the model call."""

    weekdays: tuple[int, ...] = ()
    full_year: bool = False

    @property
    def should_backfill_weekdays(self) -> bool:
        return bool(self.weekdays) and self.full_year


def analyze_text(text: str) -> ExtractionHints:
    """Run both detectors over the request text."""
    return ExtractionHints(
        weekdays=tuple(detect_weekdays(text)),
        full_year=implies_full_year(text),
    )
