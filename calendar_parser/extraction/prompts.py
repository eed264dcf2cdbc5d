"""Instruction text for the calendar extraction model.

Contains:
- Base extraction rules (year assumption, date vs. range, recurrence, times)
- Optional hint lines built from the request text
"""

from calendar_parser.extraction.hints import ExtractionHints
from calendar_parser.extraction.schemas import WEEKDAY_NAMES

# ── Extraction Rules ───────────────────────────────────────

BASE_RULES = (
    "Extract calendar events from the user's text and images.",
    "Assume the year is {year} unless explicitly stated otherwise.",
    "If the user gives a date range (e.g., 'Jan 5th to Jan 16th'), set date=null and set start_date/end_date.",
    "If single-day, set date and leave start_date/end_date null.",
    (
        "If an event repeats weekly on specific weekdays (e.g., 'every Monday and Thursday'), "
        "return ONE event with start_date/end_date covering the whole period and days_of_week "
        "set to the weekday numbers (Sunday=0 ... Saturday=6). Never expand a weekly pattern "
        "into separate daily events. Otherwise set days_of_week=null."
    ),
    (
        "If no time is given, set all_day=true and start_time/end_time=null. "
        "Otherwise set all_day=false and use HH:MM 24-hour times."
    ),
    "Return ONLY JSON that matches the schema exactly.",
)

# ── Hint Lines ─────────────────────────────────────────────

WEEKDAY_HINT = "The text mentions these weekdays: {weekdays}."
FULL_YEAR_HINT = (
    "The text describes something that recurs across the whole year; use one range "
    "event spanning the year with days_of_week rather than individual dates."
)


def format_weekdays(weekdays: tuple[int, ...] | list[int]) -> str:
    """Render ordinals as 'Monday (1), Thursday (4)'."""
    return ", ".join(f"{WEEKDAY_NAMES[d]} ({d})" for d in weekdays)


def build_instructions(year: int, hints: ExtractionHints | None = None) -> str:
    """
    Build the system instruction string.

    Args:
        year: Year the model assumes when the text omits one.
        hints: Optional weekday/year hints embedded after the rules.

    Returns:
        Single-line instruction text.
    """
    lines = [rule.format(year=year) for rule in BASE_RULES]
    if hints is not None:
        if hints.weekdays:
            lines.append(WEEKDAY_HINT.format(weekdays=format_weekdays(hints.weekdays)))
        if hints.full_year:
            lines.append(FULL_YEAR_HINT)
    return " ".join(lines)
