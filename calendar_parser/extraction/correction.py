"""Post-correction of model output.

The model sometimes returns a weekly recurrence as a plain date range and
drops ``days_of_week``. When the request text named weekdays and implied a
whole-year pattern, those weekdays are written back onto the affected range
events. No second model call is made.
"""

from typing import Any, Sequence

from calendar_parser.extraction.hints import ExtractionHints
from calendar_parser.extraction.schemas import CalendarEvent


def _needs_weekdays(event: dict[str, Any]) -> bool:
    return not event.get("days_of_week") and CalendarEvent.from_dict(event).is_range


def apply_weekday_backfill(
    events: Sequence[dict[str, Any]],
    hints: ExtractionHints,
) -> list[dict[str, Any]]:
    """
    Inject hinted weekdays into range events that are missing them.

    Events that already carry days_of_week and single-day events are returned
    unchanged. Input dicts are never mutated; corrected events are copies.

    Args:
        events: Parsed ``events`` array from the model.
        hints: Weekday/year hints from the request text.

    Returns:
        New list of events.
    """
    if not hints.should_backfill_weekdays:
        return list(events)

    corrected: list[dict[str, Any]] = []
    for event in events:
        if isinstance(event, dict) and _needs_weekdays(event):
            event = {**event, "days_of_week": list(hints.weekdays)}
        corrected.append(event)
    return corrected


def count_backfilled(before: Sequence[Any], after: Sequence[Any]) -> int:
    """Number of events the backfill changed."""
    return sum(1 for old, new in zip(before, after) if old is not new)
