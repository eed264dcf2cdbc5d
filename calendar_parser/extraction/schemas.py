"""Schema definitions for extracted calendar events.

Provides the CalendarEvent dataclass and the strict ``calendar_events``
JSON Schema sent to the model as its output contract.
"""

import copy
from dataclasses import dataclass, field
from typing import Any

SCHEMA_NAME = "calendar_events"
SCHEMA_VERSION = "2"

# Sunday=0 ... Saturday=6
WEEKDAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

EVENT_FIELDS: tuple[str, ...] = (
    "date",
    "start_date",
    "end_date",
    "days_of_week",
    "title",
    "details",
    "all_day",
    "start_time",
    "end_time",
)

_CALENDAR_EVENTS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "events": {
            "type": "array",
            "items": {
                "type": "object",
                "additionalProperties": False,
                "properties": {
                    "date": {
                        "type": ["string", "null"],
                        "description": "YYYY-MM-DD for single-day events",
                    },
                    "start_date": {
                        "type": ["string", "null"],
                        "description": "YYYY-MM-DD for range start",
                    },
                    "end_date": {
                        "type": ["string", "null"],
                        "description": "YYYY-MM-DD for range end (inclusive)",
                    },
                    "days_of_week": {
                        "type": ["array", "null"],
                        "items": {"type": "integer", "enum": list(range(7))},
                        "description": (
                            "Weekday ordinals (Sunday=0 ... Saturday=6) for weekly "
                            "recurrence within start_date..end_date, else null"
                        ),
                    },
                    "title": {"type": "string"},
                    "details": {"type": "string"},
                    "all_day": {"type": "boolean"},
                    "start_time": {
                        "type": ["string", "null"],
                        "description": "HH:MM 24h or null",
                    },
                    "end_time": {
                        "type": ["string", "null"],
                        "description": "HH:MM 24h or null",
                    },
                },
                "required": list(EVENT_FIELDS),
            },
        }
    },
    "required": ["events"],
}


def calendar_events_schema() -> dict[str, Any]:
    """Return a fresh copy of the strict output schema."""
    return copy.deepcopy(_CALENDAR_EVENTS_SCHEMA)


@dataclass
class CalendarEvent:
    """
    A calendar event as returned by the model.

    Exactly one of ``date`` or ``start_date``/``end_date`` is expected to be set.
    A non-empty ``days_of_week`` turns a range into a weekly recurrence.

    Attributes:
        title: Short human-readable label.
        details: Free-text description.
        all_day: When true, start_time/end_time are null.
        date: Single-day date (YYYY-MM-DD).
        start_date: Range start (YYYY-MM-DD).
        end_date: Range end, inclusive (YYYY-MM-DD).
        days_of_week: Weekday ordinals, Sunday=0 ... Saturday=6.
        start_time: HH:MM 24h.
        end_time: HH:MM 24h.
    """

    title: str
    details: str = ""
    all_day: bool = False
    date: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    days_of_week: list[int] | None = field(default=None)
    start_time: str | None = None
    end_time: str | None = None

    @property
    def is_range(self) -> bool:
        return bool(self.start_date) and bool(self.end_date) and not self.date

    @property
    def is_single_day(self) -> bool:
        return bool(self.date)

    @property
    def is_recurring(self) -> bool:
        return self.is_range and bool(self.days_of_week)

    def weekday_names(self) -> list[str]:
        """Names of the recurrence weekdays, in ordinal order."""
        return [WEEKDAY_NAMES[d] for d in sorted(set(self.days_of_week or [])) if 0 <= d <= 6]

    def to_dict(self) -> dict[str, Any]:
        """Convert event to dictionary for JSON serialization."""
        return {
            "date": self.date,
            "start_date": self.start_date,
            "end_date": self.end_date,
            "days_of_week": list(self.days_of_week) if self.days_of_week is not None else None,
            "title": self.title,
            "details": self.details,
            "all_day": self.all_day,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CalendarEvent":
        """
        Create CalendarEvent from dictionary.

        Args:
            data: Dictionary with event fields (model output shape).

        Returns:
            CalendarEvent instance.
        """
        days = data.get("days_of_week")
        return cls(
            title=data.get("title") or "",
            details=data.get("details") or "",
            all_day=bool(data.get("all_day", False)),
            date=data.get("date"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
            days_of_week=[int(d) for d in days] if days is not None else None,
            start_time=data.get("start_time"),
            end_time=data.get("end_time"),
        )
