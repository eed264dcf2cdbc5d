"""
Calendar event extraction.

Turns free text and images into calendar events through one schema-constrained
Responses API call, with heuristic weekday/year hints before the call and a
weekday backfill after it.

Components:
- ExtractionConfig: Limits and toggles for the pipeline
- CalendarEvent: Dataclass for one extracted event
- ExtractionHints / analyze_text: Weekday and whole-year detection
- build_request_payload: Pure payload builder
- ResponsesClient: Async client for POST /responses
- extract_output_text / decode_events: Response unwrapping and JSON decode
- apply_weekday_backfill: Post-correction of range events
- EventExtractionService: Orchestrates one request
"""

from calendar_parser.extraction.client import ResponsesClient
from calendar_parser.extraction.config import ExtractionConfig
from calendar_parser.extraction.correction import apply_weekday_backfill
from calendar_parser.extraction.errors import (
    AttachmentTooLargeError,
    EmptyInputError,
    ExtractionError,
    InvalidModelJSONError,
    MissingCredentialsError,
    MissingOutputTextError,
    UpstreamAPIError,
)
from calendar_parser.extraction.hints import (
    ExtractionHints,
    analyze_text,
    detect_weekdays,
    implies_full_year,
)
from calendar_parser.extraction.request_builder import ImageAttachment, build_request_payload
from calendar_parser.extraction.response import decode_events, extract_output_text
from calendar_parser.extraction.schemas import CalendarEvent, SCHEMA_NAME, SCHEMA_VERSION
from calendar_parser.extraction.service import EventExtractionService, ExtractionResult

__all__ = [
    "AttachmentTooLargeError",
    "CalendarEvent",
    "EmptyInputError",
    "EventExtractionService",
    "ExtractionConfig",
    "ExtractionError",
    "ExtractionHints",
    "ExtractionResult",
    "ImageAttachment",
    "InvalidModelJSONError",
    "MissingCredentialsError",
    "MissingOutputTextError",
    "ResponsesClient",
    "SCHEMA_NAME",
    "SCHEMA_VERSION",
    "UpstreamAPIError",
    "analyze_text",
    "apply_weekday_backfill",
    "build_request_payload",
    "decode_events",
    "detect_weekdays",
    "extract_output_text",
    "implies_full_year",
]
