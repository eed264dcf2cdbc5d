"""Fixtures for extraction tests."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from calendar_parser.extraction.client import ResponsesClient
from calendar_parser.extraction.request_builder import ImageAttachment

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16


def _events_body(events: list[dict]) -> dict:
    return {"output_text": json.dumps({"events": events})}


@pytest.fixture
def range_event() -> dict:
    """A whole-year range event with days_of_week missing."""
    return {
        "date": None,
        "start_date": "2025-01-01",
        "end_date": "2025-12-31",
        "days_of_week": None,
        "title": "Yoga",
        "details": "",
        "all_day": False,
        "start_time": "18:00",
        "end_time": "19:00",
    }


@pytest.fixture
def single_day_event() -> dict:
    return {
        "date": "2025-05-03",
        "start_date": None,
        "end_date": None,
        "days_of_week": None,
        "title": "Dentist",
        "details": "",
        "all_day": False,
        "start_time": "14:00",
        "end_time": None,
    }


@pytest.fixture
def png_image() -> ImageAttachment:
    return ImageAttachment(data=PNG_BYTES, content_type="image/png", filename="flyer.png")


@pytest.fixture
def mock_client(single_day_event):
    """ResponsesClient mock returning one single-day event."""
    client = MagicMock(spec=ResponsesClient)
    client.create_response = AsyncMock(return_value=_events_body([single_day_event]))
    return client


@pytest.fixture
def events_body():
    """Build a convenience-shaped response body from an events list."""
    return _events_body
