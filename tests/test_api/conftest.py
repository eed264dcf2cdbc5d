"""Shared fixtures for API tests."""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from calendar_parser.api.app import create_app
from calendar_parser.api.dependencies import get_extraction_service
from calendar_parser.extraction.client import ResponsesClient
from calendar_parser.extraction.config import ExtractionConfig
from calendar_parser.extraction.service import EventExtractionService

SAMPLE_EVENT = {
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
def sample_event() -> dict:
    return dict(SAMPLE_EVENT)


@pytest.fixture
def mock_upstream():
    """ResponsesClient mock returning SAMPLE_EVENT."""
    client = MagicMock(spec=ResponsesClient)
    client.create_response = AsyncMock(
        return_value={"output_text": json.dumps({"events": [SAMPLE_EVENT]})}
    )
    return client


@pytest.fixture
def api_config() -> ExtractionConfig:
    return ExtractionConfig(_env_file=None, assume_year=2025, max_image_bytes=64)


@pytest.fixture
def extraction_service(api_config, test_settings, mock_upstream) -> EventExtractionService:
    return EventExtractionService(config=api_config, settings=test_settings, client=mock_upstream)


@pytest.fixture
def client(extraction_service):
    """Test client with the extraction service overridden."""
    app = create_app()
    app.dependency_overrides[get_extraction_service] = lambda: extraction_service

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def unconfigured_client(api_config, unconfigured_settings):
    """Test client whose service has no upstream credential."""
    service = EventExtractionService(config=api_config, settings=unconfigured_settings)
    app = create_app()
    app.dependency_overrides[get_extraction_service] = lambda: service

    with TestClient(app) as c:
        yield c

    app.dependency_overrides.clear()
