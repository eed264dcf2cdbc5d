"""Pytest fixtures for calendar-parser tests."""

import pytest

from calendar_parser.api import dependencies
from calendar_parser.config.settings import Settings, get_settings
from calendar_parser.extraction.config import ExtractionConfig

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "OPENAI_TIMEOUT_SECONDS",
    "HOST",
    "PORT",
    "ENVIRONMENT",
    "LOG_LEVEL",
    "CORS_ORIGINS",
    "STATIC_DIR",
    "EXTRACTION_MAX_TEXT_CHARS",
    "EXTRACTION_MAX_IMAGES",
    "EXTRACTION_MAX_IMAGE_BYTES",
    "EXTRACTION_ASSUME_YEAR",
    "EXTRACTION_BACKFILL_WEEKDAYS",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch):
    """Keep host env vars and cached singletons out of tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    dependencies._extraction_service = None
    yield
    get_settings.cache_clear()
    dependencies._extraction_service = None


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(
        _env_file=None,
        environment="development",
        log_level="DEBUG",
        openai_api_key="sk-test",
        openai_model="gpt-5",
        openai_base_url="https://api.openai.test/v1",
    )


@pytest.fixture
def unconfigured_settings() -> Settings:
    """Settings without an upstream credential."""
    return Settings(_env_file=None, openai_api_key=None)


@pytest.fixture
def extraction_config() -> ExtractionConfig:
    """Extraction config pinned to a fixed year."""
    return ExtractionConfig(_env_file=None, assume_year=2025)


@pytest.fixture
def message_body():
    """Build a Responses API body with the text inside output[] message content."""

    def _build(output_text: str) -> dict:
        return {
            "id": "resp_test",
            "object": "response",
            "output": [
                {"type": "reasoning", "summary": []},
                {
                    "type": "message",
                    "role": "assistant",
                    "content": [{"type": "output_text", "text": output_text}],
                },
            ],
        }

    return _build
