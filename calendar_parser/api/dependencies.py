"""
Dependency injection for FastAPI endpoints.
"""

from calendar_parser.config.settings import get_settings
from calendar_parser.extraction.config import ExtractionConfig
from calendar_parser.extraction.service import EventExtractionService

# Global service instance (initialized on first request)
_extraction_service: EventExtractionService | None = None


def get_extraction_service() -> EventExtractionService:
    """
    Get extraction service instance.

    Creates a singleton service. The upstream credential is checked per
    request, so this never fails when OPENAI_API_KEY is unset.
    """
    global _extraction_service

    if _extraction_service is None:
        _extraction_service = EventExtractionService(
            config=ExtractionConfig(),
            settings=get_settings(),
        )

    return _extraction_service


async def cleanup_dependencies() -> None:
    """Clean up global dependencies on shutdown."""
    global _extraction_service

    _extraction_service = None
