"""HTTP API for calendar event extraction."""

from calendar_parser.api.app import create_app

__all__ = ["create_app"]
