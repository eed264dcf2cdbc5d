"""Observability layer - logging and metrics."""

from calendar_parser.observability.logging import setup_logging
from calendar_parser.observability.metrics import MetricsCollector, get_metrics

__all__ = ["setup_logging", "MetricsCollector", "get_metrics"]
