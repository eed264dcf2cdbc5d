"""
Prometheus metrics for monitoring the parse endpoint.

Defines and exposes metrics for:
- Parse request outcomes
- Upstream (Responses API) latency
- Weekday backfill corrections
- Attachments forwarded to the model

Metrics are exposed via HTTP endpoint for Prometheus scraping.
"""

import logging

from prometheus_client import Counter, Histogram, start_http_server

from calendar_parser.config.settings import get_settings

logger = logging.getLogger(__name__)

# Buckets for upstream latency (in seconds); model calls are slow
UPSTREAM_LATENCY_BUCKETS = (0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 40.0, 80.0, 160.0)


class MetricsCollector:
    """
    Prometheus metrics collector for calendar-parser.

    Usage:
        metrics = get_metrics()
        metrics.start_server()

        metrics.record_parse("success")
        metrics.record_upstream_latency(3.2)
    """

    def __init__(self):
        """Initialize Prometheus metrics."""

        self.parse_requests = Counter(
            "calendar_parser_parse_requests_total",
            "Total parse requests by outcome",
            ["outcome"],  # success, empty_input, upstream_error, invalid_json, ...
        )

        self.events_returned = Counter(
            "calendar_parser_events_returned_total",
            "Total calendar events returned to clients",
        )

        self.weekday_backfills = Counter(
            "calendar_parser_weekday_backfills_total",
            "Range events whose days_of_week was filled from request hints",
        )

        self.images_forwarded = Counter(
            "calendar_parser_images_forwarded_total",
            "Image attachments forwarded to the model",
        )

        self.upstream_latency = Histogram(
            "calendar_parser_upstream_latency_seconds",
            "Time spent waiting on the Responses API",
            buckets=UPSTREAM_LATENCY_BUCKETS,
        )

        self._server_started = False

    def start_server(self, port: int | None = None) -> None:
        """
        Start Prometheus metrics HTTP server.

        Args:
            port: Port to listen on (defaults to settings.metrics_port)
        """
        if self._server_started:
            return

        port = port or get_settings().metrics_port
        start_http_server(port)
        self._server_started = True
        logger.info(f"Metrics server started on port {port}")

    def record_parse(self, outcome: str, event_count: int = 0) -> None:
        """Record one parse request outcome."""
        self.parse_requests.labels(outcome=outcome).inc()
        if event_count:
            self.events_returned.inc(event_count)

    def record_upstream_latency(self, seconds: float) -> None:
        """Record time spent on one upstream call."""
        self.upstream_latency.observe(seconds)

    def record_backfill(self, count: int) -> None:
        """Record weekday backfill corrections."""
        if count:
            self.weekday_backfills.inc(count)

    def record_images(self, count: int) -> None:
        """Record image attachments forwarded upstream."""
        if count:
            self.images_forwarded.inc(count)


# Global metrics instance
_metrics: MetricsCollector | None = None


def get_metrics() -> MetricsCollector:
    """Get or create the global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics
