"""Calendar event extraction service.

Runs one extraction request end to end:
normalize input -> weekday/year hints -> build payload -> Responses API call ->
unwrap output text -> decode JSON -> weekday backfill.

The service holds configuration only; every call is independent.
"""

import time
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Sequence

import structlog

from calendar_parser.config.settings import Settings, get_settings
from calendar_parser.extraction.client import ResponsesClient
from calendar_parser.extraction.config import ExtractionConfig
from calendar_parser.extraction.correction import apply_weekday_backfill, count_backfilled
from calendar_parser.extraction.errors import (
    AttachmentTooLargeError,
    EmptyInputError,
    ExtractionError,
    MissingCredentialsError,
)
from calendar_parser.extraction.hints import ExtractionHints, analyze_text
from calendar_parser.extraction.request_builder import (
    ImageAttachment,
    build_request_payload,
    select_images,
)
from calendar_parser.extraction.response import decode_events, extract_output_text
from calendar_parser.extraction.schemas import SCHEMA_NAME, SCHEMA_VERSION
from calendar_parser.observability.metrics import MetricsCollector, get_metrics

logger = structlog.get_logger(__name__)


@dataclass
class ExtractionResult:
    """Outcome of one extraction request."""

    events: list[dict[str, Any]]
    hints: ExtractionHints = field(default_factory=ExtractionHints)
    backfilled: int = 0
    images_used: int = 0
    latency_ms: float = 0.0


class EventExtractionService:
    """
    Turns free text and images into calendar events via the Responses API.

    The upstream client is created lazily; the credential is checked only
    once a request needs the model.

    Args:
        config: Extraction limits and heuristics toggles.
        settings: Application settings (credential, model, base URL).
        client: Pre-built client. Skips the credential check when given.
    """

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        settings: Settings | None = None,
        client: ResponsesClient | None = None,
    ) -> None:
        self._config = config or ExtractionConfig()
        self._settings = settings or get_settings()
        self._client = client

    @property
    def config(self) -> ExtractionConfig:
        return self._config

    @property
    def model(self) -> str:
        return self._settings.openai_model

    def _get_client(self) -> ResponsesClient:
        """Lazy-initialize the Responses API client."""
        if self._client is None:
            if not self._settings.openai_configured:
                raise MissingCredentialsError()
            self._client = ResponsesClient(
                api_key=self._settings.openai_api_key.get_secret_value(),
                base_url=self._settings.openai_base_url,
                timeout=self._settings.openai_timeout_seconds,
            )
        return self._client

    def assumed_year(self) -> int:
        return self._config.assume_year or date.today().year

    def normalize_text(self, text: str | None) -> str:
        """Coerce to str and truncate to the configured cap."""
        return ("" if text is None else str(text))[: self._config.max_text_chars]

    def check_attachment(self, attachment: ImageAttachment) -> None:
        """Raise if an attachment is over the size cap."""
        if attachment.size > self._config.max_image_bytes:
            raise AttachmentTooLargeError(attachment.filename, self._config.max_image_bytes)

    async def parse(
        self,
        text: str | None,
        images: Sequence[ImageAttachment] = (),
    ) -> ExtractionResult:
        """
        Extract calendar events from text and images.

        Args:
            text: Free text (may be None or blank when images are given).
            images: Uploaded attachments; non-images are ignored.

        Returns:
            ExtractionResult with the (possibly corrected) events.

        Raises:
            ExtractionError: Any of the reported error kinds.
            httpx.HTTPError: Transport failure talking to the API.
        """
        metrics = get_metrics()
        try:
            result = await self._parse(text, images, metrics)
        except ExtractionError as exc:
            metrics.record_parse(exc.kind)
            raise
        except Exception:
            metrics.record_parse("server_error")
            raise
        metrics.record_parse("success", event_count=len(result.events))
        return result

    async def _parse(
        self,
        text: str | None,
        images: Sequence[ImageAttachment],
        metrics: MetricsCollector,
    ) -> ExtractionResult:
        normalized = self.normalize_text(text)

        forwarded = select_images(images, self._config.max_images)
        for attachment in forwarded:
            self.check_attachment(attachment)
        if len(forwarded) < len([a for a in images if a.is_image]):
            logger.warning(
                "Ignoring images beyond cap",
                received=len(images),
                max_images=self._config.max_images,
            )
        if not normalized.strip() and not forwarded:
            raise EmptyInputError()

        client = self._get_client()
        hints = analyze_text(normalized)
        payload = build_request_payload(
            model=self.model,
            text=normalized,
            images=forwarded,
            hints=hints,
            assume_year=self.assumed_year(),
            max_images=self._config.max_images,
        )

        logger.info(
            "Requesting calendar extraction",
            model=self.model,
            schema=SCHEMA_NAME,
            schema_version=SCHEMA_VERSION,
            text_chars=len(normalized),
            images=len(forwarded),
            weekdays=list(hints.weekdays),
            full_year=hints.full_year,
        )

        start = time.perf_counter()
        data = await client.create_response(payload)
        elapsed = time.perf_counter() - start
        metrics.record_upstream_latency(elapsed)
        metrics.record_images(len(forwarded))

        output_text = extract_output_text(data)
        events = decode_events(output_text)

        backfilled = 0
        if self._config.backfill_weekdays:
            corrected = apply_weekday_backfill(events, hints)
            backfilled = count_backfilled(events, corrected)
            events = corrected
            if backfilled:
                metrics.record_backfill(backfilled)
                logger.info(
                    "Backfilled days_of_week from request hints",
                    events=backfilled,
                    weekdays=list(hints.weekdays),
                )

        logger.info(
            "Calendar extraction complete",
            events=len(events),
            latency_ms=round(elapsed * 1000, 2),
        )

        return ExtractionResult(
            events=events,
            hints=hints,
            backfilled=backfilled,
            images_used=len(forwarded),
            latency_ms=round(elapsed * 1000, 2),
        )
