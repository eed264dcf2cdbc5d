"""Configuration for the event extraction service.

Uses Pydantic settings for environment-based configuration,
following the same pattern as the central application settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ExtractionConfig(BaseSettings):
    """
    Configuration for the event extraction pipeline.

    All settings can be overridden via environment variables with EXTRACTION_ prefix.
    Example: EXTRACTION_MAX_IMAGES=10

    Attributes:
        max_text_chars: Submitted text is truncated to this many characters.
        max_images: Image attachments beyond this count are ignored.
        max_image_bytes: Per-attachment size cap.
        assume_year: Year the model assumes when the text omits one (None = current year).
        backfill_weekdays: Whether to run the weekday backfill after the model call.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXTRACTION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    max_text_chars: int = Field(
        default=8000,
        ge=1,
        description="Maximum characters of submitted text forwarded to the model.",
    )
    max_images: int = Field(
        default=8,
        ge=0,
        le=10,
        description="Maximum image attachments forwarded to the model.",
    )
    max_image_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1,
        description="Maximum size of a single attachment in bytes.",
    )
    assume_year: int | None = Field(
        default=None,
        ge=1970,
        le=2200,
        description="Default year for dates without one. Unset uses the current year.",
    )
    backfill_weekdays: bool = Field(
        default=True,
        description="Inject hinted weekdays into range events missing days_of_week.",
    )
