"""Builds the Responses API payload for one extraction request.

The builder is pure: it reads the text, attachments and hints and returns a
new payload dict every call. The output schema is copied per payload so
callers can never alter the shared contract.
"""

import base64
from dataclasses import dataclass
from typing import Any, Sequence

from calendar_parser.extraction.hints import ExtractionHints
from calendar_parser.extraction.prompts import build_instructions
from calendar_parser.extraction.schemas import SCHEMA_NAME, calendar_events_schema


@dataclass(frozen=True)
class ImageAttachment:
    """An uploaded attachment held in memory for the duration of a request."""

    data: bytes
    content_type: str | None = None
    filename: str | None = None

    @property
    def is_image(self) -> bool:
        return bool(self.content_type) and self.content_type.lower().startswith("image/")

    @property
    def size(self) -> int:
        return len(self.data)

    def to_data_url(self) -> str:
        """Inline base64 data URL (``data:<mime>;base64,<...>``)."""
        b64 = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.content_type};base64,{b64}"


def select_images(
    attachments: Sequence[ImageAttachment],
    max_images: int,
) -> list[ImageAttachment]:
    """Keep image attachments only, capped at ``max_images``."""
    return [a for a in attachments if a.is_image][: max(max_images, 0)]


def build_user_content(
    text: str,
    images: Sequence[ImageAttachment],
    max_images: int,
) -> list[dict[str, Any]]:
    """
    Compose the user message content blocks.

    Args:
        text: Submitted text (already truncated).
        images: Attachments; non-images are skipped.
        max_images: Attachments beyond this count are ignored.

    Returns:
        Content blocks; empty when there is nothing to send.
    """
    content: list[dict[str, Any]] = []
    if text.strip():
        content.append({"type": "input_text", "text": text})
    for image in select_images(images, max_images):
        content.append({"type": "input_image", "image_url": image.to_data_url()})
    return content


def build_request_payload(
    *,
    model: str,
    text: str,
    images: Sequence[ImageAttachment] = (),
    hints: ExtractionHints | None = None,
    assume_year: int,
    max_images: int = 8,
) -> dict[str, Any]:
    """
    Build the full request body for ``POST /responses``.

    Args:
        model: Model identifier.
        text: Submitted text (already truncated).
        images: Image attachments.
        hints: Weekday/year hints embedded in the instructions.
        assume_year: Year the model assumes when the text omits one.
        max_images: Attachment cap.

    Returns:
        Payload dict ready to be JSON-encoded.
    """
    instructions = build_instructions(assume_year, hints)
    return {
        "model": model,
        "input": [
            {"role": "system", "content": [{"type": "input_text", "text": instructions}]},
            {"role": "user", "content": build_user_content(text, images, max_images)},
        ],
        "text": {
            "format": {
                "type": "json_schema",
                "name": SCHEMA_NAME,
                "schema": calendar_events_schema(),
                "strict": True,
            }
        },
    }
