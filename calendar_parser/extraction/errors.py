"""Error kinds raised by the extraction pipeline.

Each error knows the HTTP status it maps to and the JSON body reported to
the caller, so the API layer and the CLI render them the same way.
"""

from typing import Any


class ExtractionError(Exception):
    """Base exception for extraction failures."""

    status_code: int = 500
    kind: str = "extraction_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict[str, Any]:
        """Body returned to the client."""
        return {"error": self.message}


class EmptyInputError(ExtractionError):
    """Raised when neither text nor an image was supplied."""

    status_code = 400
    kind = "empty_input"

    def __init__(self, message: str = "Provide text and/or at least one image."):
        super().__init__(message)


def _format_limit(limit_bytes: int) -> str:
    mib = 1024 * 1024
    if limit_bytes >= mib and limit_bytes % mib == 0:
        return f"{limit_bytes // mib}MB"
    return f"{limit_bytes} byte"


class AttachmentTooLargeError(ExtractionError):
    """Raised when an attachment exceeds the per-file size cap."""

    status_code = 413
    kind = "attachment_too_large"

    def __init__(self, filename: str | None, limit_bytes: int):
        super().__init__(f"Attachment exceeds {_format_limit(limit_bytes)} limit.")
        self.filename = filename
        self.limit_bytes = limit_bytes

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "filename": self.filename, "limit_bytes": self.limit_bytes}


class MissingCredentialsError(ExtractionError):
    """Raised when the Responses API credential is not configured."""

    kind = "missing_credentials"

    def __init__(self, message: str = "Missing OPENAI_API_KEY env var."):
        super().__init__(message)


class UpstreamAPIError(ExtractionError):
    """Raised when the Responses API answers with a non-success status."""

    kind = "upstream_error"

    def __init__(self, status_code: int, response_body: str):
        super().__init__("OpenAI API error")
        self.upstream_status = status_code
        self.response_body = response_body

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "status": self.upstream_status, "details": self.response_body}


class MissingOutputTextError(ExtractionError):
    """Raised when no text block can be found in the upstream response."""

    kind = "missing_output_text"

    def __init__(self, raw: Any):
        super().__init__("No output_text found")
        self.raw = raw

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "raw": self.raw}


class InvalidModelJSONError(ExtractionError):
    """Raised when the model's output text is not valid JSON."""

    kind = "invalid_json"

    def __init__(self, output_text: str):
        super().__init__("Model returned non-JSON")
        self.output_text = output_text

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, "outputText": self.output_text}
