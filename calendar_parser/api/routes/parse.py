"""Calendar extraction endpoint."""

import structlog
from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from calendar_parser.api.dependencies import get_extraction_service
from calendar_parser.api.models import ErrorResponse, ParseResponse
from calendar_parser.extraction.config import ExtractionConfig
from calendar_parser.extraction.errors import AttachmentTooLargeError, ExtractionError
from calendar_parser.extraction.request_builder import ImageAttachment
from calendar_parser.extraction.service import EventExtractionService
from calendar_parser.observability.metrics import get_metrics

router = APIRouter()
logger = structlog.get_logger(__name__)


def _is_image_upload(upload: UploadFile) -> bool:
    return bool(upload.content_type) and upload.content_type.lower().startswith("image/")


def _too_large(upload: UploadFile, limit: int) -> AttachmentTooLargeError:
    get_metrics().record_parse(AttachmentTooLargeError.kind)
    return AttachmentTooLargeError(upload.filename, limit)


async def _read_attachments(
    uploads: list[UploadFile] | None,
    config: ExtractionConfig,
) -> list[ImageAttachment]:
    """
    Read image uploads into memory, bounded by the count and size caps.

    Non-image parts are never read. Reading stops once ``max_images`` images
    are collected. Each part is read at most ``max_image_bytes + 1`` bytes.

    Raises:
        AttachmentTooLargeError: A forwarded image exceeds the size cap.
    """
    limit = config.max_image_bytes
    attachments: list[ImageAttachment] = []
    for upload in uploads or []:
        if not _is_image_upload(upload):
            logger.debug("Skipping non-image attachment", filename=upload.filename)
            continue
        if len(attachments) >= config.max_images:
            logger.warning(
                "Ignoring images beyond cap",
                received=len(uploads),
                max_images=config.max_images,
            )
            break
        if upload.size is not None and upload.size > limit:
            raise _too_large(upload, limit)
        data = await upload.read(limit + 1)
        if len(data) > limit:
            raise _too_large(upload, limit)
        attachments.append(
            ImageAttachment(
                data=data,
                content_type=upload.content_type,
                filename=upload.filename,
            )
        )
    return attachments


@router.post(
    "/api/parse",
    response_model=ParseResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Neither text nor an image supplied"},
        413: {"model": ErrorResponse, "description": "Attachment too large"},
        500: {"model": ErrorResponse, "description": "Credential, upstream or decode failure"},
    },
    summary="Extract calendar events",
    description="Extract calendar events from free text and/or images in a single model call.",
)
async def parse_events(
    text: str | None = Form(default=None),
    images: list[UploadFile] | None = File(default=None),
    service: EventExtractionService = Depends(get_extraction_service),
):
    try:
        attachments = await _read_attachments(images, service.config)
        result = await service.parse(text, attachments)
        return ParseResponse(events=result.events)

    except ExtractionError as e:
        logger.warning("Calendar extraction failed", kind=e.kind, status_code=e.status_code)
        return JSONResponse(status_code=e.status_code, content=e.to_payload())

    except Exception as e:
        logger.error("Unhandled error in calendar extraction", error=str(e), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Server error", "details": str(e)},
        )
