"""Subtitle endpoints: extraction from uploaded video and SRT translation.

Handles upload validation, payload encoding and error mapping around the
Gemini subtitle service.
"""

import logging

from fastapi import APIRouter, HTTPException, UploadFile, status
from pydantic import ValidationError

from src.gemini.subtitle_service import (
    SubtitleService,
    SubtitleServiceError,
    get_subtitle_service,
)
from src.models.schemas import ExtractResponse, TranslateRequest, TranslateResponse
from src.utils.file_utils import VideoUploadError, file_to_base64, validate_video_upload
from src.utils.srt import parse_srt

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/subtitles", tags=["subtitles"])


def _require_service() -> SubtitleService:
    """Return the subtitle service.

    Raises:
        HTTPException: 503 if the service is not configured.
    """
    try:
        return get_subtitle_service()
    except ValidationError as e:
        logger.error(f"Subtitle service is not configured: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Subtitle service is not configured. Set GEMINI_API_KEY.",
        ) from e


@router.post("/extract", response_model=ExtractResponse)
async def extract_subtitles(file: UploadFile) -> ExtractResponse:
    """Extract SRT subtitles from an uploaded video.

    Args:
        file: The uploaded video file (multipart/form-data).

    Returns:
        ExtractResponse with the SRT text and its cue count.

    Raises:
        400: Missing filename, not a video, or empty file.
        413: File exceeds the configured size limit.
        502: The model call failed.
        503: Service not configured.
    """
    content = await file.read()
    service = _require_service()

    try:
        mime_type = validate_video_upload(
            file.filename,
            file.content_type,
            len(content),
            max_size=service.config.max_video_size,
        )
    except VideoUploadError as e:
        logger.warning(f"Rejected upload {file.filename!r}: {e}")
        raise HTTPException(status_code=e.status_code, detail=str(e)) from e

    try:
        srt = await service.extract_srt_from_video(file_to_base64(content), mime_type)
    except SubtitleServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    segment_count = len(parse_srt(srt))
    logger.info(f"Extracted subtitles from {file.filename} ({segment_count} segments)")

    return ExtractResponse(
        filename=file.filename,
        mime_type=mime_type,
        srt=srt,
        segment_count=segment_count,
    )


@router.post("/translate", response_model=TranslateResponse)
async def translate_subtitles(request: TranslateRequest) -> TranslateResponse:
    """Translate SRT text into the requested language.

    Raises:
        422: Empty SRT content or unknown language.
        502: The model call failed.
        503: Service not configured.
    """
    service = _require_service()
    target = request.target_language

    try:
        srt = await service.translate_srt(request.srt_content, target.value)
    except SubtitleServiceError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from e

    return TranslateResponse(
        target_language=target,
        srt=srt,
        segment_count=len(parse_srt(srt)),
    )
