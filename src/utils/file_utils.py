"""File helpers for video uploads and subtitle downloads.

Covers the small conversions around the model calls: base64 payloads,
upload validation, markdown fence cleanup and download payloads.
"""

import base64
import logging
import mimetypes
import re

logger = logging.getLogger(__name__)

# Constants
DEFAULT_MAX_VIDEO_SIZE = 20 * 1024 * 1024  # 20MB, inline request limit
GENERIC_MIME_TYPES = {"", "application/octet-stream"}
DOWNLOAD_MEDIA_TYPE = "text/plain"
SRT_FILENAME = "subtitle.srt"
TXT_FILENAME = "subtitle.txt"

_FENCE_PATTERN = re.compile(r"```(?:srt|text)?")


class VideoUploadError(Exception):
    """Raised when an uploaded video is rejected.

    Attributes:
        status_code: HTTP status the API layer should answer with.
    """

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


def file_to_base64(content: bytes) -> str:
    """Encode raw file bytes as a base64 string.

    Same payload a browser data URL carries after the comma.
    """
    return base64.b64encode(content).decode("ascii")


def clean_srt_response(text: str) -> str:
    """Remove markdown code fences the model may wrap around the SRT.

    Args:
        text: Raw model output.

    Returns:
        The text without ```, ```srt or ```text markers, stripped.
    """
    return _FENCE_PATTERN.sub("", text).strip()


def resolve_mime_type(filename: str, content_type: str | None) -> str:
    """Return the declared MIME type, guessing from the filename when generic."""
    declared = (content_type or "").split(";")[0].strip().lower()
    if declared not in GENERIC_MIME_TYPES:
        return declared

    guessed, _ = mimetypes.guess_type(filename)
    return guessed or declared


def validate_video_upload(
    filename: str | None,
    content_type: str | None,
    size: int,
    max_size: int = DEFAULT_MAX_VIDEO_SIZE,
) -> str:
    """Validate an uploaded video before it is sent to the model.

    Args:
        filename: The uploaded filename.
        content_type: MIME type reported by the client.
        size: File size in bytes.
        max_size: Largest accepted size in bytes.

    Returns:
        The MIME type to forward to the model.

    Raises:
        VideoUploadError: 400 for missing name, wrong type or empty file,
            413 when the file exceeds max_size.
    """
    if not filename:
        raise VideoUploadError("Filename is required")

    mime_type = resolve_mime_type(filename, content_type)
    if not mime_type.startswith("video/"):
        raise VideoUploadError("Only video files are accepted")

    if size == 0:
        raise VideoUploadError("Empty file provided")

    if size > max_size:
        size_mb = size / (1024 * 1024)
        limit_mb = max_size / (1024 * 1024)
        raise VideoUploadError(
            f"File size ({size_mb:.1f}MB) exceeds maximum allowed ({limit_mb:.0f}MB)",
            status_code=413,
        )

    return mime_type


def download_payload(content: str) -> bytes:
    """Encode subtitle text for a browser download."""
    return content.encode("utf-8")


def translated_filename(target_language: str) -> str:
    """Download name for a translated subtitle file."""
    return f"translated_{target_language}.srt"
