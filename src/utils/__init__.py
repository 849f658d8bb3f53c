"""Utilities around the model calls.

Responsibilities:
    - Base64 payloads for inline video data
    - Upload validation (type, emptiness, size)
    - Markdown fence cleanup of model responses
    - Download payloads and filenames
    - Lenient SRT reading for cue counts
"""

from src.utils.file_utils import (
    VideoUploadError,
    clean_srt_response,
    download_payload,
    file_to_base64,
    translated_filename,
    validate_video_upload,
)
from src.utils.srt import parse_srt

__all__ = [
    "VideoUploadError",
    "clean_srt_response",
    "download_payload",
    "file_to_base64",
    "parse_srt",
    "translated_filename",
    "validate_video_upload",
]
