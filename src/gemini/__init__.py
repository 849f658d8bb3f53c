"""Gemini integration for subtitle extraction and translation.

Responsibilities:
    - Client initialization from environment configuration
    - Video-to-SRT extraction with inline video data
    - SRT translation that keeps indices and timestamps
    - Uniform error wrapping for user-facing messages

Keeps the HTTP layer unaware of the google-genai SDK.
"""

from src.gemini.config import GeminiConfig, get_gemini_config
from src.gemini.subtitle_service import (
    SubtitleExtractionError,
    SubtitleService,
    SubtitleServiceError,
    SubtitleTranslationError,
    get_subtitle_service,
)

__all__ = [
    "GeminiConfig",
    "SubtitleExtractionError",
    "SubtitleService",
    "SubtitleServiceError",
    "SubtitleTranslationError",
    "get_gemini_config",
    "get_subtitle_service",
]
