"""Gemini subtitle service: extraction from video and SRT translation.

Both operations are a single round trip to the model. The response text is
cleaned of markdown fences and returned as-is; it is not validated as SRT.
Any failure is logged and re-raised once as a SubtitleServiceError carrying
the underlying message, so callers can show it to the user verbatim.
"""

import base64
import logging

from google import genai
from google.genai import types

from src.gemini.config import GeminiConfig, get_gemini_config
from src.gemini.prompts import EXTRACTION_INSTRUCTION, build_translation_prompt
from src.utils.file_utils import clean_srt_response

logger = logging.getLogger(__name__)

EXTRACTION_FALLBACK_MESSAGE = "Lỗi khi trích xuất phụ đề từ video."
TRANSLATION_FALLBACK_MESSAGE = "Lỗi khi dịch phụ đề."


class SubtitleServiceError(Exception):
    """Raised when a model call fails."""

    pass


class SubtitleExtractionError(SubtitleServiceError):
    """Raised when subtitle extraction fails."""

    pass


class SubtitleTranslationError(SubtitleServiceError):
    """Raised when subtitle translation fails."""

    pass


class SubtitleService:
    """Service wrapping the Gemini client for subtitle work.

    Wraps google-genai's Client with:
    - Fixed instructions and sampling settings per operation
    - Markdown fence cleanup of responses
    - Singleton lifecycle management
    - Centralized error handling
    """

    def __init__(self, config: GeminiConfig | None = None) -> None:
        """Initialize the subtitle service.

        Args:
            config: Optional Gemini configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_gemini_config()
        self._client = genai.Client(api_key=self._config.api_key)

    @property
    def config(self) -> GeminiConfig:
        """Settings the service was built with."""
        return self._config

    async def extract_srt_from_video(self, base64_data: str, mime_type: str) -> str:
        """Ask the model to transcribe a video into SRT.

        Args:
            base64_data: Base64-encoded video bytes.
            mime_type: MIME type of the video (e.g., video/mp4).

        Returns:
            SRT text with markdown fences removed.

        Raises:
            SubtitleExtractionError: If decoding or the model call fails.
        """
        try:
            video_part = types.Part.from_bytes(
                data=base64.b64decode(base64_data, validate=True),
                mime_type=mime_type,
            )
            response = await self._client.aio.models.generate_content(
                model=self._config.model_name,
                contents=types.Content(
                    role="user",
                    parts=[video_part, types.Part.from_text(text=EXTRACTION_INSTRUCTION)],
                ),
                config=types.GenerateContentConfig(
                    temperature=self._config.extract_temperature,
                    top_p=self._config.extract_top_p,
                    top_k=self._config.extract_top_k,
                ),
            )
        except Exception as e:
            logger.error(f"Gemini extraction error: {e}")
            raise SubtitleExtractionError(str(e) or EXTRACTION_FALLBACK_MESSAGE) from e

        srt = clean_srt_response(response.text or "")
        logger.info(f"Extracted {len(srt)} characters of SRT ({mime_type})")
        return srt

    async def translate_srt(self, srt_content: str, target_lang: str) -> str:
        """Ask the model to translate SRT text, keeping indices and timings.

        Args:
            srt_content: Original SRT text.
            target_lang: Display name of the target language.

        Returns:
            Translated SRT text with markdown fences removed.

        Raises:
            SubtitleTranslationError: If the model call fails.
        """
        try:
            response = await self._client.aio.models.generate_content(
                model=self._config.model_name,
                contents=build_translation_prompt(srt_content, target_lang),
                config=types.GenerateContentConfig(
                    temperature=self._config.translate_temperature,
                ),
            )
        except Exception as e:
            logger.error(f"Gemini translation error: {e}")
            raise SubtitleTranslationError(str(e) or TRANSLATION_FALLBACK_MESSAGE) from e

        srt = clean_srt_response(response.text or "")
        logger.info(f"Translated SRT to {target_lang} ({len(srt)} characters)")
        return srt


# Module-level singleton instance
_subtitle_service: SubtitleService | None = None


def get_subtitle_service() -> SubtitleService:
    """Get or create the global subtitle service.

    Returns:
        The SubtitleService instance.

    Raises:
        ValidationError: If the configuration is invalid (e.g., no API key).
    """
    global _subtitle_service
    if _subtitle_service is None:
        _subtitle_service = SubtitleService()
    return _subtitle_service
