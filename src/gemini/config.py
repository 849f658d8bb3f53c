"""Gemini configuration with environment variable loading.

Pydantic-based configuration for the subtitle service.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_MODEL = "gemini-3-flash-preview"


def _api_key_from_env() -> str:
    return (
        os.getenv("GEMINI_API_KEY")
        or os.getenv("API_KEY")
        or os.getenv("GOOGLE_API_KEY")
        or ""
    )


class GeminiConfig(BaseModel):
    """Configuration for the Gemini subtitle service.

    Attributes:
        api_key: API key for the Gemini API.
        model_name: Model used for both extraction and translation.
        extract_temperature: Sampling temperature for extraction.
        extract_top_p: Nucleus sampling for extraction.
        extract_top_k: Top-k sampling for extraction.
        translate_temperature: Sampling temperature for translation.
        max_video_size_mb: Largest video accepted for inline upload.
    """

    api_key: str = Field(
        default_factory=_api_key_from_env,
        description="API key for Gemini",
    )
    model_name: str = Field(
        default_factory=lambda: os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
        description="Model to use",
    )
    extract_temperature: float = Field(default=0.2, ge=0.0, le=2.0)
    extract_top_p: float = Field(default=0.8, gt=0.0, le=1.0)
    extract_top_k: int = Field(default=40, ge=1)
    translate_temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_video_size_mb: int = Field(
        default_factory=lambda: int(os.getenv("MAX_VIDEO_SIZE_MB", "20")),
        ge=1,
        le=2000,
        description="Maximum video size in MB",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GEMINI_API_KEY in .env")
        return v.strip()

    @property
    def max_video_size(self) -> int:
        """Maximum video size in bytes."""
        return self.max_video_size_mb * 1024 * 1024


def get_gemini_config() -> GeminiConfig:
    """Create Gemini configuration from environment.

    Returns:
        Configured GeminiConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return GeminiConfig()
