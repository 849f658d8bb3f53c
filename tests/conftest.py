"""Pytest fixtures and shared test configuration.

Fixtures:
    - test_data_dir: Path to sample files directory
    - sample_srt: Contents of the sample SRT file
    - gemini_config: Config with a dummy API key
    - mock_service: SubtitleService stand-in with async operations
    - async_client: HTTPX client for API testing
"""

from collections.abc import AsyncGenerator
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from src.api import app
from src.gemini.config import GeminiConfig
from src.gemini.subtitle_service import SubtitleService


@pytest.fixture
def test_data_dir() -> Path:
    """Return path to test data directory."""
    return Path(__file__).parent / "data"


@pytest.fixture
def sample_srt(test_data_dir: Path) -> str:
    """Return the sample SRT text (three cues)."""
    return (test_data_dir / "sample.srt").read_text(encoding="utf-8")


@pytest.fixture
def gemini_config() -> GeminiConfig:
    """Config with a dummy key and a 1MB video limit."""
    return GeminiConfig(api_key="test-gemini-key", model_name="gemini-test", max_video_size_mb=1)


@pytest.fixture
def mock_service(gemini_config: GeminiConfig, sample_srt: str) -> MagicMock:
    """SubtitleService mock returning the sample SRT for both operations."""
    service = MagicMock(spec=SubtitleService)
    service.config = gemini_config
    service.extract_srt_from_video = AsyncMock(return_value=sample_srt)
    service.translate_srt = AsyncMock(return_value=sample_srt)
    return service


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
