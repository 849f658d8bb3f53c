"""Page state and HTTP calls from the NiceGUI page to the subtitle API."""

import logging
import os

import httpx

from src.models.schemas import AppTab, ProcessingStatus, TargetLanguage

logger = logging.getLogger(__name__)


def resolve_api_base_url() -> str:
    """Base URL of the subtitle API.

    API_BASE_URL wins when set; otherwise the API is assumed on this host at
    PORT, the port the API server itself listens on.
    """
    explicit = os.getenv("API_BASE_URL")
    if explicit:
        return explicit.rstrip("/")
    return f"http://localhost:{os.getenv('PORT', '8000')}"


API_BASE_URL = resolve_api_base_url()
API_TIMEOUT = float(os.getenv("API_TIMEOUT", "300"))

EXTRACTING_MESSAGE = "Đang trích xuất phụ đề..."
UNEXPECTED_ERROR_MESSAGE = "Đã xảy ra lỗi không mong muốn."


def translating_message(target: TargetLanguage) -> str:
    """Loading text shown while translating into `target`."""
    return f"Đang dịch sang {target.value}..."


class ApiRequestError(Exception):
    """Raised when the subtitle API cannot be reached or answers with an error."""

    pass


class SubtitleSession:
    """Holds subtitle state for one page visit."""

    def __init__(self) -> None:
        self.active_tab: str = AppTab.EXTRACT.value
        self.status: ProcessingStatus = ProcessingStatus()
        self.extracted_srt: str = ""
        self.translated_srt: str = ""
        self.target_language: TargetLanguage = TargetLanguage.ENGLISH
        self.upload_name: str | None = None
        self.upload_type: str | None = None
        self.upload_content: bytes | None = None

    @property
    def can_extract(self) -> bool:
        """True when a video is selected and nothing is running."""
        return self.upload_content is not None and not self.status.loading

    @property
    def can_translate(self) -> bool:
        """True when there is SRT text to translate and nothing is running."""
        return bool(self.extracted_srt) and not self.status.loading

    def set_upload(self, name: str, content_type: str | None, content: bytes) -> None:
        """Remember the selected video for the next extraction."""
        self.upload_name = name
        self.upload_type = content_type
        self.upload_content = content

    def begin(self, message: str) -> None:
        """Enter the loading state and clear any previous error."""
        self.status = ProcessingStatus(loading=True, message=message)

    def succeed(self) -> None:
        """Return to idle after a successful operation."""
        self.status = ProcessingStatus()

    def fail(self, error: str) -> None:
        """Leave the loading state with a user-facing error."""
        self.status = ProcessingStatus(error=error)

    async def extract(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Run one extraction for the selected video.

        Does nothing while another operation runs or without a video. The
        loading state always ends, with the SRT stored or an error set.
        """
        if not self.can_extract:
            return

        self.begin(EXTRACTING_MESSAGE)
        try:
            srt = await request_extraction(
                self.upload_name, self.upload_type, self.upload_content, transport=transport
            )
        except ApiRequestError as e:
            self.fail(str(e))
            return
        except Exception as e:
            logger.exception(f"Extraction failed unexpectedly: {e}")
            self.fail(str(e) or UNEXPECTED_ERROR_MESSAGE)
            return
        self.extracted_srt = srt
        self.succeed()

    async def translate(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Translate the current SRT text into the selected language."""
        if not self.can_translate:
            return

        target = self.target_language
        self.begin(translating_message(target))
        try:
            translated = await request_translation(self.extracted_srt, target, transport=transport)
        except ApiRequestError as e:
            self.fail(str(e))
            return
        except Exception as e:
            logger.exception(f"Translation failed unexpectedly: {e}")
            self.fail(str(e) or UNEXPECTED_ERROR_MESSAGE)
            return
        self.translated_srt = translated
        self.succeed()


def _error_detail(response: httpx.Response) -> str:
    """Pull the FastAPI `detail` message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str) and detail:
        return detail
    return f"HTTP {response.status_code}"


async def _post(
    path: str,
    transport: httpx.AsyncBaseTransport | None = None,
    **kwargs,
) -> str:
    """POST to the API and return the `srt` field of the JSON answer."""
    async with httpx.AsyncClient(
        base_url=API_BASE_URL, timeout=API_TIMEOUT, transport=transport
    ) as client:
        try:
            response = await client.post(path, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ApiRequestError(_error_detail(e.response)) from e
        except httpx.RequestError as e:
            raise ApiRequestError(f"Connection failed: {e}") from e

    try:
        body = response.json()
    except ValueError as e:
        raise ApiRequestError("Invalid response from server") from e
    srt = body.get("srt") if isinstance(body, dict) else None
    if not isinstance(srt, str):
        raise ApiRequestError("Invalid response from server")
    return srt


async def request_extraction(
    filename: str,
    content_type: str | None,
    content: bytes,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Upload a video to /subtitles/extract and return the SRT text."""
    return await _post(
        "/subtitles/extract",
        transport=transport,
        files={"file": (filename, content, content_type or "application/octet-stream")},
    )


async def request_translation(
    srt_content: str,
    target: TargetLanguage,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Send SRT text to /subtitles/translate and return the translation."""
    return await _post(
        "/subtitles/translate",
        transport=transport,
        json={"srt_content": srt_content, "target_language": target.value},
    )
