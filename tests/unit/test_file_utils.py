"""Unit tests for file helpers."""

import base64

import pytest
import pytest_check as check

from src.utils.file_utils import (
    DEFAULT_MAX_VIDEO_SIZE,
    VideoUploadError,
    clean_srt_response,
    download_payload,
    file_to_base64,
    resolve_mime_type,
    translated_filename,
    validate_video_upload,
)


class TestFileToBase64:
    """Tests for base64 payload encoding."""

    def test_encodes_bytes_as_ascii_base64(self) -> None:
        """Output is plain base64 without a data URL prefix."""
        result = file_to_base64(b"\x00\x01video-bytes\xff")

        check.is_false(result.startswith("data:"))
        check.equal(base64.b64decode(result), b"\x00\x01video-bytes\xff")

    def test_empty_bytes_give_empty_string(self) -> None:
        """Empty content encodes to an empty string."""
        assert file_to_base64(b"") == ""


class TestCleanSrtResponse:
    """Tests for markdown fence removal."""

    def test_removes_srt_fence(self) -> None:
        """```srt ... ``` wrapper is removed and text trimmed."""
        raw = "```srt\n1\n00:00:01,000 --> 00:00:02,000\nHello\n```\n"

        assert clean_srt_response(raw) == "1\n00:00:01,000 --> 00:00:02,000\nHello"

    def test_removes_text_and_bare_fences(self) -> None:
        """```text and bare ``` markers are all removed."""
        raw = "```text\nfirst\n```\n```\nsecond\n```"

        result = clean_srt_response(raw)

        check.is_not_in("```", result)
        check.is_not_in("text\n", result)
        check.is_in("first", result)
        check.is_in("second", result)

    def test_leaves_plain_text_untouched(self) -> None:
        """Text without fences is only stripped."""
        assert clean_srt_response("  1\nHello  \n") == "1\nHello"

    def test_empty_input(self) -> None:
        """Empty response stays empty."""
        assert clean_srt_response("") == ""


class TestResolveMimeType:
    """Tests for MIME type resolution."""

    def test_keeps_declared_type(self) -> None:
        """Specific declared type is kept, parameters dropped."""
        assert resolve_mime_type("clip.bin", "video/webm; codecs=vp9") == "video/webm"

    def test_guesses_from_filename_when_generic(self) -> None:
        """Generic octet-stream falls back to the filename extension."""
        assert resolve_mime_type("clip.mp4", "application/octet-stream") == "video/mp4"

    def test_guesses_when_missing(self) -> None:
        """Missing type falls back to the filename extension."""
        assert resolve_mime_type("clip.mp4", None) == "video/mp4"


class TestValidateVideoUpload:
    """Tests for upload validation."""

    def test_accepts_video(self) -> None:
        """Valid video returns its MIME type."""
        assert validate_video_upload("clip.mp4", "video/mp4", 1024) == "video/mp4"

    def test_rejects_missing_filename(self) -> None:
        """Missing filename raises a 400 error."""
        with pytest.raises(VideoUploadError, match="Filename is required") as exc_info:
            validate_video_upload(None, "video/mp4", 10)

        assert exc_info.value.status_code == 400

    def test_rejects_non_video(self) -> None:
        """Non-video MIME type raises a 400 error."""
        with pytest.raises(VideoUploadError, match="Only video files") as exc_info:
            validate_video_upload("notes.txt", "text/plain", 10)

        assert exc_info.value.status_code == 400

    def test_rejects_empty_file(self) -> None:
        """Zero-byte video raises a 400 error."""
        with pytest.raises(VideoUploadError, match="Empty file"):
            validate_video_upload("clip.mp4", "video/mp4", 0)

    def test_rejects_oversized_file(self) -> None:
        """Video over the limit raises a 413 error."""
        with pytest.raises(VideoUploadError, match="exceeds maximum") as exc_info:
            validate_video_upload("clip.mp4", "video/mp4", DEFAULT_MAX_VIDEO_SIZE + 1)

        assert exc_info.value.status_code == 413

    def test_custom_limit(self) -> None:
        """The size limit can be lowered per call."""
        with pytest.raises(VideoUploadError, match=r"\(1MB\)"):
            validate_video_upload("clip.mp4", "video/mp4", 2 * 1024 * 1024, max_size=1024 * 1024)


class TestDownloads:
    """Tests for download helpers."""

    def test_payload_is_utf8(self) -> None:
        """Vietnamese text survives encoding."""
        assert download_payload("Xin chào") == "Xin chào".encode()

    def test_translated_filename(self) -> None:
        """Filename carries the language display name."""
        assert translated_filename("Tiếng Anh") == "translated_Tiếng Anh.srt"
