"""Unit tests for the lenient SRT reader."""

import pytest_check as check

from src.utils.srt import parse_srt


class TestParseSrt:
    """Tests for parse_srt."""

    def test_parses_sample_file(self, sample_srt: str) -> None:
        """Sample file yields three ordered cues."""
        segments = parse_srt(sample_srt)

        check.equal(len(segments), 3)
        check.equal([s.index for s in segments], [1, 2, 3])
        check.equal(segments[0].start_time, "00:00:01,000")
        check.equal(segments[0].end_time, "00:00:03,200")
        check.equal(segments[0].text, "Xin chào các bạn.")

    def test_keeps_multiline_text(self, sample_srt: str) -> None:
        """Cue text spanning two lines is joined with a newline."""
        last = parse_srt(sample_srt)[-1]

        assert last.text == "Hãy bắt đầu với một ví dụ nhỏ,\nrồi chạy thử nhé."

    def test_handles_crlf_and_bom(self) -> None:
        """Windows line endings and a leading BOM are tolerated."""
        text = "\ufeff1\r\n00:00:00,000 --> 00:00:01,500\r\nHi\r\n\r\n2\r\n00:00:02,000 --> 00:00:03,000\r\nBye\r\n"

        segments = parse_srt(text)

        check.equal(len(segments), 2)
        check.equal(segments[1].text, "Bye")

    def test_skips_malformed_blocks(self) -> None:
        """Preamble text and blocks without a timing line are ignored."""
        text = (
            "Here is your subtitle file:\n\n"
            "1\n00:00:01,000 --> 00:00:02,000\nValid\n\n"
            "3\nnot a timing line\nBad timing"
        )

        segments = parse_srt(text)

        check.equal(segments[0].text, "Valid")
        check.is_false(any("Bad timing" in s.text for s in segments))

    def test_non_ascii_digit_index_does_not_raise(self) -> None:
        """A superscript digit in the index line is not read as a number."""
        segments = parse_srt("²\n00:00:01,000 --> 00:00:02,000\nHi")

        assert isinstance(segments, list)
        check.is_true(all(s.text == "Hi" for s in segments))

    def test_accepts_dot_milliseconds(self) -> None:
        """WebVTT-style dots in timestamps are read and normalized to commas."""
        segments = parse_srt("1\n00:00:01.000 --> 00:00:02.000\nDot")

        check.equal(segments[0].start_time, "00:00:01,000")
        check.equal(segments[0].end_time, "00:00:02,000")

    def test_unreadable_text_gives_no_segments(self) -> None:
        """Text with no cue at all yields an empty list."""
        assert parse_srt("Xin lỗi, tôi không thể xử lý video này.") == []

    def test_empty_text(self) -> None:
        """Empty or whitespace input gives no segments."""
        check.equal(parse_srt(""), [])
        check.equal(parse_srt("  \n\n "), [])
