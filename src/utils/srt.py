"""Lenient SRT reader built on the `srt` library.

Model output is treated as opaque text everywhere else; this reader only
counts and exposes cues for reporting. Malformed blocks are skipped and
text the library cannot read at all yields no segments.
"""

import logging

import srt

from src.models.schemas import SrtSegment

logger = logging.getLogger(__name__)


def parse_srt(text: str) -> list[SrtSegment]:
    """Parse SRT text into segments.

    Args:
        text: SRT content.

    Returns:
        Segments in source order, timestamps normalized to HH:MM:SS,mmm.
        Never raises; unreadable input gives an empty list.
    """
    normalized = text.lstrip("\ufeff").replace("\r\n", "\n").strip()
    if not normalized:
        return []

    try:
        subtitles = list(srt.parse(normalized, ignore_errors=True))
    except (srt.SRTParseException, ValueError) as e:
        logger.warning(f"Could not read SRT cues: {e}")
        return []

    return [
        SrtSegment(
            index=sub.index if sub.index is not None else position,
            start_time=srt.timedelta_to_srt_timestamp(sub.start),
            end_time=srt.timedelta_to_srt_timestamp(sub.end),
            text=sub.content.strip(),
        )
        for position, sub in enumerate(subtitles, start=1)
    ]
