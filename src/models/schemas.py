from enum import Enum

from pydantic import BaseModel, Field, field_validator


class AppTab(str, Enum):
    """Tabs of the subtitle page."""

    EXTRACT = "EXTRACT"
    TRANSLATE = "TRANSLATE"


class TargetLanguage(str, Enum):
    """Languages offered for translation.

    The value is the display name inserted into the translation prompt.
    """

    VIETNAMESE = "Tiếng Việt"
    ENGLISH = "Tiếng Anh"
    CHINESE = "Tiếng Trung"


class SrtSegment(BaseModel):
    """A single SRT cue.

    Attributes:
        index: Ordinal number of the cue.
        start_time: Start timestamp as written in the SRT (HH:MM:SS,mmm).
        end_time: End timestamp as written in the SRT.
        text: Cue text, possibly spanning several lines.
    """

    index: int
    start_time: str
    end_time: str
    text: str


class ProcessingStatus(BaseModel):
    """Progress of the operation currently running on the page.

    Attributes:
        loading: Whether an operation is in flight.
        message: Status text shown while loading.
        error: Error message from the last failed operation.
    """

    loading: bool = False
    message: str = ""
    error: str | None = None


class ExtractResponse(BaseModel):
    """Response after subtitle extraction.

    Attributes:
        filename: Name of the uploaded video.
        mime_type: MIME type forwarded to the model.
        srt: Extracted subtitle text.
        segment_count: Number of cues found in the extracted text.
    """

    filename: str
    mime_type: str
    srt: str
    segment_count: int = Field(ge=0)


class TranslateRequest(BaseModel):
    """Request payload for subtitle translation.

    Attributes:
        srt_content: The SRT text to translate.
        target_language: Language to translate into.
    """

    srt_content: str = Field(..., min_length=1)
    target_language: TargetLanguage = TargetLanguage.ENGLISH

    @field_validator("srt_content", mode="before")
    @classmethod
    def strip_srt_content(cls, v: str) -> str:
        """Strip surrounding whitespace before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class TranslateResponse(BaseModel):
    """Response after subtitle translation."""

    target_language: TargetLanguage
    srt: str
    segment_count: int = Field(ge=0)
