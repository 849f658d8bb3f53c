"""Pydantic models for subtitle state and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - SrtSegment: A single subtitle cue
    - ProcessingStatus: Loading flag, status message and last error
    - TargetLanguage / AppTab: Translation targets and page tabs
    - ExtractResponse: Extraction result
    - TranslateRequest / TranslateResponse: Translation payloads
"""

from src.models.schemas import (
    AppTab,
    ExtractResponse,
    ProcessingStatus,
    SrtSegment,
    TargetLanguage,
    TranslateRequest,
    TranslateResponse,
)

__all__ = [
    "AppTab",
    "ExtractResponse",
    "ProcessingStatus",
    "SrtSegment",
    "TargetLanguage",
    "TranslateRequest",
    "TranslateResponse",
]
