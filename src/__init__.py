"""Gemini SRT Pro - subtitle extraction and translation with Gemini.

Combines FastAPI for the HTTP API, google-genai for model calls,
NiceGUI for the browser interface, and Pydantic for data validation.

Components:
    - api: HTTP endpoints for extraction and translation
    - gemini: Model client, instructions and error wrapping
    - utils: Base64 payloads, fence cleanup, upload checks, SRT reading
    - ui: Web interface for uploads, results and downloads
    - models: Subtitle state and request/response schemas
"""

__version__ = "0.1.0"
