"""Unit tests for individual components in isolation.

Coverage:
    - utils/: Base64 payloads, fence cleanup, upload checks, SRT reading
    - gemini/: Configuration and request building for the model calls
    - ui/: Page session state and the HTTP client

Uses mocks for the Gemini SDK.
"""
