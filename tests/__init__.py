"""Test package for Gemini SRT Pro.

Structure:
    - unit/: Individual function and class tests
    - integration/: API and UI-client workflows against the ASGI app
    - data/: Sample subtitle files

The Gemini client is mocked everywhere except the live tests, which are
skipped unless GEMINI_API_KEY is set.
Leverages pytest with pytest-check for soft assertions.
"""
