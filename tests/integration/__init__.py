"""Integration tests for components working together.

Coverage:
    - API endpoints with real HTTP requests over ASGITransport
    - UI client talking to the real FastAPI app
    - Live Gemini calls (when GEMINI_API_KEY is configured)
"""
