"""FastAPI endpoints for Gemini SRT Pro.

Endpoints:
    - GET /health: Service health status
    - POST /subtitles/extract: Video upload to SRT extraction
    - POST /subtitles/translate: SRT translation
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
