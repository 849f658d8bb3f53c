"""NiceGUI interface - thin visualization layer for subtitle work.

Responsibilities:
    - Video upload and extraction trigger
    - Editable extracted SRT with .srt / .txt download
    - Target language selection and translation trigger
    - Loading overlay and error banner

Contains minimal business logic. Delegates all operations to the API.
"""
