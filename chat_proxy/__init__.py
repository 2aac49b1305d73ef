"""Gemini chat proxy - single-endpoint FastAPI proxy to Google Gemini."""

__version__ = "1.0.0"
