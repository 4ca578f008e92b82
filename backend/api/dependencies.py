"""Shared dependencies for API routes."""

from fastapi import Header, HTTPException, status

from config import settings
from services.gemini_client import GeminiClient, get_client


def get_gemini_client() -> GeminiClient | None:
    return get_client()


def require_authenticated(x_api_key: str | None = Header(default=None, alias="X-API-Key")) -> None:
    """Gate for the analyze routes. Open when no API key is configured."""
    if not settings.api_key:
        return
    if x_api_key != settings.api_key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Please provide a valid API key to analyze resumes.",
        )
