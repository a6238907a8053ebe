from typing import Optional

from fastapi import HTTPException
from google import genai

from backend import config
from backend.utils.logger import get_logger

logger = get_logger(__name__)

_client: Optional[genai.Client] = None


def get_client() -> genai.Client:
    """Process-wide Gen AI client, created on first use."""
    global _client
    if _client is None:
        if not config.GEMINI_API_KEY:
            raise RuntimeError("GEMINI_API_KEY is not set")
        _client = genai.Client(api_key=config.GEMINI_API_KEY)
    return _client


def require_client() -> genai.Client:
    """FastAPI dependency. 키가 없으면 503 으로 응답."""
    try:
        return get_client()
    except RuntimeError as e:
        logger.error("Gen AI client unavailable: %s", e)
        raise HTTPException(status_code=503, detail="The AI service is not configured.")
