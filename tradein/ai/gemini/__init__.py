"""Gemini AI integration package."""

from tradein.ai.gemini.client import GeminiClient
from tradein.ai.gemini.config import get_gemini_settings


def get_gemini_client() -> GeminiClient:
    """
    Get a configured Gemini client instance.

    Returns:
        GeminiClient: The configured Gemini client
    """
    return GeminiClient(settings=get_gemini_settings())


__all__ = [
    "GeminiClient",
    "get_gemini_client",
]
