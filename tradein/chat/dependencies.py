"""FastAPI dependencies for the chat endpoints."""

from fastapi import Depends

from tradein.ai.gemini import get_gemini_client
from tradein.ai.gemini.client import GeminiClient
from tradein.chat.service import ChatService


def get_chat_service(
    gemini_client: GeminiClient = Depends(get_gemini_client),
) -> ChatService:
    """
    FastAPI dependency for getting the chat service instance.

    Args:
        gemini_client: The Gemini client from dependency injection

    Returns:
        ChatService: The chat service instance
    """
    return ChatService(gemini_client)
