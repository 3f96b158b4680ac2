"""
Chat service for follow-up questions about an estimate.

Each request carries the whole conversation; the service reshapes it into a
seeded Gemini chat session and sends the newest message.
"""

from collections.abc import Sequence

from tradein.ai.gemini.client import GeminiClient
from tradein.ai.gemini.schemas import ChatMessage, ChatSessionRequest
from tradein.chat.history import split_chat_turn
from tradein.utils.logger import logger

CHAT_APOLOGY = "Sorry, I encountered a technical issue and can't respond right now."


class ChatService:
    """Service for estimate follow-up chat."""

    def __init__(self, gemini_client: GeminiClient):
        """
        Initialize the chat service.

        Args:
            gemini_client: Client used for the chat session
        """
        self.gemini_client = gemini_client

    async def reply(
        self, system_instruction: str, history: Sequence[ChatMessage]
    ) -> str:
        """
        Reply to the newest message in a conversation.

        Args:
            system_instruction: Instruction priming the assistant
            history: Full conversation, newest message last

        Returns:
            str: The model's reply, or an apology if it returned nothing

        Raises:
            UpstreamCallFailure: If the Gemini call fails
        """
        seed_history, new_turn = split_chat_turn(history)
        logger.info(
            "Sending chat turn",
            seed_length=len(seed_history),
            dropped=len(history) - 1 - len(seed_history),
        )

        response = await self.gemini_client.send_chat_message(
            ChatSessionRequest(
                system_instruction=system_instruction,
                history=seed_history,
                message=new_turn.text,
            )
        )

        if not response.text.strip():
            logger.error(
                "Model returned an empty chat reply",
                finish_reason=response.finish_reason,
            )
            return CHAT_APOLOGY
        return response.text
