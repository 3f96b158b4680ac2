"""Pydantic schemas for the chat endpoints."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tradein.ai.gemini.schemas import ChatMessage
from tradein.estimates.constants import Audience
from tradein.estimates.schemas import BoatProfile, Estimate


class ChatBaseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChatRequest(ChatBaseModel):
    """Body of POST /api/chat."""

    system_instruction: str | None = None
    history: list[ChatMessage] = Field(default_factory=list)


class ChatResponse(ChatBaseModel):
    """Model reply to one chat turn."""

    text: str


class ChatContextRequest(ChatBaseModel):
    """Body of POST /api/chat/context."""

    form_data: BoatProfile
    estimate: Estimate
    audience: Audience = Audience.CUSTOMER


class ChatContext(ChatBaseModel):
    """System instruction and opening history for a new conversation."""

    system_instruction: str
    history: list[ChatMessage]
