"""Pydantic schemas for Gemini integration requests and responses."""

import base64
import binascii
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class ChatRole(str, Enum):
    """Conversation roles understood by Gemini chat sessions."""

    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """A single turn in a conversation."""

    model_config = ConfigDict(frozen=True)

    role: ChatRole
    text: str


class InlineImage(BaseModel):
    """Base64 encoded image sent inline with a prompt."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    mime_type: str = Field(description="MIME type of the image, e.g. image/jpeg")
    data: str = Field(description="Base64 encoded image bytes")

    @field_validator("data")
    @classmethod
    def _must_be_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"image data is not valid base64: {e}") from e
        return value

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


class GenerateContentRequest(BaseModel):
    """Request model for generating content with Gemini."""

    prompt: str = Field(description="Text prompt for content generation")
    system_instruction: Optional[str] = Field(
        default=None, description="System instruction for the model"
    )
    images: List[InlineImage] = Field(
        default_factory=list, description="Inline images sent after the prompt"
    )
    temperature: Optional[float] = Field(
        default=None, description="Temperature override for this request"
    )
    model_name: Optional[str] = Field(
        default=None, description="Model name override for this request"
    )
    enable_google_search: bool = Field(
        default=False, description="Attach the Google Search tool"
    )


class ChatSessionRequest(BaseModel):
    """Request model for one turn of a Gemini chat session."""

    system_instruction: str = Field(description="System instruction for the session")
    history: List[ChatMessage] = Field(
        default_factory=list, description="Seed history for the session"
    )
    message: str = Field(description="The new user turn")
    model_name: Optional[str] = Field(
        default=None, description="Model name override for this request"
    )


class GenerateContentResponse(BaseModel):
    """Response model for content generation."""

    text: str = Field(default="", description="Generated text content")
    usage: Optional[Dict[str, Any]] = Field(
        default=None, description="Usage statistics"
    )
    finish_reason: Optional[str] = Field(
        default=None, description="Reason why generation finished"
    )
