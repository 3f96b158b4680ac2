"""
Chat router.

Follow-up chat about an estimate, and the context used to open that chat.
"""

from http import HTTPStatus

from fastapi import APIRouter, Depends, HTTPException

from tradein.ai.gemini.exceptions import UpstreamCallFailure
from tradein.chat.context import build_chat_context
from tradein.chat.dependencies import get_chat_service
from tradein.chat.schemas import ChatContext, ChatContextRequest, ChatRequest, ChatResponse
from tradein.chat.service import ChatService
from tradein.config import AppSettings, get_app_settings
from tradein.utils.logger import logger

router = APIRouter(prefix="/chat", tags=["Chat"])


@router.post("", response_model=ChatResponse)
async def send_chat_message(
    request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Answer the newest message of an estimate conversation.

    Args:
        request: System instruction and the full message history
        chat_service: Chat service dependency

    Returns:
        ChatResponse: The model's reply

    Raises:
        HTTPException: 400 if the instruction or history is missing,
            500 if the Gemini call fails
    """
    instruction = (request.system_instruction or "").strip()
    if not instruction or not request.history:
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail="Missing systemInstruction or history in request",
        )

    try:
        text = await chat_service.reply(request.system_instruction, request.history)
    except UpstreamCallFailure as e:
        logger.error("Error in chat endpoint", error=e.message)
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=e.message
        )
    return ChatResponse(text=text)


@router.post("/context", response_model=ChatContext)
async def create_chat_context(
    request: ChatContextRequest,
    app_settings: AppSettings = Depends(get_app_settings),
) -> ChatContext:
    """
    Build the system instruction and welcome message for a new chat.

    Args:
        request: The submitted boat, its estimate and the audience
        app_settings: Application settings

    Returns:
        ChatContext: Instruction and opening history

    Raises:
        HTTPException: 400 if the estimate did not succeed
    """
    if not request.estimate.is_successful:
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail="Chat is only available for a successful estimate",
        )
    return build_chat_context(
        request.form_data,
        request.estimate,
        request.audience,
        dealership_name=app_settings.dealership_name,
        currency=app_settings.currency,
    )
