"""Google Gemini API client implementation."""

from typing import NoReturn

from braintrust.wrappers.google_genai import setup_genai
from google import genai
from google.genai import errors, types

from tradein.ai.gemini.config import GeminiSettings
from tradein.ai.gemini.exceptions import (
    GeminiAuthenticationError,
    GeminiError,
    GeminiRateLimitError,
    GeminiServerError,
    UpstreamCallFailure,
)
from tradein.ai.gemini.schemas import (
    ChatMessage,
    ChatSessionRequest,
    GenerateContentRequest,
    GenerateContentResponse,
)
from tradein.utils.logger import logger


class GeminiClient:
    """Async client for Google Gemini API.

    Generates single-shot content (text prompt plus inline images) and runs
    one turn of a chat session seeded with prior history. Each call is a
    single attempt; failures surface as UpstreamCallFailure subclasses.
    """

    def __init__(self, settings: GeminiSettings) -> None:
        """Initialize Gemini client.

        Args:
            settings: Gemini settings instance with API configuration
        """
        self.settings = settings
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        """Get or create the Gemini client.

        Automatically sets up Braintrust tracing if enabled.
        """
        if self._client is None:
            try:
                if (
                    self.settings.enable_braintrust
                    and self.settings.braintrust_project_name
                ):
                    logger.info(
                        "Setting up Gemini with Braintrust tracing enabled",
                        project=self.settings.braintrust_project_name,
                    )
                    setup_genai(project_name=self.settings.braintrust_project_name)

                self._client = genai.Client(
                    api_key=self.settings.api_key,
                    http_options=types.HttpOptions(timeout=self.settings.timeout * 1000),
                )
                logger.info("Gemini client initialized")
            except Exception as e:
                logger.error("Failed to initialize Gemini client", error=str(e))
                raise GeminiAuthenticationError(f"Failed to authenticate: {e}")
        return self._client

    def _handle_api_error(self, error: Exception, operation: str) -> NoReturn:
        """Convert an SDK or transport error into an UpstreamCallFailure."""
        if isinstance(error, errors.APIError):
            message = f"{operation} failed: {error.message or error}"
            if error.code in (401, 403):
                raise GeminiAuthenticationError(message, status_code=error.code)
            if error.code == 429:
                raise GeminiRateLimitError(message, status_code=error.code)
            if error.code is not None and error.code >= 500:
                raise GeminiServerError(message, status_code=error.code)
            raise UpstreamCallFailure(message, status_code=error.code)
        raise UpstreamCallFailure(f"{operation} failed: {error}")

    @staticmethod
    def _to_response(response: types.GenerateContentResponse) -> GenerateContentResponse:
        finish_reason = None
        if response.candidates:
            reason = response.candidates[0].finish_reason
            finish_reason = getattr(reason, "value", reason)
        usage = response.usage_metadata
        return GenerateContentResponse(
            text=response.text or "",
            usage=usage.model_dump(exclude_none=True) if usage else None,
            finish_reason=finish_reason,
        )

    @staticmethod
    def _to_content(message: ChatMessage) -> types.Content:
        return types.Content(
            role=message.role.value,
            parts=[types.Part.from_text(text=message.text)],
        )

    async def generate_content(
        self, request: GenerateContentRequest
    ) -> GenerateContentResponse:
        """Generate content using Gemini API.

        Args:
            request: Content generation request with prompt and optional images

        Returns:
            GenerateContentResponse: Generated content response

        Raises:
            UpstreamCallFailure: If the API call fails
        """
        try:
            client = self._get_client()

            parts = [types.Part.from_text(text=request.prompt)]
            for image in request.images:
                parts.append(
                    types.Part.from_bytes(data=image.to_bytes(), mime_type=image.mime_type)
                )

            model_name = request.model_name or self.settings.model_name

            generation_config = {}
            if request.temperature is not None:
                generation_config["temperature"] = request.temperature
            if request.system_instruction:
                generation_config["system_instruction"] = request.system_instruction
            if request.enable_google_search:
                generation_config["tools"] = [
                    types.Tool(google_search=types.GoogleSearch())
                ]

            logger.info(
                "Generating content with model",
                model_name=model_name,
                image_count=len(request.images),
                google_search=request.enable_google_search,
            )

            response = await client.aio.models.generate_content(
                model=model_name,
                contents=[types.Content(role="user", parts=parts)],
                config=types.GenerateContentConfig(**generation_config)
                if generation_config
                else None,
            )
            return self._to_response(response)

        except Exception as e:
            logger.error("Content generation failed", error=str(e))
            if isinstance(e, GeminiError):
                raise
            self._handle_api_error(e, "Content generation")

    async def send_chat_message(
        self, request: ChatSessionRequest
    ) -> GenerateContentResponse:
        """Start a chat session from seed history and send one new turn.

        Args:
            request: System instruction, seed history and the new message

        Returns:
            GenerateContentResponse: The model's reply

        Raises:
            UpstreamCallFailure: If the API call fails
        """
        try:
            client = self._get_client()
            model_name = request.model_name or self.settings.model_name

            logger.info(
                "Sending chat message",
                model_name=model_name,
                history_length=len(request.history),
            )

            chat = client.aio.chats.create(
                model=model_name,
                config=types.GenerateContentConfig(
                    system_instruction=request.system_instruction
                ),
                history=[self._to_content(message) for message in request.history],
            )
            response = await chat.send_message(request.message)
            return self._to_response(response)

        except Exception as e:
            logger.error("Chat message failed", error=str(e))
            if isinstance(e, GeminiError):
                raise
            self._handle_api_error(e, "Chat message")
