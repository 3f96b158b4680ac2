"""Custom exceptions for the Gemini integration package."""


class GeminiError(Exception):
    """Base exception for all Gemini-related errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class UpstreamCallFailure(GeminiError):
    """Raised when the call to the Gemini API itself fails."""

    pass


class GeminiAuthenticationError(UpstreamCallFailure):
    """Raised when authentication with Gemini API fails."""

    pass


class GeminiRateLimitError(UpstreamCallFailure):
    """Raised when Gemini API rate limit is exceeded."""

    pass


class GeminiServerError(UpstreamCallFailure):
    """Raised when Gemini API returns a server error."""

    pass
