"""Exceptions raised by the estimation pipeline."""


class EstimateError(Exception):
    """Base exception for estimation errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DataSourceUnavailable(EstimateError):
    """Raised when a historical data source cannot be read or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Historical source {source} unavailable: {reason}")
        self.source = source
        self.reason = reason


class MalformedResponse(EstimateError):
    """Raised when a model reply cannot be parsed into an Estimate."""

    pass


class ValidationFailure(EstimateError):
    """Raised when a request is missing or carries malformed fields."""

    pass
