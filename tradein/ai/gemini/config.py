"""
Configuration management for the Gemini integration package.

This module handles environment variable configuration and validation
for Gemini integration using Pydantic settings.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from tradein.utils.logger import logger


class GeminiSettings(BaseSettings):
    """Configuration for Gemini integration using Pydantic settings."""

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        env_prefix="GEMINI_",
        populate_by_name=True,
    )

    # Gemini API configuration
    api_key: str = Field(
        validation_alias=AliasChoices("GEMINI_API_KEY", "API_KEY", "api_key"),
        description="Gemini API key for authentication",
    )
    model_name: str = Field(
        default="gemini-2.5-flash", description="Gemini model name to use"
    )
    estimate_temperature: float = Field(
        default=0.1,
        description="Temperature for estimate generation (0.0-1.0)",
    )
    enable_google_search: bool = Field(
        default=True,
        description="Let the model look up market comparables with Google Search",
    )
    timeout: int = Field(default=120, description="Request timeout in seconds")

    # Tracing
    enable_braintrust: bool = Field(
        default=False, description="Trace Gemini calls with Braintrust"
    )
    braintrust_project_name: str | None = Field(
        default=None, description="Braintrust project receiving traces"
    )


# Global settings instance
_gemini_settings: GeminiSettings | None = None


def get_gemini_settings() -> GeminiSettings:
    """
    Get the global Gemini settings instance.

    Returns:
        GeminiSettings: The global settings instance
    """
    global _gemini_settings
    if _gemini_settings is None:
        _gemini_settings = GeminiSettings()
        logger.info("Settings loaded", model_name=_gemini_settings.model_name)
    return _gemini_settings


def set_gemini_settings(settings: GeminiSettings) -> None:
    """
    Set the global Gemini settings instance.

    Args:
        settings: The settings to set
    """
    global _gemini_settings
    _gemini_settings = settings
