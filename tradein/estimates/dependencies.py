"""
FastAPI dependencies for the estimate endpoints.

This module provides dependency injection functions for estimate-related
FastAPI endpoints.
"""

from fastapi import Depends, Request

from tradein.ai.gemini import get_gemini_client
from tradein.ai.gemini.client import GeminiClient
from tradein.ai.gemini.config import GeminiSettings, get_gemini_settings
from tradein.config import AppSettings, get_app_settings
from tradein.estimates.historical_data import HistoricalDataProvider
from tradein.estimates.service import EstimateService


def get_historical_data(request: Request) -> HistoricalDataProvider:
    """
    FastAPI dependency returning the provider loaded at startup.

    Returns:
        HistoricalDataProvider: The application's historical data
    """
    return request.app.state.historical_data


def get_estimate_service(
    gemini_client: GeminiClient = Depends(get_gemini_client),
    historical_data: HistoricalDataProvider = Depends(get_historical_data),
    app_settings: AppSettings = Depends(get_app_settings),
    gemini_settings: GeminiSettings = Depends(get_gemini_settings),
) -> EstimateService:
    """
    FastAPI dependency for getting the estimate service instance.

    Args:
        gemini_client: The Gemini client from dependency injection
        historical_data: The historical data provider from dependency injection
        app_settings: Application settings from dependency injection
        gemini_settings: Gemini settings from dependency injection

    Returns:
        EstimateService: The estimate service instance
    """
    return EstimateService(
        gemini_client=gemini_client,
        historical_data=historical_data,
        app_settings=app_settings,
        gemini_settings=gemini_settings,
    )
