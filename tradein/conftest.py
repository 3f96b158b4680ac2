"""Shared fixtures for the trade-in estimator tests."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from tradein.ai.gemini import get_gemini_client
from tradein.ai.gemini.client import GeminiClient
from tradein.ai.gemini.config import GeminiSettings, get_gemini_settings
from tradein.estimates.constants import (
    BoatType,
    CosmeticCondition,
    LeadQuality,
    MechanicalCondition,
)
from tradein.estimates.schemas import BoatProfile, Comparable, Estimate
from tradein.main import app


@pytest.fixture
def boat_profile():
    """A 2019 Lund 1650 fishing boat in good, turn-key condition."""
    return BoatProfile(
        boat_type=BoatType.FISHING,
        year=2019,
        make="Lund",
        model="1650",
        horsepower=90,
        engine_hours=150,
        trailer=True,
        cosmetic_condition=CosmeticCondition.GOOD,
        mechanical_condition=MechanicalCondition.TURN_KEY,
        full_name="Jordan Tremblay",
        email="jordan@example.com",
        phone="705-555-0142",
        postal_code="P1H 2J6",
    )


@pytest.fixture
def estimate():
    """A successful estimate with one comparable."""
    return Estimate(
        low=18000,
        high=21500,
        reasoning="Popular model with low hours for its age.",
        comparables=[
            Comparable(
                make="Lund",
                model="1650 Rebel XS",
                year=2019,
                price=24995.0,
                source="https://example.com/listings/lund-1650",
            )
        ],
        value_adding_features=["Low engine hours", "Trailer included"],
        potential_deductions=["Minor cosmetic wear"],
        lead_quality=LeadQuality.HIGH,
    )


@pytest.fixture
def mock_gemini_client():
    """A Gemini client whose API calls are AsyncMocks."""
    return AsyncMock(spec=GeminiClient)


@pytest.fixture
def gemini_settings():
    return GeminiSettings(api_key="test-key")


@pytest.fixture
def client(mock_gemini_client, gemini_settings):
    """Test client with the Gemini client and settings replaced."""
    app.dependency_overrides[get_gemini_client] = lambda: mock_gemini_client
    app.dependency_overrides[get_gemini_settings] = lambda: gemini_settings

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def server_error_client(mock_gemini_client, gemini_settings):
    """Like ``client`` but returns 500 responses instead of raising."""
    app.dependency_overrides[get_gemini_client] = lambda: mock_gemini_client
    app.dependency_overrides[get_gemini_settings] = lambda: gemini_settings

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client

    app.dependency_overrides.clear()
