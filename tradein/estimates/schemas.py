"""
Estimate-specific Pydantic schemas.

This module contains the boat profile submitted by the trade-in form, the
structured estimate produced by the model, and the request bodies of the
estimate endpoints. Wire names are camelCase; Python attributes are snake_case.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from tradein.ai.gemini.schemas import InlineImage
from tradein.estimates.constants import (
    FAILED_ESTIMATE_REASONING,
    BoatType,
    CosmeticCondition,
    LeadQuality,
    MechanicalCondition,
)
from tradein.estimates.parsing import parse_currency, parse_leading_int


class CamelModel(BaseModel):
    """Immutable model accepting camelCase or snake_case field names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )


class BoatProfile(CamelModel):
    """Boat details submitted for estimation, plus the contact step."""

    boat_type: BoatType
    year: int
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    horsepower: int | None = None
    engine_hours: int | None = None
    trailer: bool = False
    cosmetic_condition: CosmeticCondition
    mechanical_condition: MechanicalCondition
    hin: str = ""
    engine_make: str = ""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    postal_code: str = ""

    @field_validator("horsepower", "engine_hours", mode="before")
    @classmethod
    def _blank_is_unknown(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("hin", "engine_make", "full_name", "email", "phone", "postal_code", mode="before")
    @classmethod
    def _none_is_blank(cls, value: Any) -> Any:
        return "" if value is None else value

    @property
    def description(self) -> str:
        return f"{self.year} {self.make} {self.model}"


class Comparable(CamelModel):
    """A currently listed boat used as market evidence."""

    make: str = ""
    model: str = ""
    year: int | None = None
    price: float | None = None
    source: str = ""

    @field_validator("year", mode="before")
    @classmethod
    def _parse_year(cls, value: Any) -> Any:
        # Listings found on the web give years like "2018-2019" or "N/A"
        if isinstance(value, str):
            return parse_leading_int(value)
        if isinstance(value, float) and not value.is_integer():
            return None
        return value

    @field_validator("price", mode="before")
    @classmethod
    def _parse_price(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_currency(value)
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value


class Estimate(CamelModel):
    """Structured trade-in estimate."""

    low: int
    high: int
    reasoning: str = ""
    comparables: list[Comparable] = Field(default_factory=list)
    value_adding_features: list[str] = Field(default_factory=list)
    potential_deductions: list[str] = Field(default_factory=list)
    lead_quality: LeadQuality = LeadQuality.MEDIUM

    @field_validator("low", "high", mode="before")
    @classmethod
    def _require_number(cls, value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a number, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"expected a finite number, got {value!r}")
        return round(value)

    @field_validator("lead_quality", mode="before")
    @classmethod
    def _normalize_lead_quality(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().capitalize()
        return value

    @model_validator(mode="after")
    def _check_bounds(self) -> "Estimate":
        if self.high < self.low:
            raise ValueError(f"high ({self.high}) is below low ({self.low})")
        return self

    @property
    def is_successful(self) -> bool:
        return self.low > 0

    @classmethod
    def failed(cls, error: str) -> "Estimate":
        """Zero-valued estimate returned when no estimate could be produced."""
        return cls(
            low=0,
            high=0,
            reasoning=FAILED_ESTIMATE_REASONING.format(error=error),
            lead_quality=LeadQuality.LOW,
        )


class EstimateRequest(CamelModel):
    """Body of POST /api/estimate."""

    form_data: BoatProfile
    image_parts: list[InlineImage] = Field(default_factory=list)

    @field_validator("image_parts", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class StepValidationResult(BaseModel):
    """Outcome of validating one step of the trade-in form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    step: int
    is_valid: bool
    missing_fields: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)
