"""
Estimate router.

This module contains the trade-in estimate endpoint and the per-step form
validation endpoint.
"""

from http import HTTPStatus
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from tradein.ai.gemini.exceptions import UpstreamCallFailure
from tradein.estimates.dependencies import get_estimate_service
from tradein.estimates.exceptions import ValidationFailure
from tradein.estimates.schemas import Estimate, EstimateRequest, StepValidationResult
from tradein.estimates.service import EstimateService
from tradein.estimates.validation import validate_step
from tradein.utils.logger import logger

router = APIRouter(prefix="/estimate", tags=["Estimates"])


@router.post("", response_model=Estimate)
async def create_estimate(
    request: EstimateRequest,
    estimate_service: EstimateService = Depends(get_estimate_service),
) -> Estimate:
    """
    Generate a trade-in estimate for a submitted boat.

    Args:
        request: The form data and optional base64 photos
        estimate_service: The estimate service from dependency injection

    Returns:
        Estimate: The structured estimate; zero-valued if the model reply
            could not be parsed

    Raises:
        HTTPException: If the Gemini call fails
    """
    try:
        return await estimate_service.generate_estimate(request)
    except UpstreamCallFailure as e:
        logger.error("Error in estimate endpoint", error=e.message)
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=e.message
        )


@router.post("/validate/{step}", response_model=StepValidationResult)
async def validate_form_step(
    step: int,
    form_data: dict[str, Any] = Body(...),
) -> StepValidationResult:
    """
    Validate one step of the trade-in form.

    Args:
        step: Form step number (1 boat info, 2 condition, 3 contact)
        form_data: The form as filled in so far

    Returns:
        StepValidationResult: Missing fields and errors for the step

    Raises:
        HTTPException: If the step number is unknown
    """
    try:
        return validate_step(step, form_data)
    except ValidationFailure as e:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=e.message)
