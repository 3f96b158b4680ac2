"""
Per-step validation of the trade-in form.

The form is filled in three steps (boat info, condition, contact details).
Each step has its own check so the UI can gate the "Next Step" button on a
partially completed form. Input is the raw form mapping with camelCase keys.
"""

from collections.abc import Callable, Mapping
from typing import Any

from tradein.estimates.constants import BoatType, CosmeticCondition, MechanicalCondition
from tradein.estimates.exceptions import ValidationFailure
from tradein.estimates.schemas import StepValidationResult

FormData = Mapping[str, Any]

STEP_BOAT_INFO = 1
STEP_CONDITION = 2
STEP_CONTACT = 3


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _missing(form: FormData, fields: tuple[str, ...]) -> list[str]:
    return [name for name in fields if _is_blank(form.get(name))]


def _is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and value.strip().isdigit()


def _enum_error(form: FormData, name: str, enum_type: type) -> list[str]:
    value = form.get(name)
    allowed = [member.value for member in enum_type]
    if _is_blank(value) or value in allowed:
        return []
    return [f"{name} must be one of: {', '.join(allowed)}"]


def validate_boat_info(form: FormData) -> StepValidationResult:
    """Step 1: boat type, year, make, model, horsepower and engine hours."""
    missing = _missing(
        form, ("boatType", "year", "make", "model", "horsepower", "engineHours")
    )
    errors = _enum_error(form, "boatType", BoatType)
    for name in ("year", "horsepower", "engineHours"):
        if name not in missing and not _is_integer(form.get(name)):
            errors.append(f"{name} must be a whole number")
    return StepValidationResult(
        step=STEP_BOAT_INFO,
        is_valid=not missing and not errors,
        missing_fields=missing,
        errors=errors,
    )


def validate_condition(form: FormData) -> StepValidationResult:
    """Step 2: cosmetic and mechanical condition."""
    missing = _missing(form, ("cosmeticCondition", "mechanicalCondition"))
    errors = _enum_error(form, "cosmeticCondition", CosmeticCondition)
    errors += _enum_error(form, "mechanicalCondition", MechanicalCondition)
    return StepValidationResult(
        step=STEP_CONDITION,
        is_valid=not missing and not errors,
        missing_fields=missing,
        errors=errors,
    )


def validate_contact(form: FormData) -> StepValidationResult:
    """Step 3: name, email, phone and postal code."""
    missing = _missing(form, ("fullName", "email", "phone", "postalCode"))
    errors = []
    if "email" not in missing and "@" not in str(form.get("email")):
        errors.append("email must be a valid email address")
    return StepValidationResult(
        step=STEP_CONTACT,
        is_valid=not missing and not errors,
        missing_fields=missing,
        errors=errors,
    )


STEP_VALIDATORS: dict[int, Callable[[FormData], StepValidationResult]] = {
    STEP_BOAT_INFO: validate_boat_info,
    STEP_CONDITION: validate_condition,
    STEP_CONTACT: validate_contact,
}


def validate_step(step: int, form: FormData) -> StepValidationResult:
    """Validate one step of the form.

    Raises:
        ValidationFailure: If the step number is unknown
    """
    validator = STEP_VALIDATORS.get(step)
    if validator is None:
        raise ValidationFailure(
            f"Unknown form step {step}; expected one of {sorted(STEP_VALIDATORS)}"
        )
    return validator(form)
