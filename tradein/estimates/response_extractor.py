"""
Recover a structured Estimate from free-text model output.

Models wrap JSON in markdown fences or chatty prose. Each extraction strategy
looks for the JSON payload its own way and returns a match or None; the first
strategy to match wins.
"""

import json
import re
from collections.abc import Callable
from dataclasses import dataclass

from pydantic import ValidationError

from tradein.estimates.exceptions import MalformedResponse
from tradein.estimates.schemas import Estimate

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```")


@dataclass(frozen=True)
class ExtractionMatch:
    """JSON text found in a reply, tagged with the strategy that found it."""

    strategy: str
    payload: str


ExtractionStrategy = Callable[[str], ExtractionMatch | None]


def extract_fenced_block(text: str) -> ExtractionMatch | None:
    """Interior of the first ``` fence, optionally tagged json."""
    match = _FENCED_BLOCK.search(text)
    if match is None or not match.group(1).strip():
        return None
    return ExtractionMatch(strategy="fenced_block", payload=match.group(1).strip())


def extract_brace_span(text: str) -> ExtractionMatch | None:
    """Everything from the first ``{`` to the last ``}``."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    return ExtractionMatch(strategy="brace_span", payload=text[start : end + 1])


EXTRACTION_STRATEGIES: tuple[ExtractionStrategy, ...] = (
    extract_fenced_block,
    extract_brace_span,
)


def locate_json_payload(
    text: str, strategies: tuple[ExtractionStrategy, ...] = EXTRACTION_STRATEGIES
) -> ExtractionMatch | None:
    """Run the strategies in order and return the first match."""
    for strategy in strategies:
        match = strategy(text)
        if match is not None:
            return match
    return None


def extract_estimate(text: str | None) -> Estimate:
    """Parse a model reply into an Estimate.

    Raises:
        MalformedResponse: If the reply is empty, holds no JSON object, or
            the object lacks numeric low/high values
    """
    if not text or not text.strip():
        raise MalformedResponse("The AI model returned an empty response.")

    match = locate_json_payload(text.strip())
    if match is None:
        raise MalformedResponse("No JSON object found in the AI response.")

    try:
        data = json.loads(match.payload)
    except json.JSONDecodeError as e:
        raise MalformedResponse(f"Invalid JSON in the AI response: {e}") from e

    if not isinstance(data, dict):
        raise MalformedResponse("The AI response JSON is not an object.")

    try:
        return Estimate.model_validate(data)
    except ValidationError as e:
        fields = sorted(
            {
                ".".join(str(part) for part in error["loc"]) or error["msg"]
                for error in e.errors()
            }
        )
        raise MalformedResponse(
            f"The AI response does not match the estimate format: {', '.join(fields)}"
        ) from e
