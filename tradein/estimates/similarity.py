"""
Similarity scoring of historical trade-ins against a submitted boat.

The score is a small additive heuristic so every ranking can be explained:
boat type, make, model year and engine horsepower each contribute fixed points.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from tradein.estimates.constants import (
    BOAT_TYPE_MATCH_POINTS,
    CLOSE_YEAR_POINTS,
    CLOSE_YEAR_WINDOW,
    DEFAULT_SIMILAR_TRADE_COUNT,
    HORSEPOWER_MATCH_POINTS,
    HORSEPOWER_WINDOW,
    MAKE_MATCH_POINTS,
    NEAR_YEAR_POINTS,
    NEAR_YEAR_WINDOW,
)
from tradein.estimates.historical_data import HistoricalRecord
from tradein.estimates.schemas import BoatProfile


@dataclass(frozen=True)
class ScoredRecord:
    """A historical record and its similarity to the submitted boat."""

    record: HistoricalRecord
    score: int


def score_record(profile: BoatProfile, record: HistoricalRecord) -> int:
    """Score one historical record against the submitted boat."""
    score = 0

    if record.boat_type.lower() == profile.boat_type.value.lower():
        score += BOAT_TYPE_MATCH_POINTS
    if record.make.lower() == profile.make.lower():
        score += MAKE_MATCH_POINTS

    year_delta = abs(record.year - profile.year)
    if year_delta <= CLOSE_YEAR_WINDOW:
        score += CLOSE_YEAR_POINTS
    elif year_delta <= NEAR_YEAR_WINDOW:
        score += NEAR_YEAR_POINTS

    # Zero horsepower on a record means the sheet didn't have it
    if profile.horsepower is not None and record.engine_hp > 0:
        if abs(record.engine_hp - profile.horsepower) <= HORSEPOWER_WINDOW:
            score += HORSEPOWER_MATCH_POINTS

    return score


def find_similar_trades(
    profile: BoatProfile,
    records: Iterable[HistoricalRecord],
    count: int = DEFAULT_SIMILAR_TRADE_COUNT,
) -> list[ScoredRecord]:
    """Return the ``count`` best matching records, highest score first.

    Equal scores keep their load order.
    """
    scored = [ScoredRecord(record=record, score=score_record(profile, record)) for record in records]
    scored.sort(key=lambda item: item.score, reverse=True)
    return scored[:count]
