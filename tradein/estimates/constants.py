"""
Estimate constants and enums.

This module contains the enums and static values shared by the trade-in
form, the estimation pipeline and the estimate log.
"""

from enum import Enum


class BoatType(str, Enum):
    """Boat types offered on the trade-in form."""

    PONTOON = "Pontoon"
    FISHING = "Fishing"
    DECK_BOAT = "Deck Boat"
    BOWRIDER = "Bowrider"
    CRUISER = "Cruiser"
    WAKE_SKI = "Wake/Ski Boat"
    OTHER = "Other"


class CosmeticCondition(str, Enum):
    """Cosmetic condition grades."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class MechanicalCondition(str, Enum):
    """Mechanical condition grades."""

    TURN_KEY = "Turn-Key"
    MINOR_ISSUES = "Minor Issues"
    NEEDS_REPAIR = "Needs Repair"


class LeadQuality(str, Enum):
    """Sales-readiness of a submitted boat."""

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class Audience(str, Enum):
    """Who is using the estimator: the public form or the staff tool."""

    CUSTOMER = "customer"
    STAFF = "staff"


BOAT_MAKES: list[str] = [
    "Legend",
    "Lund",
    "Princecraft",
    "Crestliner",
    "Alumacraft",
    "Bayliner",
    "Sea Ray",
    "Tahoe",
    "Four Winns",
    "Glastron",
    "Mastercraft",
    "Malibu",
    "Correct Craft / Nautique",
    "Tige",
    "Bennington",
    "Sylvan",
    "Manitou",
    "Harris",
    "Other",
]

ENGINE_MAKES: list[str] = [
    "Mercury",
    "Yamaha",
    "Honda",
    "Evinrude",
    "Suzuki",
    "Tohatsu",
    "Johnson",
    "Volvo Penta",
    "Mercruiser",
    "Other",
]

DEFAULT_SIMILAR_TRADE_COUNT = 5

# Similarity scoring weights
BOAT_TYPE_MATCH_POINTS = 4
MAKE_MATCH_POINTS = 2
CLOSE_YEAR_POINTS = 3
CLOSE_YEAR_WINDOW = 2
NEAR_YEAR_POINTS = 1
NEAR_YEAR_WINDOW = 5
HORSEPOWER_MATCH_POINTS = 2
HORSEPOWER_WINDOW = 25

FAILED_ESTIMATE_REASONING = (
    "We encountered a problem generating your estimate. This can happen if "
    "market data is scarce for this type of boat or due to a technical issue. "
    "Error: {error}"
)
