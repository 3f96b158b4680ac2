"""
Estimate log in CSV form.

Every successful estimate in a session is appended as one row to a CSV
document the user can download. The log only ever grows: existing text is
kept byte for byte and the header is written once, with the first row.
"""

import csv
import io
from dataclasses import astuple, dataclass
from datetime import datetime, timezone

from tradein.estimates.constants import Audience
from tradein.estimates.schemas import BoatProfile, Estimate

ESTIMATE_LOG_COLUMNS: tuple[str, ...] = (
    "Timestamp",
    "LeadQuality",
    "EstimatedLow",
    "EstimatedHigh",
    "FullName",
    "Email",
    "Phone",
    "PostalCode",
    "BoatType",
    "Year",
    "Make",
    "Model",
    "HIN",
    "EngineMake",
    "Horsepower",
    "EngineHours",
    "TrailerIncluded",
    "CosmeticCondition",
    "MechanicalCondition",
)

CSV_MEDIA_TYPE = "text/csv;charset=utf-8;"

LOG_FILE_NAMES: dict[Audience, str] = {
    Audience.CUSTOMER: "estimate-log.csv",
    Audience.STAFF: "internal-estimate-log.csv",
}


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with milliseconds and a Z suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class EstimateLogRow:
    """One estimate flattened into the log's column order."""

    timestamp: str
    lead_quality: str
    estimated_low: int
    estimated_high: int
    full_name: str
    email: str
    phone: str
    postal_code: str
    boat_type: str
    year: int
    make: str
    model: str
    hin: str
    engine_make: str
    horsepower: int | None
    engine_hours: int | None
    trailer_included: str
    cosmetic_condition: str
    mechanical_condition: str

    @classmethod
    def from_submission(
        cls, profile: BoatProfile, estimate: Estimate, moment: datetime
    ) -> "EstimateLogRow":
        return cls(
            timestamp=format_timestamp(moment),
            lead_quality=estimate.lead_quality.value,
            estimated_low=estimate.low,
            estimated_high=estimate.high,
            full_name=profile.full_name,
            email=profile.email,
            phone=profile.phone,
            postal_code=profile.postal_code,
            boat_type=profile.boat_type.value,
            year=profile.year,
            make=profile.make,
            model=profile.model,
            hin=profile.hin,
            engine_make=profile.engine_make,
            horsepower=profile.horsepower,
            engine_hours=profile.engine_hours,
            trailer_included="Yes" if profile.trailer else "No",
            cosmetic_condition=profile.cosmetic_condition.value,
            mechanical_condition=profile.mechanical_condition.value,
        )

    def values(self) -> list[str]:
        return ["" if value is None else str(value) for value in astuple(self)]


def _to_csv_line(values: list[str]) -> str:
    buffer = io.StringIO()
    csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n").writerow(values)
    return buffer.getvalue().rstrip("\n")


def append_estimate_row(
    profile: BoatProfile,
    estimate: Estimate,
    existing_log: str,
    moment: datetime | None = None,
) -> str:
    """Return the log with one more row; an empty log gets the header first."""
    row = EstimateLogRow.from_submission(
        profile, estimate, moment or datetime.now(timezone.utc)
    )
    line = _to_csv_line(row.values())
    if existing_log:
        return f"{existing_log}\n{line}"
    return f"{_to_csv_line(list(ESTIMATE_LOG_COLUMNS))}\n{line}"
