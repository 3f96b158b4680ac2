"""Tests for the CSV estimate log."""

import csv
import io
from datetime import datetime, timedelta, timezone

from tradein.estimate_log.csv_log import (
    ESTIMATE_LOG_COLUMNS,
    EstimateLogRow,
    append_estimate_row,
    format_timestamp,
)

MOMENT = datetime(2024, 5, 17, 14, 3, 9, 250000, tzinfo=timezone.utc)

HEADER = ",".join(ESTIMATE_LOG_COLUMNS)


def _rows(log):
    return list(csv.reader(io.StringIO(log)))


def test_format_timestamp():
    assert format_timestamp(MOMENT) == "2024-05-17T14:03:09.250Z"


def test_format_timestamp_converts_to_utc():
    eastern = timezone(timedelta(hours=-4))
    moment = datetime(2024, 5, 17, 10, 3, 9, 250000, tzinfo=eastern)

    assert format_timestamp(moment) == "2024-05-17T14:03:09.250Z"


def test_first_append_writes_header(boat_profile, estimate):
    log = append_estimate_row(boat_profile, estimate, "", moment=MOMENT)

    lines = log.split("\n")
    assert lines[0] == HEADER
    assert lines[1] == (
        "2024-05-17T14:03:09.250Z,High,18000,21500,Jordan Tremblay,"
        "jordan@example.com,705-555-0142,P1H 2J6,Fishing,2019,Lund,1650,,,"
        "90,150,Yes,Good,Turn-Key"
    )
    assert len(lines) == 2


def test_later_append_adds_only_a_row(boat_profile, estimate):
    first = append_estimate_row(boat_profile, estimate, "", moment=MOMENT)

    second = append_estimate_row(boat_profile, estimate, first, moment=MOMENT)

    assert second.startswith(first + "\n")
    assert second.count(HEADER) == 1
    assert len(second.split("\n")) == 3


def test_fields_with_commas_and_quotes_are_quoted(boat_profile, estimate):
    profile = boat_profile.model_copy(
        update={"full_name": "Tremblay, Jordan", "model": 'Pro-V "Tiller"'}
    )

    log = append_estimate_row(profile, estimate, "", moment=MOMENT)

    row_line = log.split("\n")[1]
    assert '"Tremblay, Jordan"' in row_line
    assert '"Pro-V ""Tiller"""' in row_line
    row = dict(zip(ESTIMATE_LOG_COLUMNS, _rows(log)[1]))
    assert row["FullName"] == "Tremblay, Jordan"
    assert row["Model"] == 'Pro-V "Tiller"'


def test_trailer_and_missing_engine_values(boat_profile, estimate):
    profile = boat_profile.model_copy(
        update={"trailer": False, "horsepower": None, "engine_hours": None}
    )

    row = EstimateLogRow.from_submission(profile, estimate, MOMENT)

    values = dict(zip(ESTIMATE_LOG_COLUMNS, row.values()))
    assert values["TrailerIncluded"] == "No"
    assert values["Horsepower"] == ""
    assert values["EngineHours"] == ""


def test_row_matches_column_order(boat_profile, estimate):
    row = EstimateLogRow.from_submission(boat_profile, estimate, MOMENT)

    assert len(row.values()) == len(ESTIMATE_LOG_COLUMNS)
