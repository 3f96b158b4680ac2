"""
Historical trade-in data.

Parses the dealership's trade-in spreadsheets into HistoricalRecord rows and
serves them through a read-only provider that is loaded once per process.
"""

import csv
import io
from dataclasses import dataclass, field
from pathlib import Path

from tradein.estimates.exceptions import DataSourceUnavailable
from tradein.estimates.parsing import parse_currency, parse_leading_int
from tradein.utils.logger import logger

REQUIRED_COLUMNS = ("year", "make", "model", "trade_in_value")


@dataclass(frozen=True)
class HistoricalRecord:
    """A past trade-in taken by the dealership."""

    year: int
    make: str
    model: str
    boat_type: str
    engine_hp: int
    trade_in_value: float


@dataclass(frozen=True)
class HistoricalSource:
    """A CSV file and how its headers map onto HistoricalRecord fields.

    ``column_mapping`` maps record field names (year, make, model, boat_type,
    engine_hp, trade_in_value) to header names in the file. ``boat_type`` may
    be omitted, in which case every row gets ``default_boat_type``.
    """

    file_name: str
    column_mapping: dict[str, str]
    default_boat_type: str = "Unknown"


DEFAULT_SOURCES: tuple[HistoricalSource, ...] = (
    HistoricalSource(
        file_name="trade-in-data.csv",
        column_mapping={
            "year": "Year",
            "make": "Make",
            "model": "Model",
            "boat_type": "BoatType",
            "engine_hp": "EngineHP",
            "trade_in_value": "TradeInValueCAD",
        },
        default_boat_type="Fishing",
    ),
    HistoricalSource(
        file_name="more-trade-in-data.csv",
        column_mapping={
            "year": "Boat Year",
            "make": "Make",
            "model": "Model",
            "engine_hp": "Engine HP",
            "trade_in_value": "Trade in Value",
        },
        default_boat_type="Unknown",
    ),
)


def parse_historical_csv(text: str, source: HistoricalSource) -> list[HistoricalRecord]:
    """Parse one CSV document into records.

    Rows shorter than the header, rows whose year or value is not a number
    and rows with a blank make or model are skipped.

    Raises:
        DataSourceUnavailable: If the header lacks a required mapped column
    """
    rows = list(csv.reader(io.StringIO(text.strip())))
    if len(rows) < 2:
        return []

    headers = [header.strip().strip('"') for header in rows[0]]
    index: dict[str, int] = {}
    for field_name, header_name in source.column_mapping.items():
        if header_name in headers:
            index[field_name] = headers.index(header_name)

    missing = [name for name in REQUIRED_COLUMNS if name not in index]
    if missing:
        raise DataSourceUnavailable(
            source.file_name,
            f"missing columns {[source.column_mapping.get(name, name) for name in missing]}",
        )

    records: list[HistoricalRecord] = []
    skipped = 0
    for row in rows[1:]:
        if len(row) < len(headers):
            skipped += 1
            continue
        values = [value.strip().strip('"') for value in row]

        year = parse_leading_int(values[index["year"]])
        trade_in_value = parse_currency(values[index["trade_in_value"]])
        make = values[index["make"]]
        model = values[index["model"]]
        if year is None or trade_in_value is None or not make or not model:
            skipped += 1
            continue

        boat_type = source.default_boat_type
        if "boat_type" in index:
            boat_type = values[index["boat_type"]] or source.default_boat_type

        engine_hp = 0
        if "engine_hp" in index:
            engine_hp = parse_leading_int(values[index["engine_hp"]]) or 0

        records.append(
            HistoricalRecord(
                year=year,
                make=make,
                model=model,
                boat_type=boat_type,
                engine_hp=engine_hp,
                trade_in_value=trade_in_value,
            )
        )

    if skipped:
        logger.debug("Skipped unusable rows", source=source.file_name, skipped=skipped)
    return records


@dataclass
class HistoricalDataProvider:
    """Read-only access to the historical trade-in records.

    Construct it, call ``load()`` once at startup, then hand it to whatever
    needs the records. ``load()`` is idempotent.
    """

    data_dir: Path
    sources: tuple[HistoricalSource, ...] = DEFAULT_SOURCES
    _records: tuple[HistoricalRecord, ...] = field(default=(), init=False, repr=False)
    _loaded: bool = field(default=False, init=False, repr=False)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    @property
    def records(self) -> tuple[HistoricalRecord, ...]:
        return self._records

    def load(self) -> tuple[HistoricalRecord, ...]:
        """Load every source, skipping any that cannot be read."""
        if self._loaded:
            return self._records

        combined: list[HistoricalRecord] = []
        for source in self.sources:
            try:
                parsed = self._load_source(source)
            except DataSourceUnavailable as e:
                logger.error(
                    "Could not load historical source",
                    source=e.source,
                    reason=e.reason,
                )
                continue
            logger.info(
                "Loaded historical source", source=source.file_name, records=len(parsed)
            )
            combined.extend(parsed)

        self._records = tuple(combined)
        self._loaded = True
        logger.info("Historical trade-in data ready", records=len(self._records))
        return self._records

    def _load_source(self, source: HistoricalSource) -> list[HistoricalRecord]:
        path = self.data_dir / source.file_name
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DataSourceUnavailable(source.file_name, str(e)) from e
        try:
            return parse_historical_csv(text, source)
        except csv.Error as e:
            raise DataSourceUnavailable(source.file_name, str(e)) from e
