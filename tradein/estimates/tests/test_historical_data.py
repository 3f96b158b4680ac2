"""Tests for loading historical trade-in records."""

import textwrap

import pytest

from tradein.estimates.exceptions import DataSourceUnavailable
from tradein.estimates.historical_data import (
    DEFAULT_SOURCES,
    HistoricalDataProvider,
    HistoricalRecord,
    HistoricalSource,
    parse_historical_csv,
)
from tradein.estimates.parsing import parse_currency, parse_leading_int

PRIMARY_SOURCE, SECONDARY_SOURCE = DEFAULT_SOURCES


class TestNumberParsing:
    """Test suite for spreadsheet number parsing."""

    def test_currency_strips_symbols_and_separators(self):
        assert parse_currency("$12,345") == 12345.0
        assert parse_currency(" 9800.50 ") == 9800.5

    def test_currency_blank_and_not_available_are_not_numbers(self):
        assert parse_currency("") is None
        assert parse_currency("N/A") is None
        assert parse_currency("call for price") is None
        assert parse_currency("inf") is None
        assert parse_currency(None) is None

    def test_leading_int_ignores_trailing_text(self):
        assert parse_leading_int("90 HP") == 90
        assert parse_leading_int("2019") == 2019
        assert parse_leading_int("") is None
        assert parse_leading_int("unknown") is None


class TestParseHistoricalCsv:
    """Test suite for parsing one CSV source."""

    def test_parses_primary_layout(self):
        text = textwrap.dedent("""\
            Year,Make,Model,BoatType,EngineHP,TradeInValueCAD
            2018,Lund,1650 Rebel,Fishing,90,18500
            2021,Princecraft,Vectra 21,Pontoon,150,41200
        """)

        records = parse_historical_csv(text, PRIMARY_SOURCE)

        assert records == [
            HistoricalRecord(2018, "Lund", "1650 Rebel", "Fishing", 90, 18500.0),
            HistoricalRecord(2021, "Princecraft", "Vectra 21", "Pontoon", 150, 41200.0),
        ]

    def test_quoted_fields_keep_embedded_commas(self):
        text = textwrap.dedent("""\
            Boat Year,Make,Model,Engine HP,Trade in Value
            2019,Lund,"1650, Rebel XS",90,"$21,500"
        """)

        records = parse_historical_csv(text, SECONDARY_SOURCE)

        assert len(records) == 1
        assert records[0].model == "1650, Rebel XS"
        assert records[0].trade_in_value == 21500.0

    def test_rows_without_numeric_year_or_value_are_dropped(self):
        text = textwrap.dedent("""\
            Boat Year,Make,Model,Engine HP,Trade in Value
            2019,Lund,1650,90,"$21,500"
            ,Lund,1400,20,"$4,200"
            unknown,Legend,F19,115,"$24,000"
            2021,Tige,ZX,,N/A
            2020,Sea Ray,SPX 210,250,
            2016,Princecraft,Sport 172,90,14750
        """)

        records = parse_historical_csv(text, SECONDARY_SOURCE)

        assert [record.model for record in records] == ["1650", "Sport 172"]

    def test_short_rows_are_skipped(self):
        text = textwrap.dedent("""\
            Year,Make,Model,BoatType,EngineHP,TradeInValueCAD
            2018,Lund,1650 Rebel
            2018,Lund,1650 Rebel,Fishing,90,18500
        """)

        records = parse_historical_csv(text, PRIMARY_SOURCE)

        assert len(records) == 1

    def test_blank_make_or_model_is_skipped(self):
        text = textwrap.dedent("""\
            Year,Make,Model,BoatType,EngineHP,TradeInValueCAD
            2018,,1650 Rebel,Fishing,90,18500
            2018,Lund,,Fishing,90,18500
        """)

        assert parse_historical_csv(text, PRIMARY_SOURCE) == []

    def test_missing_horsepower_defaults_to_zero(self):
        text = textwrap.dedent("""\
            Boat Year,Make,Model,Engine HP,Trade in Value
            2013,Mastercraft,X15,,"$38,000"
        """)

        records = parse_historical_csv(text, SECONDARY_SOURCE)

        assert records[0].engine_hp == 0

    def test_boat_type_falls_back_to_source_default(self):
        primary = textwrap.dedent("""\
            Year,Make,Model,BoatType,EngineHP,TradeInValueCAD
            2016,Legend,Xcalibur,,115,19400
        """)
        secondary = textwrap.dedent("""\
            Boat Year,Make,Model,Engine HP,Trade in Value
            2016,Legend,Xcalibur,115,19400
        """)

        assert parse_historical_csv(primary, PRIMARY_SOURCE)[0].boat_type == "Fishing"
        assert parse_historical_csv(secondary, SECONDARY_SOURCE)[0].boat_type == "Unknown"

    def test_header_only_yields_nothing(self):
        assert parse_historical_csv("Year,Make,Model\n", PRIMARY_SOURCE) == []

    def test_missing_required_column_raises(self):
        text = "Year,Make,Model\n2018,Lund,1650\n"
        source = HistoricalSource(
            file_name="broken.csv",
            column_mapping={
                "year": "Year",
                "make": "Make",
                "model": "Model",
                "trade_in_value": "Value",
            },
        )

        with pytest.raises(DataSourceUnavailable) as exc_info:
            parse_historical_csv(text, source)

        assert exc_info.value.source == "broken.csv"


class TestHistoricalDataProvider:
    """Test suite for the load-once provider."""

    def test_loads_packaged_sources(self):
        from tradein.config import DEFAULT_DATA_DIR

        provider = HistoricalDataProvider(data_dir=DEFAULT_DATA_DIR)

        records = provider.load()

        assert provider.is_loaded
        assert len(records) == 33
        assert records == provider.records
        assert all(record.make and record.model for record in records)

    def test_missing_source_contributes_nothing(self, tmp_path):
        (tmp_path / "trade-in-data.csv").write_text(
            "Year,Make,Model,BoatType,EngineHP,TradeInValueCAD\n"
            "2018,Lund,1650 Rebel,Fishing,90,18500\n",
            encoding="utf-8",
        )
        provider = HistoricalDataProvider(data_dir=tmp_path)

        records = provider.load()

        assert len(records) == 1
        assert records[0].make == "Lund"

    def test_no_sources_gives_empty_set(self, tmp_path):
        provider = HistoricalDataProvider(data_dir=tmp_path)

        assert provider.load() == ()
        assert provider.is_loaded

    def test_load_is_idempotent(self, tmp_path):
        path = tmp_path / "trade-in-data.csv"
        path.write_text(
            "Year,Make,Model,BoatType,EngineHP,TradeInValueCAD\n"
            "2018,Lund,1650 Rebel,Fishing,90,18500\n",
            encoding="utf-8",
        )
        provider = HistoricalDataProvider(data_dir=tmp_path)
        first = provider.load()

        path.write_text(
            "Year,Make,Model,BoatType,EngineHP,TradeInValueCAD\n",
            encoding="utf-8",
        )
        second = provider.load()

        assert second is first
        assert len(second) == 1
