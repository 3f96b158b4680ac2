"""Tests for similarity scoring against historical trade-ins."""

import pytest

from tradein.estimates.constants import BoatType
from tradein.estimates.historical_data import HistoricalRecord
from tradein.estimates.similarity import find_similar_trades, score_record


def make_record(
    year=2019, make="Lund", model="1650", boat_type="Fishing", engine_hp=90, value=20000.0
):
    return HistoricalRecord(
        year=year,
        make=make,
        model=model,
        boat_type=boat_type,
        engine_hp=engine_hp,
        trade_in_value=value,
    )


class TestScoreRecord:
    """Test suite for scoring a single record."""

    def test_exact_match_scores_every_rule(self, boat_profile):
        assert score_record(boat_profile, make_record()) == 4 + 2 + 3 + 2

    def test_comparisons_ignore_case(self, boat_profile):
        record = make_record(make="LUND", boat_type="fishing")

        assert score_record(boat_profile, record) == 11

    def test_boat_type_match_is_worth_four_points(self, boat_profile):
        record = make_record(boat_type="Pontoon")
        pontoon_profile = boat_profile.model_copy(update={"boat_type": BoatType.PONTOON})

        assert score_record(pontoon_profile, record) - score_record(boat_profile, record) == 4

    @pytest.mark.parametrize(
        "year, expected_year_points",
        [(2019, 3), (2017, 3), (2021, 3), (2016, 1), (2014, 1), (2024, 1), (2013, 0), (2025, 0)],
    )
    def test_year_bands(self, boat_profile, year, expected_year_points):
        record = make_record(year=year, make="Other", boat_type="Other", engine_hp=0)

        assert score_record(boat_profile, record) == expected_year_points

    @pytest.mark.parametrize("engine_hp, expected", [(65, 2), (115, 2), (64, 0), (116, 0)])
    def test_horsepower_window(self, boat_profile, engine_hp, expected):
        record = make_record(year=1990, make="Other", boat_type="Other", engine_hp=engine_hp)

        assert score_record(boat_profile, record) == expected

    def test_unknown_horsepower_scores_nothing(self, boat_profile):
        unknown_record = make_record(year=1990, make="Other", boat_type="Other", engine_hp=0)
        no_hp_profile = boat_profile.model_copy(update={"horsepower": None})

        assert score_record(boat_profile, unknown_record) == 0
        assert score_record(no_hp_profile, make_record(year=1990, make="Other", boat_type="Other")) == 0


class TestFindSimilarTrades:
    """Test suite for top-K selection."""

    def test_empty_history_returns_empty_list(self, boat_profile):
        assert find_similar_trades(boat_profile, []) == []

    def test_results_are_sorted_descending(self, boat_profile):
        records = [
            make_record(year=1990, make="Other", boat_type="Other", engine_hp=0),
            make_record(),
            make_record(make="Legend", engine_hp=200),
            make_record(year=2015, boat_type="Pontoon"),
        ]

        scores = [item.score for item in find_similar_trades(boat_profile, records)]

        assert scores == sorted(scores, reverse=True)
        assert scores == [11, 7, 5, 0]

    def test_ties_keep_load_order(self, boat_profile):
        records = [make_record(model=f"Model {index}") for index in range(4)]

        result = find_similar_trades(boat_profile, records)

        assert [item.record.model for item in result] == [
            "Model 0",
            "Model 1",
            "Model 2",
            "Model 3",
        ]

    def test_returns_at_most_count(self, boat_profile):
        records = [make_record(model=str(index)) for index in range(10)]

        assert len(find_similar_trades(boat_profile, records)) == 5
        assert len(find_similar_trades(boat_profile, records, count=3)) == 3

    def test_close_match_ranks_first(self, boat_profile):
        records = [
            make_record(year=2010, make="Bayliner", model="175", boat_type="Bowrider", engine_hp=135),
            make_record(year=2021, make="Princecraft", model="Vectra", boat_type="Pontoon", engine_hp=150),
            make_record(year=2018, make="Lund", model="1650 Rebel XL", boat_type="Fishing", engine_hp=90),
            make_record(year=2017, make="Legend", model="16 Prolite", boat_type="Fishing", engine_hp=60),
        ]

        result = find_similar_trades(boat_profile, records)

        assert result[0].record.model == "1650 Rebel XL"
        assert result[0].score >= 9
