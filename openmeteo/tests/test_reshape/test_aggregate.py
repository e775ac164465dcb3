"""Tests for cross-model statistics and period rollups."""

import pytest

from openmeteo.models.response import TimeSeries
from openmeteo.reshape.aggregate import (
    AggregatedRecord,
    AggregatedStat,
    SourceMap,
    Tier,
    aggregate,
    aggregate_series,
    choose_tier,
    member_stats,
    mode,
    rollup,
    round_half_away,
)
from openmeteo.tests.helpers import load_fixture, make_response

MODELS = ("MRI_AGCM3_2_S", "EC_Earth3P_HR")


class TestSourceMap:
    def test_model_and_member_columns(self):
        sources = SourceMap(["temperature_2m", "temperature_2m_max"], MODELS)
        assert sources.source("temperature_2m_max_EC_Earth3P_HR").variable == "temperature_2m_max"
        assert sources.source("temperature_2m_EC_Earth3P_HR").model == "EC_Earth3P_HR"
        member = sources.source("temperature_2m_member07")
        assert (member.variable, member.member, member.model) == ("temperature_2m", 7, None)
        assert sources.source("unrelated") is None

    def test_member_columns(self):
        sources = SourceMap(["precipitation"])
        columns = ["precipitation", "precipitation_member01", "precipitation_member02"]
        assert sources.member_columns(columns) == {
            "precipitation": ["precipitation_member01", "precipitation_member02"]
        }


class TestAggregate:
    def test_climate_models_per_day(self):
        daily = make_response(load_fixture("climate_two_models.json")).daily
        records = aggregate_series(daily, SourceMap(["temperature_2m_max"], MODELS))
        stats = [r.stats["temperature_2m_max"] for r in records]
        assert [s.mean for s in stats] == [11, 12, 15]
        assert [s.min for s in stats] == [10, 12, 14]
        assert [s.max for s in stats] == [12, 12, 16]
        assert all(s.n == 2 for s in stats)

    def test_nulls_are_skipped(self):
        stat = aggregate([None, 2.0, 4.0])
        assert (stat.mean, stat.n) == (3.0, 2)

    def test_all_null(self):
        assert aggregate([None, None]) is None

    def test_rounding_half_away_from_zero(self):
        assert round_half_away(2.25, 1) == 2.3
        assert round_half_away(-2.25, 1) == -2.3

    def test_weather_code_mode(self):
        series = TimeSeries(
            time=["2040-01-01"],
            columns={"weather_code_a": [3], "weather_code_b": [61], "weather_code_c": [61]},
        )
        records = aggregate_series(series, SourceMap(["weather_code"], ("a", "b", "c")))
        assert records[0].stats["weather_code"].mode == 61

    def test_mode_tie_takes_smallest(self):
        assert mode([3, 61, 61, 3, 80]) == 3

    def test_median(self):
        assert aggregate([1, 5, 2, 8], with_median=True).median == 3.5

    def test_series_median_for_members(self):
        series = TimeSeries(
            time=["2024-06-01T00:00"],
            columns={
                "temperature_2m": [10.0],
                "temperature_2m_member01": [11.0],
                "temperature_2m_member02": [15.0],
            },
        )
        sources = SourceMap(["temperature_2m"], ("icon_seamless",))
        stat = aggregate_series(series, sources, "hourly", with_median=True)[0].stats[
            "temperature_2m"
        ]
        assert (stat.median, stat.n) == (11.0, 3)
        plain = aggregate_series(series, sources, "hourly")[0].stats["temperature_2m"]
        assert plain.median is None


class TestTiers:
    @pytest.mark.parametrize("days, tier", [
        (1, Tier.DAILY), (31, Tier.DAILY), (32, Tier.MONTHLY),
        (730, Tier.MONTHLY), (731, Tier.YEARLY),
    ])
    def test_boundaries(self, days, tier):
        assert choose_tier(days) is tier


def _record(day: str, **stats: float) -> AggregatedRecord:
    return AggregatedRecord(
        time=day,
        stats={k: AggregatedStat(mean=v, min=v - 1, max=v + 1, n=2) for k, v in stats.items()},
    )


class TestRollup:
    def test_monthly(self):
        records = [
            _record("2040-01-30", temperature_2m_mean=10.0, precipitation_sum=2.0),
            _record("2040-01-31", temperature_2m_mean=14.0, precipitation_sum=3.0),
            _record("2040-02-01", temperature_2m_mean=5.0, precipitation_sum=1.0),
        ]
        periods = rollup(records, Tier.MONTHLY)
        assert [p.label for p in periods] == ["January 2040", "February 2040"]
        assert periods[0].days == 2
        january = periods[0].stats
        assert january["temperature_2m_mean"].mean == 12.0
        assert january["temperature_2m_mean"].min == 9.0
        assert january["temperature_2m_mean"].max == 15.0
        assert january["precipitation_sum"].mean == 5.0

    def test_yearly_skips_missing_days(self):
        records = [
            _record("2040-06-01", temperature_2m_max=20.0),
            AggregatedRecord(time="2040-06-02", stats={"temperature_2m_max": None}),
        ]
        (period,) = rollup(records, Tier.YEARLY)
        assert period.label == "2040"
        assert period.stats["temperature_2m_max"].mean == 20.0

    def test_no_data_period(self):
        records = [AggregatedRecord(time="2041-01-01", stats={"temperature_2m_max": None})]
        assert rollup(records, Tier.YEARLY)[0].stats["temperature_2m_max"] is None


class TestMemberStats:
    def test_distribution(self):
        stats = member_stats([4.0, 1.0, None, 3.0, 2.0])
        assert stats.count == 4
        assert (stats.min, stats.max) == (1.0, 4.0)
        assert stats.mean == 2.5
        assert stats.median == 2.5
        assert (stats.p25, stats.p75) == (2.0, 4.0)

    def test_empty(self):
        assert member_stats([None]) is None
