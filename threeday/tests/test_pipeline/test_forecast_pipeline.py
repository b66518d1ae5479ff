"""Tests for the forecast pipeline with mocked HTTP."""

from datetime import UTC, datetime

import httpx
import respx

from threeday.config.schema import AppConfig
from threeday.models.forecast import ForecastRecord
from threeday.pipeline.forecast_pipeline import FORECAST_ERROR_MESSAGE, ForecastPipeline
from threeday.tests.factories import KST, TEST_BASE_URL, make_item, make_response

DATES = ["20240101", "20240102", "20240103"]


def _mock_ok(items_by_date: dict[str, list[dict]]) -> dict[str, respx.Route]:
    return {
        d: respx.get(TEST_BASE_URL, params={"base_date": d}).mock(
            return_value=httpx.Response(200, json=make_response(items))
        )
        for d, items in items_by_date.items()
    }


class TestPlan:
    def test_plan_uses_given_time(self, test_config: AppConfig, morning_kst: datetime):
        requests = ForecastPipeline(test_config).plan(morning_kst)
        assert [r.base_date for r in requests] == DATES
        assert {r.base_time for r in requests} == {"0500"}
        assert {(r.nx, r.ny) for r in requests} == {(60, 127)}

    def test_plan_uses_clock(self, test_config: AppConfig):
        clock = lambda: datetime(2024, 1, 31, 1, 15, tzinfo=KST)  # noqa: E731
        requests = ForecastPipeline(test_config, clock=clock).plan()
        assert [r.base_date for r in requests] == ["20240131", "20240201", "20240202"]
        assert requests[0].base_time == "2300"

    def test_plan_converts_aware_time_to_local(self, test_config: AppConfig):
        requests = ForecastPipeline(test_config).plan(datetime(2024, 1, 1, 20, 30, tzinfo=UTC))
        assert [r.base_date for r in requests] == ["20240102", "20240103", "20240104"]
        assert requests[0].base_time == "0500"

    def test_plan_reads_naive_time_as_local(self, test_config: AppConfig):
        requests = ForecastPipeline(test_config).plan(datetime(2024, 1, 1, 6, 30))
        assert requests[0].base_date == "20240101"
        assert requests[0].base_time == "0500"


class TestRun:
    @respx.mock
    def test_merges_all_dates(self, test_config: AppConfig, morning_kst: datetime):
        _mock_ok({
            "20240101": [
                make_item("20240101", "0200", "TMP", "10.5"),
                make_item("20240101", "0200", "POP", "30"),
            ],
            "20240102": [make_item("20240101", "0500", "SKY", "1")],
            "20240103": [],
        })

        result = ForecastPipeline(test_config).run(morning_kst)

        assert result.ok
        assert result.dates == DATES
        assert result.base_time == "0500"
        assert result.records == [
            ForecastRecord("2024-01-01", "02:00", 10.5, 30.0, "-", "-"),
            ForecastRecord("2024-01-01", "05:00", 0.0, 0.0, "1", "-"),
        ]

    @respx.mock
    def test_one_failed_date_fails_run(self, test_config: AppConfig, morning_kst: datetime):
        _mock_ok({
            "20240101": [make_item("20240101", "0600", "TMP", "1")],
            "20240103": [make_item("20240103", "0600", "TMP", "3")],
        })
        respx.get(TEST_BASE_URL, params={"base_date": "20240102"}).mock(
            return_value=httpx.Response(502)
        )

        result = ForecastPipeline(test_config).run(morning_kst)

        assert not result.ok
        assert result.records == []
        assert result.error == FORECAST_ERROR_MESSAGE
        assert "502" in result.error_detail

    @respx.mock
    def test_network_failure(self, test_config: AppConfig, morning_kst: datetime):
        respx.get(TEST_BASE_URL).mock(side_effect=httpx.ConnectTimeout)
        result = ForecastPipeline(test_config).run(morning_kst)
        assert result.error == FORECAST_ERROR_MESSAGE
        assert result.records == []

    @respx.mock
    def test_repeat_runs_are_independent(self, test_config: AppConfig, morning_kst: datetime):
        _mock_ok({d: [make_item(d, "0600", "TMP", "4")] for d in DATES})
        pipeline = ForecastPipeline(test_config)

        first = pipeline.run(morning_kst)
        second = pipeline.run(morning_kst)

        assert first.records == second.records
        assert len(first.records) == 3

    @respx.mock
    def test_row_count_knob(self, morning_kst: datetime):
        config = AppConfig(
            service={"base_url": TEST_BASE_URL, "service_key": "k", "num_of_rows": 300}
        )
        route = respx.get(TEST_BASE_URL).mock(
            return_value=httpx.Response(200, json=make_response([]))
        )
        ForecastPipeline(config).run(morning_kst)
        assert route.call_count == 3
        assert all(c.request.url.params["numOfRows"] == "300" for c in route.calls)
