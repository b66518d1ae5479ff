"""Tests for config schema validation."""

import pytest
from pydantic import ValidationError

from threeday.config.schema import (
    VILAGE_FCST_URL,
    AppConfig,
    DataType,
    GridConfig,
    ScheduleConfig,
    ServiceConfig,
)


class TestAppConfig:
    def test_defaults(self):
        config = AppConfig()
        assert config.service.base_url == VILAGE_FCST_URL
        assert config.service.page_no == 1
        assert config.service.num_of_rows == 200
        assert config.service.data_type == DataType.JSON
        assert config.grid.nx == 60
        assert config.grid.ny == 127
        assert config.schedule.timezone == "Asia/Seoul"
        assert config.schedule.days == 3

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            AppConfig(unknown_field="bad")

    def test_nested_extra_fields_rejected(self):
        with pytest.raises(ValidationError, match="Extra inputs are not permitted"):
            GridConfig(nx=1, ny=1, bogus=True)


class TestServiceConfig:
    def test_row_count_must_be_positive(self):
        with pytest.raises(ValidationError):
            ServiceConfig(num_of_rows=0)

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            ServiceConfig(timeout_seconds=0)

    def test_data_type_from_string(self):
        assert ServiceConfig(data_type="XML").data_type == DataType.XML


class TestScheduleConfig:
    def test_days_capped_at_three(self):
        with pytest.raises(ValidationError):
            ScheduleConfig(days=4)

    def test_days_at_least_one(self):
        with pytest.raises(ValidationError):
            ScheduleConfig(days=0)

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            ScheduleConfig(timezone="Not/AZone")

    def test_malformed_timezone_rejected(self):
        with pytest.raises(ValidationError):
            ScheduleConfig(timezone="../etc")

    def test_iana_timezone_accepted(self):
        assert ScheduleConfig(timezone="Europe/Berlin").timezone == "Europe/Berlin"
