"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

VILAGE_FCST_URL = (
    "http://apis.data.go.kr/1360000/VilageFcstInfoService_2.0/getVilageFcst"
)


class DataType(StrEnum):
    JSON = "JSON"
    XML = "XML"


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = VILAGE_FCST_URL
    service_key: str = ""
    page_no: int = Field(default=1, ge=1)
    # Must exceed the item count the service returns per base_date, or the
    # tail of the forecast is cut off without any error.
    num_of_rows: int = Field(default=200, ge=1)
    data_type: DataType = DataType.JSON
    timeout_seconds: float = Field(default=30.0, gt=0.0)


class GridConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "Seoul"
    nx: int = Field(default=60, ge=1)
    ny: int = Field(default=127, ge=1)


class ScheduleConfig(BaseModel):
    model_config = {"extra": "forbid"}

    timezone: str = "Asia/Seoul"
    days: int = Field(default=3, ge=1, le=3)

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    service: ServiceConfig = ServiceConfig()
    grid: GridConfig = GridConfig()
    schedule: ScheduleConfig = ScheduleConfig()
