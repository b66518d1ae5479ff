"""Village forecast data models."""

from dataclasses import dataclass
from enum import StrEnum


class Category(StrEnum):
    """Category codes carried by village forecast items."""

    POP = "POP"  # precipitation probability (%)
    PTY = "PTY"  # precipitation type code
    PCP = "PCP"  # 1h precipitation amount
    REH = "REH"  # humidity (%)
    SNO = "SNO"  # 1h snowfall
    SKY = "SKY"  # sky condition code
    TMP = "TMP"  # 1h temperature (C)
    TMN = "TMN"  # daily minimum temperature
    TMX = "TMX"  # daily maximum temperature
    UUU = "UUU"  # east-west wind component
    VVV = "VVV"  # north-south wind component
    WAV = "WAV"  # wave height
    VEC = "VEC"  # wind direction
    WSD = "WSD"  # wind speed


@dataclass(frozen=True)
class RawForecastItem:
    forecast_date: str  # YYYYMMDD
    forecast_time: str  # HHMM
    category: str
    value: str


@dataclass(frozen=True)
class ForecastRequest:
    base_date: str  # YYYYMMDD
    base_time: str  # HHMM
    nx: int
    ny: int
    page_no: int
    num_of_rows: int
    data_type: str

    def params(self, service_key: str) -> dict[str, str | int]:
        """Query parameters in the order the service documents them."""
        return {
            "serviceKey": service_key,
            "pageNo": self.page_no,
            "numOfRows": self.num_of_rows,
            "dataType": self.data_type,
            "base_date": self.base_date,
            "base_time": self.base_time,
            "nx": self.nx,
            "ny": self.ny,
        }


@dataclass(frozen=True)
class ForecastRecord:
    date: str  # YYYY-MM-DD
    time: str  # HH:00
    temperature: float
    rain_probability: float
    sky: str
    rain_type: str

    @property
    def label(self) -> str:
        return f"{self.date} {self.time}"
