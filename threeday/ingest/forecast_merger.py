"""Merges category-keyed forecast items into one record per timestamp."""

import logging
import re
from dataclasses import dataclass
from typing import Any

from threeday.models.forecast import Category, ForecastRecord, RawForecastItem

logger = logging.getLogger(__name__)

DATE_UNAVAILABLE = "날짜 정보 없음"
MISSING = "-"

# Categories that reach ForecastRecord; everything else is dropped on merge.
CATEGORY_FIELDS: dict[Category, str] = {
    Category.TMP: "temperature",
    Category.POP: "rain_probability",
    Category.SKY: "sky",
    Category.PTY: "rain_type",
}

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_date(raw: str | None) -> str:
    """YYYYMMDD -> YYYY-MM-DD; anything not 8 characters long is unavailable."""
    if not raw or len(raw) != 8:
        logger.debug("Unparseable forecast date %r", raw)
        return DATE_UNAVAILABLE
    return f"{raw[0:4]}-{raw[4:6]}-{raw[6:8]}"


def parse_number(raw: str | None) -> float:
    """Leading numeric prefix of ``raw``, or 0 when there is none."""
    if not raw:
        return 0.0
    m = _LEADING_FLOAT.match(raw)
    if m is None:
        logger.debug("Non-numeric forecast value %r", raw)
        return 0.0
    # "-0" collapses to 0.0
    return float(m.group(0)) or 0.0


def extract_items(response: dict[str, Any]) -> list[RawForecastItem]:
    """Items under response.body.items.item; empty when absent."""
    data: Any = response
    for key in ("response", "body", "items", "item"):
        if not isinstance(data, dict):
            return []
        data = data.get(key)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        return []

    items: list[RawForecastItem] = []
    for raw in data:
        if not isinstance(raw, dict):
            continue
        value = raw.get("fcstValue")
        items.append(
            RawForecastItem(
                forecast_date=str(raw.get("fcstDate") or ""),
                forecast_time=str(raw.get("fcstTime") or ""),
                category=str(raw.get("category") or ""),
                value="" if value is None else str(value),
            )
        )
    return items


@dataclass
class _PartialRecord:
    date: str
    time: str
    temperature: str | None = None
    rain_probability: str | None = None
    sky: str | None = None
    rain_type: str | None = None

    def apply(self, item: RawForecastItem) -> None:
        try:
            field_name = CATEGORY_FIELDS[Category(item.category)]
        except (ValueError, KeyError):
            return
        setattr(self, field_name, item.value)

    def finalize(self) -> ForecastRecord:
        return ForecastRecord(
            date=self.date,
            time=self.time,
            temperature=parse_number(self.temperature),
            rain_probability=parse_number(self.rain_probability),
            sky=self.sky or MISSING,
            rain_type=self.rain_type or MISSING,
        )


def merge_items(items: list[RawForecastItem]) -> list[ForecastRecord]:
    """Fold items into records keyed by forecast date and time.

    Output follows first-seen key order. A later item only overwrites the
    category it carries.
    """
    partials: dict[str, _PartialRecord] = {}
    for item in items:
        key = f"{item.forecast_date}-{item.forecast_time}"
        record = partials.get(key)
        if record is None:
            record = _PartialRecord(
                date=parse_date(item.forecast_date),
                time=item.forecast_time[0:2] + ":00",
            )
            partials[key] = record
        record.apply(item)
    return [p.finalize() for p in partials.values()]


def merge_responses(responses: list[dict[str, Any]]) -> list[ForecastRecord]:
    """Flatten items across responses in request order, then merge."""
    items = [item for resp in responses for item in extract_items(resp)]
    logger.debug("Merging %d items from %d responses", len(items), len(responses))
    return merge_items(items)
