"""Output formatters for forecast records."""

import json
from dataclasses import asdict
from typing import Any

from threeday.models.forecast import ForecastRecord

TEMPERATURE_LABEL = "온도 (°C)"
RAIN_PROBABILITY_LABEL = "강수 확률 (%)"

SKY_LABELS = {"1": "맑음", "3": "구름많음", "4": "흐림"}
RAIN_TYPE_LABELS = {"0": "없음", "1": "비", "2": "비/눈", "3": "눈", "4": "소나기"}


def describe_sky(code: str) -> str:
    return SKY_LABELS.get(code, code)


def describe_rain_type(code: str) -> str:
    return RAIN_TYPE_LABELS.get(code, code)


def _number(value: float) -> str:
    # 10.0 -> "10", 10.5 -> "10.5"
    return f"{value:g}"


def format_cards_text(records: list[ForecastRecord], describe: bool = False) -> str:
    """One card per record, blank line between cards."""
    cards = []
    for r in records:
        sky = describe_sky(r.sky) if describe else r.sky
        rain_type = describe_rain_type(r.rain_type) if describe else r.rain_type
        cards.append(
            "\n".join([
                f"[{r.date}]",
                f"시간: {r.time}",
                f"온도: {_number(r.temperature)}°C",
                f"강수 확률: {_number(r.rain_probability)}%",
                f"하늘 상태: {sky}",
                f"강수 형태: {rain_type}",
            ])
        )
    return "\n\n".join(cards)


def format_records_json(records: list[ForecastRecord]) -> str:
    """JSON array for programmatic consumption."""
    return json.dumps([asdict(r) for r in records], ensure_ascii=False, indent=2)


def build_chart_series(records: list[ForecastRecord]) -> dict[str, Any]:
    """Temperature and rain probability series sharing one label axis."""
    return {
        "labels": [r.label for r in records],
        "datasets": [
            {
                "label": TEMPERATURE_LABEL,
                "data": [r.temperature for r in records],
            },
            {
                "label": RAIN_PROBABILITY_LABEL,
                "data": [r.rain_probability for r in records],
            },
        ],
    }
