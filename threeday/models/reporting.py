"""Pipeline result models."""

from dataclasses import dataclass, field

from threeday.models.forecast import ForecastRecord


@dataclass
class PipelineResult:
    records: list[ForecastRecord] = field(default_factory=list)
    error: str | None = None
    error_detail: str | None = None
    dates: list[str] = field(default_factory=list)
    base_time: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None
