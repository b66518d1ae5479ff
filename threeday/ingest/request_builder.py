"""Builds one village forecast request per base date."""

from threeday.config.schema import GridConfig, ServiceConfig
from threeday.models.common import DateStr, TimeSlot
from threeday.models.forecast import ForecastRequest


def build_requests(
    dates: list[DateStr],
    base_time: TimeSlot,
    grid: GridConfig,
    service: ServiceConfig | None = None,
) -> list[ForecastRequest]:
    """One request per date, all sharing the same base time and grid cell."""
    service = service or ServiceConfig()
    return [
        ForecastRequest(
            base_date=d,
            base_time=base_time,
            nx=grid.nx,
            ny=grid.ny,
            page_no=service.page_no,
            num_of_rows=service.num_of_rows,
            data_type=service.data_type.value,
        )
        for d in dates
    ]
