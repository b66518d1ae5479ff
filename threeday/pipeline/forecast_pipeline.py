"""Forecast pipeline: plan, fetch and merge one three-day forecast."""

import asyncio
import logging
import time
from collections.abc import Callable
from datetime import datetime

from threeday.config.schema import AppConfig
from threeday.ingest.date_window import compute_base_time, compute_date_window
from threeday.ingest.forecast_fetcher import ForecastFetcher
from threeday.ingest.forecast_merger import merge_responses
from threeday.ingest.kma_client import FetchError, KmaClient
from threeday.ingest.request_builder import build_requests
from threeday.models.common import local_now, with_timezone
from threeday.models.forecast import ForecastRequest
from threeday.models.reporting import PipelineResult

logger = logging.getLogger(__name__)

FORECAST_ERROR_MESSAGE = "날씨 데이터를 가져오는 데 실패했습니다."


class ForecastPipeline:
    """Stateless between runs; safe to invoke once per refresh."""

    def __init__(
        self,
        config: AppConfig,
        kma_client: KmaClient | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.config = config
        self.kma = kma_client or KmaClient(
            service_key=config.service.service_key,
            base_url=config.service.base_url,
            timeout=config.service.timeout_seconds,
        )
        self.clock = clock or (lambda: local_now(config.schedule.timezone))

    def plan(self, now: datetime | None = None) -> list[ForecastRequest]:
        """Requests for the window around ``now`` (defaults to the clock).

        ``now`` is read in the configured timezone; naive values are taken
        as already local.
        """
        if now is None:
            now = self.clock()
        now = with_timezone(now, self.config.schedule.timezone)
        dates = compute_date_window(now, self.config.schedule.days)
        base_time = compute_base_time(now)
        return build_requests(dates, base_time, self.config.grid, self.config.service)

    def run(self, now: datetime | None = None) -> PipelineResult:
        return asyncio.run(self.run_async(now))

    async def run_async(self, now: datetime | None = None) -> PipelineResult:
        start_time = time.monotonic()
        requests = self.plan(now)
        result = PipelineResult(
            dates=[r.base_date for r in requests],
            base_time=requests[0].base_time if requests else "",
        )

        try:
            responses = await ForecastFetcher(self.kma).fetch_all(requests)
        except FetchError as e:
            logger.error("Forecast pipeline failed: %s", e)
            result.error = FORECAST_ERROR_MESSAGE
            result.error_detail = str(e)
            return result

        result.records = merge_responses(responses)
        logger.info(
            "Merged %d forecast records from %d responses in %.2fs",
            len(result.records), len(responses), time.monotonic() - start_time,
        )
        return result
