"""Forecast fetcher: issues the per-date requests concurrently."""

import asyncio
import logging
from typing import Any

from threeday.ingest.kma_client import FetchError, KmaClient
from threeday.models.forecast import ForecastRequest

logger = logging.getLogger(__name__)


class ForecastFetcher:
    def __init__(self, kma_client: KmaClient):
        self.kma = kma_client

    async def fetch_all(self, requests: list[ForecastRequest]) -> list[dict[str, Any]]:
        """Fetch every request concurrently, responses in request order.

        All-or-nothing: the first FetchError cancels the remaining requests
        and propagates.
        """
        logger.info("Forecast API URL: %s", self.kma.base_url)
        logger.info("Forecast base dates: %s", [r.base_date for r in requests])
        logger.info(
            "Forecast base time: %s",
            requests[0].base_time if requests else "-",
        )

        async with self.kma.session() as client:
            tasks = [
                asyncio.create_task(self.kma.get_forecast(client, r))
                for r in requests
            ]
            try:
                responses = await asyncio.gather(*tasks)
            except FetchError:
                for t in tasks:
                    t.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        logger.debug("Fetched %d forecast responses", len(responses))
        return list(responses)
