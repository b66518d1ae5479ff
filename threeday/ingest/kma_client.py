"""Village forecast (KMA short-term forecast) API client."""

import logging
from typing import Any

import httpx

from threeday.config.schema import VILAGE_FCST_URL
from threeday.models.forecast import ForecastRequest

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "threeday-forecast/0.1.0"

# "00" NORMAL_SERVICE, "03" NODATA_ERROR (treated as an empty item list)
OK_RESULT_CODES = ("00", "03")


class FetchError(Exception):
    """Raised when a forecast request fails or returns an unusable body."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        base_date: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.base_date = base_date


class KmaClient:
    def __init__(
        self,
        service_key: str = "",
        base_url: str = VILAGE_FCST_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        # Expects the decoded key; httpx percent-encodes query values itself.
        self.service_key = service_key
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.transport = transport

    def session(self) -> httpx.AsyncClient:
        """New async client carrying the timeout and User-Agent."""
        return httpx.AsyncClient(
            timeout=self.timeout,
            headers={"User-Agent": self.user_agent, "Accept": "application/json"},
            transport=self.transport,
        )

    async def get_forecast(
        self, client: httpx.AsyncClient, request: ForecastRequest
    ) -> dict[str, Any]:
        """Fetch one base_date worth of forecast items.

        Network errors, non-2xx statuses, non-JSON bodies and service-level
        error codes all surface as FetchError.
        """
        params = request.params(self.service_key)
        try:
            resp = await client.get(self.base_url, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Forecast API returned %d for base_date=%s",
                e.response.status_code, request.base_date,
            )
            raise FetchError(
                f"HTTP {e.response.status_code} for base_date={request.base_date}",
                status_code=e.response.status_code,
                base_date=request.base_date,
            ) from e
        except httpx.RequestError as e:
            logger.error(
                "Forecast API request failed for base_date=%s: %s",
                request.base_date, e,
            )
            raise FetchError(
                f"Request failed for base_date={request.base_date}: {e}",
                base_date=request.base_date,
            ) from e

        try:
            body = resp.json()
        except ValueError as e:
            # An invalid key yields an XML error envelope even for dataType=JSON
            raise FetchError(
                f"Malformed body for base_date={request.base_date}: {resp.text[:200]}",
                status_code=resp.status_code,
                base_date=request.base_date,
            ) from e
        if not isinstance(body, dict):
            raise FetchError(
                f"Unexpected body type {type(body).__name__} "
                f"for base_date={request.base_date}",
                status_code=resp.status_code,
                base_date=request.base_date,
            )

        header = _dig(body, "response", "header")
        code = header.get("resultCode") if isinstance(header, dict) else None
        if code is not None and str(code) not in OK_RESULT_CODES:
            raise FetchError(
                f"Service error {code} ({header.get('resultMsg', '')}) "
                f"for base_date={request.base_date}",
                status_code=resp.status_code,
                base_date=request.base_date,
            )
        return body


def _dig(data: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data
