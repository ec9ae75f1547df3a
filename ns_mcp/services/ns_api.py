"""Client for the NS (Dutch railways) API portal.

One coroutine per capability. Each call checks that an API key is configured
before touching the network, sends the key as the ``Ocp-Apim-Subscription-Key``
header and forwards the validated tool arguments as query parameters. Response
bodies are returned exactly as parsed JSON; nothing is reshaped.
"""

import logging
from typing import Any

import httpx

from ..config import NS_API_BASE_URL, NS_API_TIMEOUT
from ..mcp.errors import ConfigurationError
from ..models.requests import (
    ArrivalsParams,
    DeparturesParams,
    DisruptionsParams,
    NSParams,
    OVFietsParams,
    PricesParams,
    StationInfoParams,
    TravelAdviceParams,
)

logger = logging.getLogger(__name__)

API_KEY_HEADER = "Ocp-Apim-Subscription-Key"

# Maximum characters of a non-JSON error body carried into the error message
MAX_ERROR_BODY = 500

ENDPOINTS = {
    "disruptions": "/disruptions/v3",
    "trips": "/reisinformatie-api/api/v3/trips",
    "departures": "/reisinformatie-api/api/v2/departures",
    "arrivals": "/reisinformatie-api/api/v2/arrivals",
    "prices": "/reisinformatie-api/api/v3/price",
    "ovfiets": "/places-api/v2/ovfiets",
    "stations": "/nsapp-stations/v3",
}

MISSING_API_KEY_MESSAGE = (
    "NS_API_KEY is not configured. Please provide your NS API key in the server configuration."
)


class NSApiError(Exception):
    """The NS API could not be reached or answered with a non-2xx status."""

    def __init__(self, status_code: int | None, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        if self.status_code is None:
            return f"NS API request failed: {self.message}"
        return f"NS API request failed with status {self.status_code}: {self.message}"


def _extract_error_message(response: httpx.Response) -> str:
    """Pull a human-readable message out of an NS error body."""
    try:
        body = response.json()
    except ValueError:
        return response.text[:MAX_ERROR_BODY] or response.reason_phrase

    if isinstance(body, dict):
        if isinstance(body.get("message"), str):
            return body["message"]
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            messages = [e.get("message") for e in errors if isinstance(e, dict) and e.get("message")]
            if messages:
                return "; ".join(messages)
    return response.text[:MAX_ERROR_BODY] or response.reason_phrase


class NSApiClient:
    """Async client for the NS API portal endpoints used by the tools."""

    def __init__(
        self,
        api_key: str | None,
        base_url: str = NS_API_BASE_URL,
        timeout: float = NS_API_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        headers = {"Accept": "application/json"}
        if api_key:
            headers[API_KEY_HEADER] = api_key
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    def _ensure_api_key_configured(self) -> None:
        if not self.api_key:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)

    async def _get(self, endpoint: str, params: NSParams) -> Any:
        """Perform an authenticated GET and return the parsed JSON body."""
        self._ensure_api_key_configured()
        path = ENDPOINTS[endpoint]
        query = params.to_query_params()
        logger.debug(f"GET {path} params={query}")

        try:
            response = await self._client.get(path, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            message = _extract_error_message(e.response)
            logger.warning(f"NS API {path} returned {status}: {message}")
            raise NSApiError(status, message) from e
        except httpx.TimeoutException as e:
            logger.warning(f"NS API {path} timed out")
            raise NSApiError(None, "Request timed out") from e
        except httpx.RequestError as e:
            logger.warning(f"NS API {path} unreachable: {e}")
            raise NSApiError(None, str(e) or type(e).__name__) from e

        try:
            return response.json()
        except ValueError as e:
            raise NSApiError(response.status_code, "Response body is not valid JSON") from e

    async def get_disruptions(self, params: DisruptionsParams) -> Any:
        return await self._get("disruptions", params)

    async def get_travel_advice(self, params: TravelAdviceParams) -> Any:
        return await self._get("trips", params)

    async def get_departures(self, params: DeparturesParams) -> Any:
        return await self._get("departures", params)

    async def get_arrivals(self, params: ArrivalsParams) -> Any:
        return await self._get("arrivals", params)

    async def get_ovfiets(self, params: OVFietsParams) -> Any:
        return await self._get("ovfiets", params)

    async def get_station_info(self, params: StationInfoParams) -> Any:
        return await self._get("stations", params)

    async def get_prices(self, params: PricesParams) -> Any:
        return await self._get("prices", params)

    async def aclose(self) -> None:
        """Release the underlying connection pool."""
        await self._client.aclose()
