import logging

import httpx

from config import settings
from models.country import Country, ExpandedCountry
from services.errors import CountryNotFoundError, InvalidResponseError

logger = logging.getLogger(__name__)


class CountryApiClient:
    """Async client for the ``/countries`` endpoints."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout_seconds,
            transport=transport,
        )

    async def list_countries(self) -> list[Country]:
        response = await self._client.get("/countries")
        if response.status_code != 200:
            logger.error("Country list error %s: %s", response.status_code, response.text)
        response.raise_for_status()
        return [Country(**c) for c in _decode(response)]

    async def get_country(self, code: str) -> ExpandedCountry:
        response = await self._client.get(f"/countries/{code}")
        if response.status_code == 404:
            raise CountryNotFoundError(code)
        if response.status_code != 200:
            logger.error("Country %s error %s: %s", code, response.status_code, response.text)
        response.raise_for_status()
        return ExpandedCountry(**_decode(response))

    async def close(self):
        await self._client.aclose()

    async def __aenter__(self) -> "CountryApiClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.close()


def _decode(response: httpx.Response):
    try:
        return response.json()
    except ValueError as e:
        logger.error("Invalid JSON from %s: %.200s", response.url, response.text)
        raise InvalidResponseError(f"Invalid JSON from {response.url}") from e


_client: CountryApiClient | None = None


def get_client() -> CountryApiClient:
    global _client
    if _client is None:
        _client = CountryApiClient()
    return _client


async def close_client():
    global _client
    if _client is not None:
        await _client.close()
        _client = None
