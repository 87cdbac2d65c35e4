import logging
from collections.abc import Awaitable, Callable

import httpx
from pydantic import ValidationError

from client.api_client import get_client
from client.routes import border_link
from models.country import Country
from services.errors import CountryDataError

logger = logging.getLogger(__name__)


class ListViewController:
    """Loads the country list once and renders it as links to detail pages."""

    def __init__(self, fetch_all: Callable[[], Awaitable[list[Country]]] | None = None):
        self._fetch_all = fetch_all or get_client().list_countries
        self.countries: list[Country] | None = None
        self.error: Exception | None = None

    async def activate(self) -> bool:
        if self.countries is not None:
            return False
        try:
            self.countries = await self._fetch_all()
        except (CountryDataError, httpx.HTTPError, ValidationError) as e:
            logger.warning("Failed to load country list: %s", e)
            self.error = e
            return False
        self.error = None
        return True

    def render(self) -> str:
        if self.countries is None:
            return ""
        return "\n".join(f"{c.name.common} ({border_link(c.cca3)})" for c in self.countries)
