import logging
from collections.abc import Awaitable, Callable
from enum import Enum

import httpx
from pydantic import ValidationError

from client.api_client import get_client
from client.routes import border_link
from models.country import ExpandedCountry
from services.errors import CountryDataError, CountryNotFoundError

logger = logging.getLogger(__name__)

CountryFetcher = Callable[[str], Awaitable[ExpandedCountry]]


class ViewStatus(str, Enum):
    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class DetailViewController:
    """Keeps the displayed country in step with the code in the current route.

    A fetch is issued only when the requested code differs from both the
    displayed record and the request already in flight. Each fetch is tagged
    with a sequence number and only the latest one may update the view, so
    rapid navigation always settles on the last requested country.
    """

    def __init__(self, fetch: CountryFetcher | None = None):
        self._fetch = fetch or get_client().get_country
        self._seq = 0
        self._pending_code: str | None = None
        self.current: ExpandedCountry | None = None
        self.status = ViewStatus.EMPTY
        self.error: Exception | None = None

    @property
    def pending_code(self) -> str | None:
        return self._pending_code

    async def activate(self, code: str) -> bool:
        logger.debug("Activating detail view for %s", code)
        return await self.navigate(code)

    async def follow_border(self, code: str) -> bool:
        return await self.navigate(code)

    async def navigate(self, code: str) -> bool:
        """Handle a navigation to ``code``. Returns True if the view was updated by a fetch."""
        if self.current is not None and self.current.cca3 == code:
            if self._pending_code is not None:
                # Back on the displayed country; whatever is in flight is now stale.
                self._seq += 1
                self._pending_code = None
            self.status = ViewStatus.LOADED
            self.error = None
            return False
        if code == self._pending_code:
            return False

        self._seq += 1
        seq = self._seq
        self._pending_code = code
        self.status = ViewStatus.LOADING
        self.error = None

        try:
            record = await self._fetch(code)
        except (CountryDataError, httpx.HTTPError, ValidationError) as e:
            if seq != self._seq:
                logger.debug("Ignoring failure of superseded request for %s", code)
                return False
            if isinstance(e, CountryNotFoundError):
                logger.info("Country %s not found", code)
            else:
                logger.warning("Failed to load country %s: %s", code, e)
            self._pending_code = None
            self.status = ViewStatus.FAILED
            self.error = e
            return False

        if seq != self._seq:
            logger.debug("Discarding stale response for %s", code)
            return False

        self._pending_code = None
        self.current = record
        self.status = ViewStatus.LOADED
        return True

    def render(self) -> str:
        if self.current is None:
            return ""

        country = self.current
        lines = [
            country.name.common,
            f"Official name: {country.name.official}",
            f"Capital: {country.capital}",
            f"Area: {country.area:,.0f} km²",
        ]
        if country.borders:
            lines.append("Borders:")
            for b in country.borders:
                lines.append(f"  - {b.name.common} ({border_link(b.cca3)})")
        else:
            lines.append("Borders: none")
        return "\n".join(lines)

    def render_status(self) -> str:
        if self.status == ViewStatus.LOADING:
            return "Loading..."
        if self.status == ViewStatus.FAILED:
            if isinstance(self.error, CountryNotFoundError):
                return "Country not found"
            return "Could not load country"
        return ""
