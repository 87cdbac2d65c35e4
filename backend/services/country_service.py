import json
import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from config import settings
from models.country import Country, ExpandedCountry
from services.errors import (
    CountryNotFoundError,
    DatasetError,
    MalformedCountryDataError,
)

logger = logging.getLogger(__name__)


class CountryDirectory:
    """Read-only, in-memory set of countries keyed by cca3."""

    def __init__(self, countries: Iterable[Country]):
        self._countries: tuple[Country, ...] = tuple(countries)
        self._by_code: dict[str, Country] = {}
        for c in self._countries:
            if c.cca3 in self._by_code:
                raise DatasetError(f"Duplicate cca3 code: {c.cca3}")
            self._by_code[c.cca3] = c

        for c in self._countries:
            for border in c.borders:
                if border not in self._by_code:
                    logger.warning("%s lists unknown border %s", c.cca3, border)

    @classmethod
    def from_records(cls, records: Iterable[dict]) -> "CountryDirectory":
        try:
            return cls(Country(**r) for r in records)
        except ValidationError as e:
            raise DatasetError(f"Invalid country record: {e}") from e

    @classmethod
    def from_file(cls, path: Path) -> "CountryDirectory":
        try:
            raw = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise DatasetError(f"Could not read dataset {path}: {e}") from e
        if not isinstance(raw, list):
            raise DatasetError(f"Dataset {path} must hold a JSON array")
        directory = cls.from_records(raw)
        logger.info("Loaded %d countries from %s", len(directory), path)
        return directory

    def __len__(self) -> int:
        return len(self._countries)

    def __contains__(self, code: object) -> bool:
        return code in self._by_code

    def list_all(self) -> list[Country]:
        return list(self._countries)

    def get(self, code: str) -> Country:
        country = self._by_code.get(code)
        if country is None:
            raise CountryNotFoundError(code)
        return country

    def get_expanded(self, code: str) -> ExpandedCountry:
        country = self.get(code)
        borders = []
        for border in country.borders:
            resolved = self._by_code.get(border)
            if resolved is None:
                raise MalformedCountryDataError(code, border)
            borders.append(resolved)
        return ExpandedCountry(
            name=country.name,
            capital=country.capital,
            area=country.area,
            cca3=country.cca3,
            borders=tuple(borders),
        )


_directory: CountryDirectory | None = None


def get_directory() -> CountryDirectory:
    global _directory
    if _directory is None:
        _directory = CountryDirectory.from_file(settings.data_path)
    return _directory


def reset_directory() -> None:
    global _directory
    _directory = None

