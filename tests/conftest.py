import pytest
from fastapi.testclient import TestClient

from main import app
from services.country_service import CountryDirectory, get_directory

SAMPLE_RECORDS = [
    {
        "name": {"common": "France", "official": "French Republic"},
        "capital": "Paris",
        "area": 551695,
        "cca3": "FRA",
        "borders": ["DEU", "ESP"],
    },
    {
        "name": {"common": "Germany", "official": "Federal Republic of Germany"},
        "capital": "Berlin",
        "area": 357114,
        "cca3": "DEU",
        "borders": ["FRA"],
    },
    {
        "name": {"common": "Spain", "official": "Kingdom of Spain"},
        "capital": "Madrid",
        "area": 505992,
        "cca3": "ESP",
        "borders": ["FRA"],
    },
]


@pytest.fixture
def directory() -> CountryDirectory:
    return CountryDirectory.from_records(SAMPLE_RECORDS)


@pytest.fixture
def api(directory):
    app.dependency_overrides[get_directory] = lambda: directory
    yield TestClient(app)
    app.dependency_overrides.clear()
