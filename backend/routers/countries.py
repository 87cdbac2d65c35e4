import logging

from fastapi import APIRouter, Depends, HTTPException

from models.country import Country, ExpandedCountry
from services.country_service import CountryDirectory, get_directory
from services.errors import CountryNotFoundError, MalformedCountryDataError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/countries", tags=["countries"])


@router.get("", response_model=list[Country])
async def list_countries(directory: CountryDirectory = Depends(get_directory)):
    return directory.list_all()


@router.get("/{code}", response_model=ExpandedCountry)
async def get_country(code: str, directory: CountryDirectory = Depends(get_directory)):
    try:
        return directory.get_expanded(code)
    except CountryNotFoundError:
        logger.info("Country %s not found", code)
        raise HTTPException(status_code=404, detail="Country not found")
    except MalformedCountryDataError as e:
        logger.error("Inconsistent dataset: %s", e)
        raise HTTPException(status_code=500, detail=str(e))
