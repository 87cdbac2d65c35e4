import time
from fastapi import APIRouter, Depends

from services.country_service import CountryDirectory, get_directory

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check(directory: CountryDirectory = Depends(get_directory)):
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "countries": len(directory),
    }
