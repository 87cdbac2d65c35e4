import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from routers import health, countries
from services.country_service import get_directory
from utils.logging_setup import configure_logging

configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Country Explorer", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(countries.router)


@app.get("/")
async def root():
    return {
        "name": "Country Explorer API",
        "version": "0.1.0",
        "endpoints": ["/health", "/countries", "/countries/{code}"],
    }


@app.on_event("startup")
async def startup():
    directory = get_directory()
    logger.info("Country Explorer API is running with %d countries", len(directory))
