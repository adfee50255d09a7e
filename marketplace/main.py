import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from marketplace.db.postgres.base import engine
from marketplace.routers import (
    equipment_search,
    job_search,
    manpower_search,
    universal_search,
)
from marketplace.services.location_resolver import location_resolver
from marketplace.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Marketplace Search API",
    description="Manpower, job and equipment search",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Serving search over {len(location_resolver.gazetteer)} known places")

    try:
        yield
    finally:
        engine.dispose()
        logger.info("Database connections released")


app.router.lifespan_context = lifespan

app.include_router(manpower_search.router)
app.include_router(job_search.router)
app.include_router(equipment_search.router)
app.include_router(universal_search.router)


@app.get("/")
async def root():
    return {"message": "Marketplace Search API is running"}
