import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cityinfo.api.v1.routes.cities import router as cities_router
from cityinfo.api.v1.routes.points_of_interest import router as points_of_interest_router
from cityinfo.config import settings
from cityinfo.core.database_init import initialize_database
from cityinfo.core.dependencies import get_city_info_store
from cityinfo.core.exceptions import PersistenceFailure

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("Starting up application...")

    if settings.USE_DB_REPOS:
        if not initialize_database(seed=settings.SEED_DATA):
            logger.error("Database initialization failed")
    else:
        store = get_city_info_store()
        logger.info(f"Using in-memory store with {len(store.cities())} cities")

    yield

    logger.info("Shutting down application...")


async def persistence_failure_handler(request: Request, exc: PersistenceFailure):
    logger.critical(f"Persistence failure while handling {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=500,
        content={"detail": "A problem happened while handling your request."},
    )


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    app = FastAPI(
        title="City Info API",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(PersistenceFailure, persistence_failure_handler)

    app.include_router(cities_router, prefix="/api")
    app.include_router(points_of_interest_router, prefix="/api")
    return app


app = create_app()


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
