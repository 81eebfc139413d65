"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import DisconnectionError, OperationalError, SQLAlchemyError

from app.api.v1.router import api_router
from app.core.config import settings
from app.core.logging import configure_logging, get_logger
from app.db.session import engine

configure_logging(settings)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    logger.info("app_started", version=settings.VERSION, database=engine.url.get_backend_name())
    yield
    engine.dispose()
    logger.info("app_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Air quality exposure passport: scoring, streaks, health profiles and history.",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan)

app.include_router(api_router, prefix="/api/v1")


@app.exception_handler(OperationalError)
@app.exception_handler(DisconnectionError)
async def database_unavailable_handler(request: Request, exc: SQLAlchemyError):
    logger.error("database_error", path=request.url.path, error=type(exc).__name__, exc_info=exc)
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                        content={ "detail": "Database unavailable, try again later" })


@app.get("/")
async def root():
    return { "message": "AirPass API", "version": settings.VERSION, "docs": "/docs" }


@app.get("/health")
def health_check():
    """Liveness plus a trivial database round-trip."""
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.warning("health_check_database_failed", error=str(e))
        database = "unavailable"

    return {
        "status": "healthy" if database == "ok" else "degraded",
        "service": "airpass-api",
        "version": settings.VERSION,
        "database": database,
    }


@app.get("/info")
async def info():
    return {
        "project name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "authors": settings.AUTHORS,
        "authors emails": settings.AUTHORS_EMAILS,
        "project url": settings.PROJECT_URL
    }
