"""
Pickup Stats API Server

FastAPI server exposing the stats aggregation engine over HTTP. Callers
post a corpus snapshot with each request; the server keeps no state.

Usage:
    uvicorn main:app --host 0.0.0.0 --port 8001

Environment Variables:
    LOG_LEVEL - Logging level (default INFO)
    LOG_FORMAT - "json" or "console" (default json)
    DISPLAY_PRECISION - Decimal places for rendered averages (default 1)
    DEVELOPMENT_MODE - Force console log rendering (default false)
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from pydantic import BaseModel

from api.v1 import stats as stats_routes
from core.logging import get_logger, setup_logging
from core.middleware import setup_middleware
from core.settings import settings


class HealthResponse(BaseModel):
    status: str
    timestamp: str


def configure_logging() -> None:
    """Apply logging settings; development mode always renders to the console."""
    setup_logging(
        log_level=settings.log_level,
        json_format=settings.log_format == "json" and not settings.development_mode,
        service_name=settings.service_name,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    log = get_logger()
    log.info("stats_api_starting", service=settings.service_name)

    yield

    log.info("stats_api_stopped")


app = FastAPI(
    title="Pickup Stats API",
    description="Performance Index, career records and leaderboards for pickup games",
    version="1.0.0",
    lifespan=lifespan,
)

setup_middleware(app)

app.include_router(stats_routes.router, prefix="/v1")


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    now = datetime.now(timezone.utc)
    return HealthResponse(status="healthy", timestamp=now.isoformat())


@app.get("/ping")
async def ping():
    return {"message": "Pong!"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8001)
