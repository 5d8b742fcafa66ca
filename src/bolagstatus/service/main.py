"""
bolagstatus FastAPI Service

REST API answering "Is Systembolaget open right now?".

Endpoints:
    GET  /status            - Current opening status and countdown
    GET  /hours             - Standard weekly opening hours
    GET  /holidays/{year}   - Swedish public holidays of a year
    GET  /holidays/next     - Next full closing day
    GET  /stores?q=...      - Store lookup via the place search backend
    GET  /health            - Liveness probe
    GET  /ready             - Readiness probe

Run:
    uvicorn bolagstatus.service.main:app
"""

import logging
import time
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from bolagstatus import __version__
from bolagstatus.config import Settings
from bolagstatus.log import configure_logging
from bolagstatus.places import PlaceSearchClient
from bolagstatus.service.routers import holidays, status, stores
from bolagstatus.service.schemas import HealthResponse, ReadyResponse

logger = logging.getLogger("bolagstatus.service")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Settings to use; read from the environment if not given
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level, settings.log_format)

    calculator = settings.build_calculator()
    client = PlaceSearchClient(
        api_key=settings.google_maps_api_key,
        timeout=settings.places_timeout,
        tz=settings.timezone,
    )

    status.set_calculator(calculator)
    holidays.set_calendar(calculator.calendar, calculator.tz)
    stores.set_client(client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Log startup info."""
        logger.info("bolagstatus starting", extra={"request_id": "startup"})
        logger.info(f"Version: {__version__}")
        logger.info(f"Timezone: {settings.timezone}")
        logger.info(f"Hours table: {calculator.hours.name}")
        logger.info(f"Holiday collision policy: {settings.holiday_collision.value}")
        logger.info(f"Store search configured: {settings.places_configured}")
        yield
        logger.info("bolagstatus shutting down")

    app = FastAPI(
        title="bolagstatus",
        description="Is Systembolaget open right now?",
        version=__version__,
        docs_url="/docs" if settings.docs_enabled else None,
        redoc_url="/redoc" if settings.docs_enabled else None,
        openapi_url="/openapi.json" if settings.docs_enabled else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.calculator = calculator

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """Add request ID to all requests and log completion."""
        request_id = str(uuid.uuid4())[:8]
        request.state.request_id = request_id
        start_time = time.time()
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        logger.info(
            f"{request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.time() - start_time) * 1000, 2),
            },
        )
        return response

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Liveness probe - checks if process is alive."""
        return HealthResponse(
            status="ok",
            version=__version__,
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    @app.get("/ready", response_model=ReadyResponse, tags=["Health"])
    async def readiness_check():
        """Readiness probe - reports loaded configuration."""
        return ReadyResponse(
            ready=True,
            timezone=settings.timezone,
            hours_table=calculator.hours.name,
            store_search_configured=client.configured,
        )

    app.include_router(status.router)
    app.include_router(holidays.router)
    app.include_router(stores.router)

    return app


app = create_app()
