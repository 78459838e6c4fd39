"""
Loan Decision Gateway - Main Application Entry Point

Decides loan eligibility and the approvable loan amount and period
for a customer identified by their personal ID code.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from src import __version__
from src.core.config import settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type
from src.presentation.api import api_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)
from src.service.lending.settings import get_lending_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Sets up logging and records the lending policy in effect.
    """
    setup_logging()

    lending = get_lending_settings()
    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        loan_amount_range=[lending.min_loan_amount, lending.max_loan_amount],
        loan_period_range=[lending.min_loan_period, lending.max_loan_period],
        age_range=[lending.min_age, lending.max_age],
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="Loan Decision Gateway",
    description="Loan Eligibility & Amount Service",
    version=__version__,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


if settings.metrics_enabled:
    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=get_metrics(),
            media_type=get_metrics_content_type(),
        )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


def run() -> None:
    """Serve the application with uvicorn."""
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )


if __name__ == "__main__":
    run()
