"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.v1.router import router as api_router
from app.core.case_transform import CamelCaseJSONResponse, SnakeCaseRequestMiddleware
from app.core.config import settings
from app.core.database import init_db
from app.core.logging import setup_logging
from app.core.request_logging import RequestLoggingMiddleware

import logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    setup_logging(debug=settings.debug)
    init_db()
    yield
    # Shutdown


app = FastAPI(
    title=settings.app_name,
    description="ILYTAT Designs storefront API",
    version="1.0.0",
    lifespan=lifespan,
    # Responses leave the API with camelCase keys
    default_response_class=CamelCaseJSONResponse,
)

# CORS middleware
# Note: When allow_credentials=True, origins/methods/headers must be explicit (not wildcards)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["Authorization", "Content-Type", "Accept", "Origin", "X-Requested-With"],
)

# Request bodies reach handlers with snake_case keys
app.add_middleware(
    SnakeCaseRequestMiddleware,
    exclude_paths=settings.transform_exclude_paths,
)

# Request logging middleware (outermost, so every log line carries the request ID)
app.add_middleware(
    RequestLoggingMiddleware,
    exclude_paths=["/api/v1/health"],
)

# Include routers
app.include_router(api_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"service_name": settings.app_name, "status": "running"}
