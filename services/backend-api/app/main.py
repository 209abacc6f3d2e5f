"""Backend API - Main application."""

import logging
import sys
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .db import connect
from .models import ServiceInfo
from .routes import router
from common.database.mongodb import close_database_connection
from common.errors import register_error_handlers
from common.health.checks import health_check, readiness_check, liveness_check

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stdout
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    # Connect to MongoDB, exits the process on failure
    await connect()

    logger.info(f"{settings.app_name} started successfully")

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}")
    await close_database_connection()


# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Backend API",
    lifespan=lifespan
)

register_error_handlers(app)

# Configure CORS
cors_origins = [origin.strip() for origin in settings.cors_origins.split(',')]
logger.info(f"CORS origins configured: {cors_origins}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
    max_age=3600,
)


# Health check endpoints
@app.get("/health", include_in_schema=False)
async def health():
    """Health check endpoint."""
    return await health_check(service_name=settings.app_name, version=settings.app_version)


@app.get("/ready", include_in_schema=False)
async def ready():
    """Readiness check endpoint."""
    return await readiness_check()


@app.get("/live", include_in_schema=False)
async def live():
    """Liveness check endpoint."""
    return await liveness_check()


app.include_router(router)


@app.get("/", response_model=ServiceInfo, include_in_schema=False)
async def root() -> ServiceInfo:
    """Root endpoint."""
    return ServiceInfo(
        service=settings.app_name,
        version=settings.app_version,
        status="running"
    )
