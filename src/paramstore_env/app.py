"""FastAPI application serving the build wrapper descriptor."""

import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request

from .api.routes import router
from .infra.credentials import ProfileCredentialResolver
from .infra.logger import setup_logging, StructLogger
from .infra.regions import BotocoreRegionRegistry
from .service.descriptor import BuildWrapperDescriptor

VERSION = "0.1.0"

# Setup logging
log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(log_level)
logger = StructLogger("paramstore-env-api")


class AppState:
    """Application state container."""

    def __init__(self):
        """Initialize application state."""
        self.descriptor: BuildWrapperDescriptor | None = None


app_state = AppState()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting descriptor API...")

    if app_state.descriptor is None:
        app_state.descriptor = BuildWrapperDescriptor(
            credential_resolver=ProfileCredentialResolver(logger),
            region_registry=BotocoreRegionRegistry(),
        )

    yield

    logger.info("Shutting down descriptor API...")


app = FastAPI(
    title="Parameter Store Build Environment",
    description="Configuration lookups for the parameter store build wrapper",
    version=VERSION,
    lifespan=lifespan,
)


@app.middleware("http")
async def inject_dependencies(request: Request, call_next):
    """Inject dependencies into request state."""
    request.state.descriptor = app_state.descriptor
    response = await call_next(request)
    return response


app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {"service": "paramstore-env", "version": VERSION, "status": "running"}
