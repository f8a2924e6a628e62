"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from infrastructure.dependencies import get_backend_auth_client, get_backend_client
from infrastructure.logging import configure_logging
from infrastructure.settings import get_tenancy_settings
from infrastructure.version import __version__
from tenancy.presentation import routes as tenancy_routes


@asynccontextmanager
async def tenancy_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration (verbose in dev builds)
    - Backend client lifecycles (created lazily, closed on shutdown)
    """
    configure_logging(verbose=get_tenancy_settings().is_dev_build)

    yield

    # Only close clients a request actually created
    for provider in (get_backend_client, get_backend_auth_client):
        if provider.cache_info().currsize:
            await provider().aclose()
            provider.cache_clear()


app = FastAPI(
    title="Imovel Tenancy API",
    description="Hostname-based tenant resolution for the listing and CRM platform",
    version=__version__,
    lifespan=tenancy_lifespan,
)

# Include Tenancy bounded context routes
app.include_router(tenancy_routes.router)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
