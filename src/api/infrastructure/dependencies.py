"""Shared infrastructure dependencies.

Provides ONLY raw backend infrastructure resources (the REST and auth
clients). Does NOT import from bounded contexts to maintain DDD boundaries.
"""

from functools import lru_cache

from infrastructure.backend import BackendAuthClient, PostgRESTClient
from infrastructure.settings import get_backend_settings


@lru_cache
def get_backend_client() -> PostgRESTClient:
    """Get application-scoped managed backend client (singleton).

    The underlying httpx client pools connections and is shared across
    all requests. It is closed by the application lifespan.

    Returns:
        PostgRESTClient configured from BackendSettings.
    """
    return PostgRESTClient(get_backend_settings())


@lru_cache
def get_backend_auth_client() -> BackendAuthClient:
    """Get application-scoped auth client (singleton), closed by the lifespan."""
    return BackendAuthClient(get_backend_settings())
