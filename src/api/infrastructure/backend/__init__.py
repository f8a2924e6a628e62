"""Managed backend infrastructure - shared REST and auth primitives."""

from infrastructure.backend.auth_client import BackendAuthClient
from infrastructure.backend.client import PostgRESTClient
from infrastructure.backend.exceptions import (
    BackendConnectionError,
    BackendError,
    BackendQueryError,
)

__all__ = [
    "BackendAuthClient",
    "BackendConnectionError",
    "BackendError",
    "BackendQueryError",
    "PostgRESTClient",
]
