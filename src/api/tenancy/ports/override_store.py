"""Port for the local tenant override cache.

A single slot holding the last successfully resolved tenant id, scoped to
one client. It is a convenience for development and preview environments
and is never trusted in production.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

OVERRIDE_KEY = "active_tenant_id"


@runtime_checkable
class ITenantOverrideStore(Protocol):
    """Single-slot, last-write-wins store for the cached tenant id."""

    def get(self) -> str | None:
        """Return the cached tenant id, or None when nothing is cached."""
        ...

    def set(self, tenant_id: str) -> None:
        """Overwrite the cached tenant id."""
        ...

    def clear(self) -> None:
        """Remove the cached tenant id."""
        ...
