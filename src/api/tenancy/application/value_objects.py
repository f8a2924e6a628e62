"""Application-layer value objects for Tenancy bounded context."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolutionConfig:
    """Construction-time configuration of the resolution engine.

    Attributes:
        fallback_tenant_id: Tenant used as last resort outside production.
        is_dev_build: Emit verbose per-resolution details. Presentational
            only; resolution decisions never depend on it.
    """

    fallback_tenant_id: str
    is_dev_build: bool = False
