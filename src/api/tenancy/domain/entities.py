"""Read-only entities of the tenancy domain.

Tenants and domains are provisioned and verified out-of-band; the
resolution core only reads them, so both are frozen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping

from tenancy.domain.value_objects import DomainType, TenantStatus


@dataclass(frozen=True)
class Tenant:
    """A customer organization owning its own properties, users and site.

    Attributes:
        id: Opaque stable identifier.
        name: Display name.
        slug: URL-friendly name.
        status: Lifecycle status; only ``active`` is resolvable.
        settings: Open per-tenant configuration map.
    """

    id: str
    name: str
    slug: str
    status: str
    settings: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_active(self) -> bool:
        return self.status == TenantStatus.ACTIVE

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Tenant:
        """Build a Tenant from a directory row.

        Raises:
            KeyError: If the row lacks ``id``.
        """
        return cls(
            id=str(record["id"]),
            name=record.get("name") or "",
            slug=record.get("slug") or "",
            status=record.get("status") or "",
            settings=record.get("settings") or {},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "slug": self.slug,
            "status": self.status,
            "settings": dict(self.settings),
        }


@dataclass(frozen=True)
class Domain:
    """A hostname bound to exactly one tenant for public or admin access.

    Attributes:
        id: Opaque identifier of the domain record.
        tenant_id: Owning tenant.
        hostname: Lowercased hostname.
        type: Surface served by the hostname.
        is_primary: Whether this is the tenant's primary domain of its type.
        verified: Whether ownership was proven; only verified domains resolve.
        verify_token: Token the owner publishes to prove ownership.
        created_at: When the record was created, if the directory reports it.
    """

    id: str
    tenant_id: str
    hostname: str
    type: DomainType
    is_primary: bool = False
    verified: bool = False
    verify_token: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Domain:
        """Build a Domain from a directory row.

        Raises:
            KeyError: If a required column is missing.
            ValueError: If ``type`` or ``created_at`` cannot be parsed.
        """
        created_at = record.get("created_at")
        return cls(
            id=str(record["id"]),
            tenant_id=str(record["tenant_id"]),
            hostname=str(record["hostname"]).lower(),
            type=DomainType(record["type"]),
            is_primary=bool(record.get("is_primary", False)),
            verified=bool(record.get("verified", False)),
            verify_token=record.get("verify_token"),
            created_at=datetime.fromisoformat(created_at) if created_at else None,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "tenant_id": self.tenant_id,
            "hostname": self.hostname,
            "type": self.type.value,
            "is_primary": self.is_primary,
            "verified": self.verified,
            "verify_token": self.verify_token,
        }
