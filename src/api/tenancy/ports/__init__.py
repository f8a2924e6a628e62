"""Ports (interfaces) for Tenancy bounded context.

Ports define the contracts for the external directories and the override
cache without specifying implementation details. This allows for
dependency inversion and keeps the resolution services testable with fakes.
"""

from tenancy.ports.exceptions import DirectoryQueryError
from tenancy.ports.override_store import ITenantOverrideStore
from tenancy.ports.repositories import (
    IDomainRepository,
    IMembershipRepository,
    ITenantRepository,
)

__all__ = [
    "DirectoryQueryError",
    "IDomainRepository",
    "IMembershipRepository",
    "ITenantOverrideStore",
    "ITenantRepository",
]
