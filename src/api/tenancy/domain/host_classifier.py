"""Hostname classification.

Pure functions deciding whether a hostname belongs to a development or
production environment and whether it serves the admin panel or the
public site. Classification is a string heuristic, not a DNS check.
"""

from __future__ import annotations

from tenancy.domain.value_objects import DomainType, HostEnvironment

# Closed list; not configurable at runtime.
DEV_HOST_INDICATORS: tuple[str, ...] = (
    "localhost",
    "127.0.0.1",
    "lovable.app",
    "lovableproject.com",
)

ADMIN_HOST_PREFIX = "painel."


def normalize_hostname(hostname: str) -> str:
    return hostname.strip().lower()


def classify_environment(hostname: str) -> HostEnvironment:
    """Classify a hostname as development and/or production.

    A hostname is dev when it contains any known development indicator.
    It is prod when it is not dev and contains at least one dot. A bare
    name such as ``intranet`` is therefore neither.
    """
    host = normalize_hostname(hostname)
    is_dev = any(indicator in host for indicator in DEV_HOST_INDICATORS)
    return HostEnvironment(is_dev=is_dev, is_prod=not is_dev and "." in host)


def classify_domain_type(hostname: str) -> DomainType:
    """Hostnames under the admin prefix serve the panel; all others are public."""
    if normalize_hostname(hostname).startswith(ADMIN_HOST_PREFIX):
        return DomainType.ADMIN
    return DomainType.PUBLIC
