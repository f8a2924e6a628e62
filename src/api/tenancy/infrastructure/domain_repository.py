"""Domain directory adapter over the managed backend."""

from __future__ import annotations

from infrastructure.backend import BackendError, PostgRESTClient
from tenancy.domain.entities import Domain
from tenancy.domain.value_objects import DomainType
from tenancy.ports.exceptions import DirectoryQueryError

DOMAINS_TABLE = "domains"


class DomainRepository:
    """Reads verified domain records from the ``domains`` table.

    Implements IDomainRepository.
    """

    def __init__(self, client: PostgRESTClient):
        self._client = client

    async def find_verified(
        self, hostname: str, domain_type: DomainType
    ) -> list[Domain]:
        try:
            rows = await self._client.select(
                DOMAINS_TABLE,
                filters={
                    "hostname": hostname.lower(),
                    "type": domain_type.value,
                    "verified": True,
                },
            )
        except BackendError as e:
            raise DirectoryQueryError(
                str(e), status_code=getattr(e, "status_code", None)
            ) from e

        try:
            return [Domain.from_record(row) for row in rows]
        except (KeyError, ValueError) as e:
            raise DirectoryQueryError(f"Malformed domain record: {e!r}") from e
