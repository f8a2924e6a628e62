"""Implementations of the local tenant override cache.

All stores hold a single slot under the ``active_tenant_id`` key with
last-write-wins semantics. They implement ITenantOverrideStore.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from tenancy.ports.override_store import OVERRIDE_KEY


class InMemoryTenantOverrideStore:
    """Process-local store, for tests and short-lived sessions."""

    def __init__(self, tenant_id: str | None = None):
        self._tenant_id = tenant_id

    def get(self) -> str | None:
        return self._tenant_id

    def set(self, tenant_id: str) -> None:
        self._tenant_id = tenant_id

    def clear(self) -> None:
        self._tenant_id = None


class JsonFileTenantOverrideStore:
    """Store persisted as a small JSON document, durable across sessions.

    The file is scoped to one client profile and is not synchronized
    anywhere. A missing or unparseable file reads as an empty cache.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> str | None:
        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return None
        except json.JSONDecodeError:
            return None

        if not isinstance(document, dict):
            return None
        value = document.get(OVERRIDE_KEY)
        return value if isinstance(value, str) and value else None

    def set(self, tenant_id: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps({OVERRIDE_KEY: tenant_id}), encoding="utf-8")
        os.replace(tmp_path, self._path)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
