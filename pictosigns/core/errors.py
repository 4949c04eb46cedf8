# pictosigns/core/errors.py
"""
Catalog error taxonomy.

Every error carries two messages: ``description`` is the short text shown to
the client, ``detail`` is the technical message that only goes to the logs.
Not-found lookups are never errors, they return ``None``.
"""
from __future__ import annotations

from typing import Optional


class CatalogError(Exception):
    status_code: int = 500
    description: str = "Internal server error"

    def __init__(self, detail: str, *, description: Optional[str] = None):
        super().__init__(detail)
        self.detail = detail
        if description is not None:
            self.description = description


class LookupFailed(CatalogError):
    """A read against the catalog failed for infrastructure reasons."""

    def __init__(self, entity: str, key: object = None):
        detail = f"Could not select {entity}" if key is None else f"Could not find {entity} `{key}`"
        super().__init__(detail, description=f"Could not load {entity}")
        self.entity = entity
        self.key = key


class WriteFailed(CatalogError):
    def __init__(self, action: str, entity: str, key: object = None):
        suffix = "" if key is None else f" `{key}`"
        super().__init__(
            f"Could not {action} {entity}{suffix}",
            description=f"Could not {action} {entity}",
        )
        self.action = action
        self.entity = entity
        self.key = key


class ConfigurationError(RuntimeError):
    pass
