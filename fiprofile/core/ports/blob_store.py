"""
Blob store port.

String-keyed, string-valued storage. The profile store is agnostic to
whether the backing is in-memory, a local file, or a database row.

Adapters raise PersistenceError (or any exception) on failure; callers at
the store boundary convert failures to boolean / None results.
"""

from __future__ import annotations

from typing import Protocol


class BlobStorePort(Protocol):
    """Key-value blob storage interface."""

    def get(self, key: str) -> str | None:
        """Return the value under ``key``, or None if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``. Removing an absent key is not an error."""
        ...
