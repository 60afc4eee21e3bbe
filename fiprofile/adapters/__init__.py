# fiprofile - Adapters
# Concrete implementations of the core ports

from fiprofile.adapters.clock import FrozenClock, SystemClock
from fiprofile.adapters.memory_store import InMemoryBlobStore
from fiprofile.adapters.sqlite_store import SQLiteBlobStore

__all__ = [
    "FrozenClock",
    "InMemoryBlobStore",
    "SQLiteBlobStore",
    "SystemClock",
]
