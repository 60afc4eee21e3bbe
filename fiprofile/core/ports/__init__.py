# fiprofile - Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from fiprofile.core.ports.blob_store import BlobStorePort
from fiprofile.core.ports.clock import ClockPort

__all__ = [
    "BlobStorePort",
    "ClockPort",
]
