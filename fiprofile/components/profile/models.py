"""
Profile component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StoredProfileStatus:
    """What the store holds, without loading it into a service."""

    exists: bool
    is_stale: bool
