"""
Profile store - persists the single current profile under a fixed key.

Failures of the backing store never escape: writes and removals report
False, reads report None. A blob that fails the integrity check is removed
so the next read does not trip over it again.

Passing ``blob_store=None`` models an environment with no storage at all
(e.g. a headless run); every operation then degrades to its failure value.
"""

from __future__ import annotations

import logging
import math

from fiprofile.core.entities import FinancialProfile
from fiprofile.core.errors import IntegrityError
from fiprofile.core.ports import BlobStorePort, ClockPort
from fiprofile.core.timestamps import as_utc, parse_timestamp
from fiprofile.rules.models import FinancialRules

from ._codec import decode_profile, encode_profile

logger = logging.getLogger(__name__)

SECONDS_PER_DAY = 24 * 60 * 60


def storage_key(base_key: str, user_id: str | None = None) -> str:
    """Key for one user's profile; the bare base key when unscoped."""
    if user_id:
        return f"{base_key}:{user_id}"
    return base_key


class ProfileStore:
    """
    Durable home of the current FinancialProfile.

    Exactly one profile lives under the key; saving overwrites it.
    """

    def __init__(
        self,
        blob_store: BlobStorePort | None,
        clock: ClockPort,
        *,
        user_id: str | None = None,
        rules: FinancialRules | None = None,
    ) -> None:
        """
        Args:
            blob_store: Backing key-value store, or None if unavailable.
            clock: Time source for age calculations.
            user_id: Scopes the key to one user in multi-user deployments.
            rules: Optional rules; defaults to the built-in storage settings.
        """
        self._blob_store = blob_store
        self._clock = clock
        self._storage = (rules or FinancialRules()).storage
        self.key = storage_key(self._storage.key, user_id)

    @property
    def available(self) -> bool:
        return self._blob_store is not None

    def save(self, profile: FinancialProfile) -> bool:
        if self._blob_store is None:
            return False
        try:
            self._blob_store.set(self.key, encode_profile(profile, self._storage.schema_version))
        except Exception:
            logger.exception("Failed to save financial profile under %s", self.key)
            return False
        return True

    def load(self) -> FinancialProfile | None:
        if self._blob_store is None:
            return None
        try:
            raw = self._blob_store.get(self.key)
        except Exception:
            logger.exception("Failed to load financial profile from %s", self.key)
            return None

        if raw is None:
            return None

        try:
            return decode_profile(raw, key=self.key, schema_version=self._storage.schema_version)
        except IntegrityError as e:
            logger.warning("Invalid financial profile found, removing: %s", e.reason)
            self.remove()
            return None

    def remove(self) -> bool:
        if self._blob_store is None:
            return False
        try:
            self._blob_store.remove(self.key)
        except Exception:
            logger.exception("Failed to remove financial profile under %s", self.key)
            return False
        return True

    def exists(self) -> bool:
        """True if anything is stored under the key; the blob is not validated."""
        if self._blob_store is None:
            return False
        try:
            return self._blob_store.get(self.key) is not None
        except Exception:
            logger.exception("Failed to check for financial profile under %s", self.key)
            return False

    def age_in_days(self) -> int | None:
        """
        Whole days since the stored profile was last updated, rounded up.

        None when there is no readable profile.
        """
        profile = self.load()
        if profile is None:
            return None

        try:
            last_updated = parse_timestamp(profile.last_updated)
        except ValueError:
            logger.warning("Unparseable lastUpdated on stored profile: %r", profile.last_updated)
            return None

        elapsed = abs((as_utc(self._clock.now()) - last_updated).total_seconds())
        return math.ceil(elapsed / SECONDS_PER_DAY)

    def is_stale(self, max_days: int | None = None) -> bool:
        """A missing profile is always stale."""
        if max_days is None:
            max_days = self._storage.stale_after_days
        age = self.age_in_days()
        if age is None:
            return True
        return age > max_days
