"""Error types shared across the profile components."""

from __future__ import annotations


class ProfileError(Exception):
    """Base class for profile errors."""


class ProfileValidationError(ProfileError):
    """Raised when input fails validation; no profile is produced."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(f"Invalid financial data: {', '.join(self.errors)}")


class PersistenceError(ProfileError):
    """Raised by blob store adapters when the backing store fails."""

    def __init__(self, operation: str, key: str, cause: Exception | None = None) -> None:
        self.operation = operation
        self.key = key
        self.cause = cause
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Blob store {operation} failed for key {key!r}{detail}")


class IntegrityError(ProfileError):
    """Raised when a stored blob does not decode to a valid profile."""

    def __init__(self, key: str, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Stored profile under {key!r} is invalid: {reason}")
