"""
Validation component models.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationIssue:
    """Validation error with actionable message."""

    field: str
    code: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating raw profile input."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> list[str]:
        """Human-readable messages, in rule order."""
        return [issue.message for issue in self.issues]
