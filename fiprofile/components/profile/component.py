"""
Profile component - calculates, persists and serves the user's FI profile.

The pipeline is validation -> metrics -> stage and category -> profile
(stamped with the clock) -> insights and recommendations. Persistence is
best effort: a failed save is logged and the calculation still succeeds.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import ValidationError

from fiprofile.components.classify import determine_category, determine_stage
from fiprofile.components.insights import generate_insights, generate_recommendations
from fiprofile.components.metrics import compute_metrics
from fiprofile.components.profile_store import ProfileStore
from fiprofile.components.validation import validate_financial_input
from fiprofile.core.entities import (
    FinancialProfile,
    FinancialProfileInput,
    ProfileCalculationResult,
)
from fiprofile.core.errors import ProfileValidationError
from fiprofile.core.ports import ClockPort
from fiprofile.core.timestamps import format_timestamp
from fiprofile.rules.models import FinancialRules

from .models import StoredProfileStatus

logger = logging.getLogger(__name__)

ProfileInputData = FinancialProfileInput | Mapping[str, Any]


def _parse_pydantic_errors(exc: ValidationError) -> list[str]:
    """Flatten a pydantic ValidationError into field-prefixed messages."""
    errors: list[str] = []
    for error in exc.errors():
        loc = error.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "_schema"
        errors.append(f"Field '{field}': {error.get('msg', 'Invalid value')}")
    return errors


def build_input(data: ProfileInputData) -> FinancialProfileInput:
    """
    Coerce caller data into a FinancialProfileInput.

    Raises:
        ProfileValidationError: If the data does not fit the input model.
    """
    if isinstance(data, FinancialProfileInput):
        return data
    try:
        return FinancialProfileInput.model_validate(data)
    except ValidationError as e:
        raise ProfileValidationError(_parse_pydantic_errors(e)) from e


def calculate_financial_profile(
    inp: FinancialProfileInput,
    now: datetime,
    *,
    rules: FinancialRules | None = None,
) -> ProfileCalculationResult:
    """
    Run the calculation pipeline on already-validated input. No persistence.
    """
    rules = rules or FinancialRules()
    metrics = compute_metrics(inp, rules=rules)

    profile = FinancialProfile(
        stage=determine_stage(inp, metrics, rules=rules),
        category=determine_category(inp, metrics, rules=rules),
        income=inp.income,
        expenses=inp.expenses,
        investments=inp.investments,
        net_worth=inp.net_worth,
        age=inp.age,
        debt=inp.debt,
        metrics=metrics,
        last_updated=format_timestamp(now),
    )

    return ProfileCalculationResult(
        profile=profile,
        insights=generate_insights(profile, rules=rules),
        recommendations=generate_recommendations(profile),
    )


class ProfileService:
    """
    Holds the current profile for one user and keeps it in step with the store.

    The stored profile is loaded on construction.
    """

    def __init__(
        self,
        store: ProfileStore,
        clock: ClockPort,
        *,
        rules: FinancialRules | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._rules = rules or FinancialRules()
        self._profile: FinancialProfile | None = store.load()
        self._error: str | None = None

    # --- State ---

    @property
    def profile(self) -> FinancialProfile | None:
        return self._profile

    @property
    def error(self) -> str | None:
        """Last human-readable failure, cleared by the next success."""
        return self._error

    @property
    def has_profile(self) -> bool:
        return self._profile is not None

    @property
    def is_profile_outdated(self) -> bool:
        if self._profile is None:
            return False
        return self._store.is_stale(self._rules.storage.stale_after_days)

    @property
    def needs_profile(self) -> bool:
        return not self.has_profile or self.is_profile_outdated

    # --- Operations ---

    def calculate_profile(self, data: ProfileInputData) -> ProfileCalculationResult:
        """
        Validate, calculate and persist a new profile, replacing the current one.

        Raises:
            ProfileValidationError: If the input fails validation.
        """
        validation = validate_financial_input(data, rules=self._rules)
        try:
            if not validation.is_valid:
                raise ProfileValidationError(validation.errors)
            inp = build_input(data)
        except ProfileValidationError as e:
            self._error = f"Invalid input: {', '.join(e.errors)}"
            raise

        result = calculate_financial_profile(inp, self._clock.now(), rules=self._rules)

        if not self._store.save(result.profile):
            logger.warning("Failed to persist financial profile under %s", self._store.key)

        self._profile = result.profile
        self._error = None
        logger.info(
            "Calculated financial profile: stage=%s category=%s",
            result.profile.stage.value,
            result.profile.category.value,
        )
        return result

    def update_profile(self, data: ProfileInputData) -> bool:
        """Recalculate from new input; True on success."""
        try:
            self.calculate_profile(data)
        except ProfileValidationError:
            return False
        return True

    def clear_profile(self) -> bool:
        """Forget the current profile and delete it from the store."""
        self._profile = None
        self._error = None
        return self._store.remove()

    def refresh_profile(self) -> FinancialProfile | None:
        """Re-read the stored profile without recalculating."""
        self._profile = self._store.load()
        self._error = None if self._profile is not None else "No stored profile found"
        return self._profile

    def check_stored_profile(self) -> StoredProfileStatus:
        return StoredProfileStatus(
            exists=self._store.exists(),
            is_stale=self._store.is_stale(self._rules.storage.stale_after_days),
        )
