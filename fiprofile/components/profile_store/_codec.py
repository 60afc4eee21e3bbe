"""
Profile blob encoding and integrity checks.

The blob is one JSON object: the camelCase profile plus ``schemaVersion``.
Blobs written before versioning carry no ``schemaVersion`` and are read as
the current version. ``schemaVersion`` must be a JSON integer, and ``age``
must be a whole number.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from fiprofile.core.entities import FinancialProfile
from fiprofile.core.errors import IntegrityError

SCHEMA_VERSION_FIELD = "schemaVersion"

REQUIRED_FIELDS = (
    "stage",
    "category",
    "income",
    "expenses",
    "investments",
    "netWorth",
    "age",
    "metrics",
    "lastUpdated",
)

# Nested objects and the numeric fields each must carry
NUMERIC_SUBFIELDS: dict[str, tuple[str, ...]] = {
    "income": ("gross", "net"),
    "expenses": ("annual", "monthly"),
    "investments": ("annual",),
    "metrics": ("savingsRate", "fiNumber", "progressToFI", "yearsToFI"),
}


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def shape_problem(obj: Any) -> str | None:
    """
    Describe the first structural problem with a decoded blob.

    Returns None when the shape is valid.
    """
    if not isinstance(obj, dict):
        return "not a JSON object"

    for name in REQUIRED_FIELDS:
        if name not in obj:
            return f"missing field '{name}'"

    for section, fields in NUMERIC_SUBFIELDS.items():
        nested = obj[section]
        if not isinstance(nested, dict):
            return f"'{section}' is not an object"
        for name in fields:
            if not _is_number(nested.get(name)):
                return f"'{section}.{name}' is not a number"

    for name in ("netWorth", "age"):
        if not _is_number(obj[name]):
            return f"'{name}' is not a number"

    if isinstance(obj["age"], float) and not obj["age"].is_integer():
        return "'age' is not a whole number"

    for name in ("stage", "category", "lastUpdated"):
        if not isinstance(obj[name], str):
            return f"'{name}' is not a string"

    return None


def encode_profile(profile: FinancialProfile, schema_version: int) -> str:
    payload = profile.to_wire()
    payload[SCHEMA_VERSION_FIELD] = schema_version
    return json.dumps(payload)


def decode_profile(raw: str, *, key: str, schema_version: int) -> FinancialProfile:
    """
    Decode and validate a stored blob.

    Raises:
        IntegrityError: If the blob is malformed JSON, has the wrong shape,
            or was written under a different schema version.
    """
    try:
        obj = json.loads(raw)
    except json.JSONDecodeError as e:
        raise IntegrityError(key, f"malformed JSON ({e.msg})") from e

    problem = shape_problem(obj)
    if problem is not None:
        raise IntegrityError(key, problem)

    version = obj.get(SCHEMA_VERSION_FIELD, schema_version)
    if not isinstance(version, int) or isinstance(version, bool) or version != schema_version:
        raise IntegrityError(key, f"unsupported schema version {version!r}")

    try:
        return FinancialProfile.model_validate(obj)
    except ValidationError as e:
        raise IntegrityError(key, f"{e.error_count()} field error(s)") from e
