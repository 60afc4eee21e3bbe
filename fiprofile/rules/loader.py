from pathlib import Path

import yaml
from pydantic import ValidationError

from fiprofile.rules.models import FinancialRules


def load_rules(path: Path) -> FinancialRules:
    """
    Load and validate the rules file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if the YAML or the schema is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Rules file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in rules file: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}

    try:
        return FinancialRules.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Rules validation failed:\n{e}") from e


def load_rules_or_default(path: Path | None) -> FinancialRules:
    """Load rules from ``path`` when it exists, otherwise fall back to defaults."""
    if path is None or not path.exists():
        return FinancialRules()
    return load_rules(path)
