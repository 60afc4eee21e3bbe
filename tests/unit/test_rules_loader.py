"""
Rules loader tests.

Verifies rules.yaml parsing, partial overrides, the all-defaults empty
file and the error surfaced for malformed files.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from fiprofile.rules import FinancialRules, default_rules, load_rules, load_rules_or_default


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(text)
    return path


class TestLoadRules:
    def test_shipped_rules_match_defaults(self, project_root: Path) -> None:
        assert load_rules(project_root / "rules.yaml") == default_rules()

    def test_partial_override(self, tmp_path: Path) -> None:
        rules = load_rules(write(tmp_path, "fi:\n  multiplier: 30\n"))

        assert rules.fi.multiplier == 30
        assert rules.fi.safe_withdrawal_rate == 0.04
        assert rules.storage.stale_after_days == 30

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_rules(write(tmp_path, "")) == FinancialRules()

    def test_comment_only_file_gives_defaults(self, tmp_path: Path) -> None:
        assert load_rules(write(tmp_path, "# nothing overridden\n")) == FinancialRules()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "nope.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(write(tmp_path, "fi: [unclosed\n"))

    def test_schema_violation(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write(tmp_path, "validation:\n  min_age: eighteen\n"))


class TestLoadRulesOrDefault:
    def test_none_path(self) -> None:
        assert load_rules_or_default(None) == FinancialRules()

    def test_missing_path(self, tmp_path: Path) -> None:
        assert load_rules_or_default(tmp_path / "absent.yaml") == FinancialRules()

    def test_existing_path(self, tmp_path: Path) -> None:
        rules = load_rules_or_default(write(tmp_path, "projection:\n  annual_return: 0.05\n"))

        assert rules.projection.annual_return == 0.05
