"""
Rules loader tests.

Loads rules.yaml from the project root and checks fail-fast behavior.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from src.rules.loader import load_rules
from src.rules.models import SignupRules

PROJECT_ROOT = Path(__file__).parent.parent.parent


class TestLoadRules:
    def test_load_project_rules_file(self) -> None:
        rules = load_rules(PROJECT_ROOT / "rules.yaml")

        assert rules.project.slug == "signup-service"
        assert rules.signup == SignupRules(
            first_name_min_length=3,
            last_name_min_length=3,
            password_min_length=6,
            token_expiry="7d",
        )

    def test_missing_file_raises(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(Path("/nonexistent/rules.yaml"))

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("invalid: yaml: content: [")

        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("- just\n- a list\n")

        with pytest.raises(ValueError, match="mapping"):
            load_rules(path)

    def test_signup_section_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("project:\n  slug: test\n  rules_version: '1.0'\n")

        rules = load_rules(path)
        assert rules.signup.token_expiry == "7d"
        assert rules.signup.password_min_length == 6

    def test_bad_token_expiry_fails_validation(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(
            "project:\n  slug: test\n  rules_version: '1.0'\n"
            "signup:\n  token_expiry: seven days\n"
        )

        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)
