"""Pytest configuration and fixtures."""

import pytest

from regex_lexer.config.loader import load_config_from_string
from regex_lexer.config.schema import LexerConfig
from regex_lexer.core.ruleset import RuleSet, RuleSetBuilder

RULES_YAML = """
rules:
  - pattern: "[0-9]+"
    label: Num
  - pattern: "\\\\+"
    label: Add
  - pattern: "-"
    label: Sub
  - pattern: "\\\\s+"
    skip: true

themes:
  default:
    default: ""
    error: "bold red"
    labels:
      Num: "bright cyan"
      Add: "bold yellow"
"""


@pytest.fixture
def calc_rules() -> RuleSet:
    """Numbers and addition with whitespace skipped."""
    return RuleSetBuilder().token(r"[0-9]+", "Num").token(r"\+", "Add").ignore(r"\s+").build()


@pytest.fixture
def keyword_rules() -> RuleSet:
    """Identifiers with a 'let' keyword declared after them."""
    return (
        RuleSetBuilder()
        .token(r"[A-Za-z]+", "Ident")
        .token(r"let", "Let")
        .ignore(r"\s+")
        .build()
    )


@pytest.fixture
def sample_config() -> LexerConfig:
    """Sample rule file for testing."""
    return load_config_from_string(RULES_YAML)


@pytest.fixture
def rules_file(tmp_path):
    """Sample rule file written to disk."""
    path = tmp_path / "rules.yaml"
    path.write_text(RULES_YAML)
    return path
