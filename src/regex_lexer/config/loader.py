"""Rule file loader with support for drop-in directories."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from regex_lexer.config.schema import LexerConfig
from regex_lexer.core.errors import ConfigError

logger = logging.getLogger(__name__)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    Lists are extended, so rules from ``override`` come after the rules
    of ``base``.
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        elif key in result and isinstance(result[key], list) and isinstance(value, list):
            result[key] = result[key] + value
        else:
            result[key] = value

    return result


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        logger.debug("Rule file %s not found", path)
        return {}
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"{path}: invalid YAML: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")
    return data


def load_dropin_directory(dropin_dir: Path) -> dict[str, Any]:
    """Load and merge all YAML files from drop-in directory."""
    if not dropin_dir.is_dir():
        return {}

    result: dict[str, Any] = {}
    yaml_files = sorted(dropin_dir.glob("*.yaml")) + sorted(dropin_dir.glob("*.yml"))

    for yaml_file in yaml_files:
        logger.debug("Merging drop-in rule file %s", yaml_file)
        result = deep_merge(result, load_yaml_file(yaml_file))

    return result


def parse_config(data: dict[str, Any]) -> LexerConfig:
    """Validate raw rule file data.

    Raises:
        ConfigError: If the data does not match the schema
    """
    try:
        return LexerConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid rule file: {e}") from e


def load_config(
    config_path: Path | str,
    dropin_dir: Path | str | None = None,
) -> LexerConfig:
    """Load a rule file and its drop-in directory.

    Args:
        config_path: Path to the main rule file
        dropin_dir: Directory of additional rule files merged after it

    Returns:
        Merged configuration object
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Rule file not found: {config_path}")
    data = load_yaml_file(config_path)

    if dropin_dir is not None:
        data = deep_merge(data, load_dropin_directory(Path(dropin_dir)))

    return parse_config(data)


def load_config_from_string(yaml_string: str) -> LexerConfig:
    """Load configuration from a YAML string (useful for testing)."""
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e
    return parse_config(data if data else {})
