"""Rule file loading and schema definitions."""

from regex_lexer.config.loader import load_config, load_config_from_string
from regex_lexer.config.schema import LexerConfig, LexerOptions, RuleSpec, Theme

__all__ = [
    "LexerConfig",
    "LexerOptions",
    "RuleSpec",
    "Theme",
    "load_config",
    "load_config_from_string",
]
