"""Table-driven regular expression tokenizer."""

from regex_lexer.core import (
    SKIP,
    Emit,
    LexerError,
    NoMatchError,
    PatternCompileError,
    Rule,
    RuleSet,
    RuleSetBuilder,
    Scanner,
    Skip,
    StallError,
    Token,
)

__version__ = "0.1.0"

__all__ = [
    "Emit",
    "LexerError",
    "NoMatchError",
    "PatternCompileError",
    "Rule",
    "RuleSet",
    "RuleSetBuilder",
    "SKIP",
    "Scanner",
    "Skip",
    "StallError",
    "Token",
]
