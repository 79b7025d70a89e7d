"""Core functionality: rule tables, match resolution and scanning."""

from regex_lexer.core.errors import (
    BuilderConsumedError,
    ConfigError,
    LexerError,
    NoMatchError,
    PatternCompileError,
    StallError,
)
from regex_lexer.core.patterns import PatternSet
from regex_lexer.core.ruleset import Candidate, Rule, RuleSet, RuleSetBuilder, select_winner
from regex_lexer.core.scanner import Scanner, Step
from regex_lexer.core.tokens import SKIP, Action, Emit, Skip, Token

__all__ = [
    "Action",
    "BuilderConsumedError",
    "Candidate",
    "ConfigError",
    "Emit",
    "LexerError",
    "NoMatchError",
    "PatternCompileError",
    "PatternSet",
    "Rule",
    "RuleSet",
    "RuleSetBuilder",
    "SKIP",
    "Scanner",
    "Skip",
    "StallError",
    "Step",
    "Token",
    "select_winner",
]
