"""Exception classes for regex-lexer."""

from __future__ import annotations


class LexerError(Exception):
    """Base exception for all lexer errors."""


class PatternCompileError(LexerError):
    """A declared pattern could not be compiled.

    Attributes:
        index: Position of the rule in the rule table
        pattern: The offending pattern text
        reason: Description from the regex engine
    """

    def __init__(self, index: int, pattern: str, reason: str) -> None:
        self.index = index
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern #{index} {pattern!r}: {reason}")


class NoMatchError(LexerError):
    """No rule matches at the current scan position.

    Attributes:
        position: Offset of the first unmatched character
        char: The unmatched character
    """

    def __init__(self, position: int, source: str) -> None:
        self.position = position
        self.char = source[position : position + 1]
        super().__init__(f"No rule matches at offset {position} ({self.char!r})")


class StallError(LexerError):
    """A scan step failed to advance the position."""

    def __init__(self, position: int, index: int) -> None:
        self.position = position
        self.index = index
        super().__init__(f"Rule #{index} matched an empty span at offset {position}")


class BuilderConsumedError(LexerError):
    """The builder was used after build()."""

    def __init__(self) -> None:
        super().__init__("RuleSetBuilder has already been built")


class ConfigError(LexerError):
    """A rule file is malformed."""
