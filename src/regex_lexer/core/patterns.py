"""Compiled pattern table used for anchored multi-pattern matching."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from regex_lexer.core.errors import PatternCompileError

logger = logging.getLogger(__name__)


def uses_start_anchor(pattern: str) -> bool:
    """Check if ``pattern`` contains ``^`` or ``\\A`` outside a character class.

    Escaped characters and class contents are skipped. A ``^`` inside a
    verbose-mode comment also counts, which only costs the lookbehind context.
    """
    i = 0
    length = len(pattern)

    while i < length:
        char = pattern[i]
        if char == "\\":
            if pattern[i + 1 : i + 2] == "A":
                return True
            i += 2
        elif char == "[":
            i += 1
            # Negation and a leading ']' belong to the class
            if pattern[i : i + 1] == "^":
                i += 1
            if pattern[i : i + 1] == "]":
                i += 1
            while i < length and pattern[i] != "]":
                i += 2 if pattern[i] == "\\" else 1
            i += 1
        elif char == "^":
            return True
        else:
            i += 1

    return False


class PatternSet:
    """An ordered table of compiled regular expressions.

    Patterns are tested with ``Pattern.match(source, pos)``, so a match
    always starts exactly at ``pos`` and lookbehind assertions see the text
    before ``pos``. Patterns using ``^`` or ``\\A`` are matched against
    ``source[pos:]`` instead, so those anchors mean the current offset.
    """

    def __init__(self, patterns: tuple[re.Pattern[str], ...]) -> None:
        self._patterns = patterns
        self._sliced = tuple(uses_start_anchor(regex.pattern) for regex in patterns)

    @classmethod
    def compile(
        cls,
        patterns: Iterable[str],
        flags: int = 0,
        allow_empty: bool = True,
    ) -> PatternSet:
        """Compile pattern strings into a PatternSet.

        Only patterns that match the empty string on their own are detected
        as empty-matching. Patterns that match empty text only in context,
        such as ``(?=\\d)\\d*``, pass; the scanner never lets an empty match
        win either way.

        Args:
            patterns: Pattern strings in rule order
            flags: ``re`` flags applied to every pattern
            allow_empty: Accept patterns that match the empty string in isolation

        Returns:
            Compiled PatternSet

        Raises:
            PatternCompileError: If a pattern is invalid, or matches the
                empty string in isolation while ``allow_empty`` is false
        """
        compiled: list[re.Pattern[str]] = []

        for index, pattern in enumerate(patterns):
            try:
                regex = re.compile(pattern, flags)
            except re.error as e:
                raise PatternCompileError(index, pattern, str(e)) from e

            if regex.fullmatch("") is not None:
                if not allow_empty:
                    raise PatternCompileError(index, pattern, "pattern matches the empty string")
                logger.warning("Pattern #%d %r matches the empty string", index, pattern)

            logger.debug("Compiled pattern #%d %r", index, pattern)
            compiled.append(regex)

        return cls(tuple(compiled))

    def matches(self, source: str, pos: int) -> Iterator[tuple[int, int]]:
        """Yield ``(index, length)`` for every pattern matching at ``pos``."""
        rest: str | None = None

        for index, regex in enumerate(self._patterns):
            if self._sliced[index]:
                if rest is None:
                    rest = source[pos:]
                match = regex.match(rest)
                if match is not None:
                    yield index, match.end()
            else:
                match = regex.match(source, pos)
                if match is not None:
                    yield index, match.end() - pos

    @property
    def patterns(self) -> list[str]:
        """Source text of the compiled patterns."""
        return [regex.pattern for regex in self._patterns]

    def __len__(self) -> int:
        return len(self._patterns)

    def __repr__(self) -> str:
        return f"PatternSet({self.patterns!r})"
