"""Rule table construction and match-set evaluation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Generic

from regex_lexer.core.errors import BuilderConsumedError, NoMatchError
from regex_lexer.core.patterns import PatternSet
from regex_lexer.core.scanner import Scanner
from regex_lexer.core.tokens import SKIP, Action, Emit, L, Token

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule(Generic[L]):
    """A pattern and the action taken when it wins."""

    pattern: str
    action: Action[L]

    @property
    def is_skip(self) -> bool:
        """Check if this rule consumes text without emitting a token."""
        return not isinstance(self.action, Emit)


@dataclass(frozen=True)
class Candidate:
    """A rule matching at a given offset.

    Attributes:
        index: Rule index in the rule table
        length: Length of the match
    """

    index: int
    length: int


def select_winner(candidates: Iterable[Candidate]) -> Candidate | None:
    """Pick the winning candidate.

    Empty matches never win. The longest match wins; among equally long
    matches the rule declared last wins.

    Args:
        candidates: Rules matching at the same offset

    Returns:
        The winning candidate, or None if no candidate consumes any text
    """
    best: Candidate | None = None

    for candidate in candidates:
        if candidate.length == 0:
            logger.debug("Ignoring empty match of rule #%d", candidate.index)
            continue
        if best is None or (candidate.length, candidate.index) > (best.length, best.index):
            best = candidate

    return best


class RuleSetBuilder(Generic[L]):
    """Accumulates rules in declaration order and compiles them once."""

    def __init__(self, flags: int = 0, *, allow_empty: bool = True) -> None:
        """Initialize the builder.

        Args:
            flags: ``re`` flags applied to every pattern
            allow_empty: Accept patterns that can match the empty string
        """
        self.flags = flags
        self.allow_empty = allow_empty
        self._rules: list[Rule[L]] = []
        self._consumed = False

    def _check(self) -> None:
        if self._consumed:
            raise BuilderConsumedError()

    def token(self, pattern: str, label: L) -> RuleSetBuilder[L]:
        """Add a rule emitting a token labelled ``label``."""
        self._check()
        self._rules.append(Rule(pattern, Emit(label)))
        return self

    def ignore(self, pattern: str) -> RuleSetBuilder[L]:
        """Add a rule whose matches are skipped."""
        self._check()
        self._rules.append(Rule(pattern, SKIP))
        return self

    def add(self, rule: Rule[L]) -> RuleSetBuilder[L]:
        """Add a prebuilt rule."""
        self._check()
        self._rules.append(rule)
        return self

    def build(self) -> RuleSet[L]:
        """Compile the accumulated rules.

        The builder cannot be used again afterwards, even if compilation
        fails.

        Returns:
            The compiled RuleSet

        Raises:
            PatternCompileError: If any pattern is invalid
            BuilderConsumedError: If build() was already called
        """
        self._check()
        self._consumed = True
        rules = tuple(self._rules)
        patterns = PatternSet.compile(
            (rule.pattern for rule in rules),
            flags=self.flags,
            allow_empty=self.allow_empty,
        )
        logger.debug("Built rule set with %d rules", len(rules))
        return RuleSet(rules, patterns)

    def __repr__(self) -> str:
        return f"RuleSetBuilder(patterns={[rule.pattern for rule in self._rules]!r})"


class RuleSet(Generic[L]):
    """Immutable compiled rule table.

    A RuleSet holds no per-scan state and can be shared by any number of
    scanners.
    """

    __slots__ = ("_rules", "_patterns")

    def __init__(self, rules: tuple[Rule[L], ...], patterns: PatternSet) -> None:
        if len(rules) != len(patterns):
            raise ValueError(f"{len(rules)} rules but {len(patterns)} compiled patterns")
        object.__setattr__(self, "_rules", rules)
        object.__setattr__(self, "_patterns", patterns)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @staticmethod
    def builder(flags: int = 0, *, allow_empty: bool = True) -> RuleSetBuilder[L]:
        """Create a RuleSetBuilder."""
        return RuleSetBuilder(flags, allow_empty=allow_empty)

    @property
    def rules(self) -> tuple[Rule[L], ...]:
        """Rules in declaration order."""
        return self._rules

    def match_set(self, source: str, pos: int) -> list[Candidate]:
        """Find every rule matching at ``pos``, in rule order."""
        return [Candidate(index, length) for index, length in self._patterns.matches(source, pos)]

    def resolve(self, source: str, pos: int) -> Candidate:
        """Find the winning rule at ``pos``.

        Raises:
            NoMatchError: If no rule consumes any text at ``pos``
        """
        winner = select_winner(self.match_set(source, pos))
        if winner is None:
            raise NoMatchError(pos, source)
        return winner

    def scan(self, source: str) -> Scanner[L]:
        """Return a lazy token iterator over ``source``."""
        return Scanner(self, source)

    def tokenize(self, source: str) -> list[Token[L]]:
        """Scan ``source`` completely into a list of tokens."""
        return list(self.scan(source))

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet(patterns={self._patterns.patterns!r})"
