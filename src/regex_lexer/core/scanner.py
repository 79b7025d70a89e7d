"""Lazy scanner producing tokens from a rule set."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic

from regex_lexer.core.errors import StallError
from regex_lexer.core.tokens import Action, Emit, L, Token

if TYPE_CHECKING:
    from regex_lexer.core.ruleset import RuleSet


@dataclass(frozen=True)
class Step(Generic[L]):
    """One scan step: the winning rule's action and the span it consumed."""

    action: Action[L]
    start: int
    end: int
    text: str

    @property
    def is_skip(self) -> bool:
        return not isinstance(self.action, Emit)


class Scanner(Generic[L]):
    """Single-pass cursor over a source text.

    Each call to ``next()`` runs scan steps until an emitting rule wins.
    Skipped spans never surface as tokens. A position no rule accounts for
    raises NoMatchError, after which the scanner is exhausted.
    """

    def __init__(self, ruleset: RuleSet[L], source: str) -> None:
        self._ruleset = ruleset
        self._source = source
        self._position = 0
        self._failed = False

    @property
    def ruleset(self) -> RuleSet[L]:
        return self._ruleset

    @property
    def source(self) -> str:
        return self._source

    @property
    def position(self) -> int:
        """Offset of the next unscanned character."""
        return self._position

    @property
    def done(self) -> bool:
        """Check if the scanner will produce nothing more."""
        return self._failed or self._position == len(self._source)

    def _step(self) -> Step[L]:
        """Consume the winning rule's match at the current position."""
        start = self._position
        try:
            winner = self._ruleset.resolve(self._source, start)
        except Exception:
            self._failed = True
            raise

        end = start + winner.length
        if end <= start:
            self._failed = True
            raise StallError(start, winner.index)

        self._position = end
        action = self._ruleset.rules[winner.index].action
        return Step(action, start, end, self._source[start:end])

    def steps(self) -> Iterator[Step[L]]:
        """Yield every remaining step, skipped spans included."""
        while not self.done:
            yield self._step()

    def __iter__(self) -> Scanner[L]:
        return self

    def __next__(self) -> Token[L]:
        while not self.done:
            step = self._step()
            if isinstance(step.action, Emit):
                return Token(step.action.label, step.start, step.end, self._source)
        raise StopIteration

    def __repr__(self) -> str:
        return f"Scanner(position={self._position}, length={len(self._source)})"
