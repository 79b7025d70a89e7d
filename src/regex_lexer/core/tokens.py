"""Token and rule action types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

L = TypeVar("L")


@dataclass(frozen=True)
class Emit(Generic[L]):
    """Produce a token with this label when the rule wins."""

    label: L


@dataclass(frozen=True)
class Skip:
    """Consume the matched text and emit nothing."""

    def __repr__(self) -> str:
        return "SKIP"


SKIP = Skip()

Action = Union[Emit[L], Skip]


@dataclass(frozen=True, eq=False)
class Token(Generic[L]):
    """A classified span of the source text.

    The token keeps a reference to the source string; ``text`` is sliced
    from it on access.

    Attributes:
        label: Label of the winning rule
        start: Start offset in the source
        end: End offset in the source (exclusive)
        source: The scanned text
    """

    label: L
    start: int
    end: int
    source: str = field(repr=False)

    @property
    def text(self) -> str:
        """The matched text."""
        return self.source[self.start : self.end]

    @property
    def span(self) -> tuple[int, int]:
        """Half-open ``(start, end)`` offsets."""
        return (self.start, self.end)

    def __len__(self) -> int:
        return self.end - self.start

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.label, self.start, self.end, self.text) == (
            other.label,
            other.start,
            other.end,
            other.text,
        )

    def __hash__(self) -> int:
        return hash((self.label, self.start, self.end, self.text))

    def __repr__(self) -> str:
        return f"Token(label={self.label!r}, span={self.span}, text={self.text!r})"
