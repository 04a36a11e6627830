"""Navigation state of the search overlay."""

from dataclasses import dataclass
from enum import Enum


class StateKind(Enum):
    EMPTY = "empty"
    NO_MATCH = "no_match"
    SELECTED = "selected"
    CLOSED = "closed"


class Direction(Enum):
    NEXT = "next"
    PREVIOUS = "previous"


@dataclass(frozen=True)
class SearchState:
    """Current search state.

    ``position`` is only set for ``SELECTED`` and then satisfies
    ``0 <= position < total``.
    """

    kind: StateKind
    position: int | None = None
    total: int = 0

    def __post_init__(self) -> None:
        if self.kind is StateKind.SELECTED:
            if self.position is None or not 0 <= self.position < self.total:
                msg = f"Selected position {self.position!r} out of range for {self.total} matches"
                raise ValueError(msg)
        elif self.position is not None:
            msg = f"Position must be None in state {self.kind.value!r}"
            raise ValueError(msg)

    @classmethod
    def empty(cls) -> "SearchState":
        return cls(StateKind.EMPTY)

    @classmethod
    def no_match(cls) -> "SearchState":
        return cls(StateKind.NO_MATCH)

    @classmethod
    def selected(cls, position: int, total: int) -> "SearchState":
        return cls(StateKind.SELECTED, position, total)

    @classmethod
    def closed(cls) -> "SearchState":
        return cls(StateKind.CLOSED)

    @property
    def is_selected(self) -> bool:
        return self.kind is StateKind.SELECTED
