"""Ordered match list for one query over one document."""

from collections.abc import Iterator, Sequence

from preview_search.core.matcher.strategy import try_compile
from preview_search.core.tree.walker import walk
from preview_search.models.tree import Match, MatcherMode
from preview_search.protocols import DocumentNodeProtocol


class MatchIndex:
    """Matches in document order.

    Rebuilt from scratch for every query, mode or document change, so it
    never has to be patched.
    """

    def __init__(self, matches: Sequence[Match] = ()) -> None:
        self._matches: tuple[Match, ...] = tuple(matches)

    @classmethod
    def build(cls, tree: DocumentNodeProtocol, query: str, mode: MatcherMode) -> "MatchIndex":
        """Compile ``query`` and collect its matches over ``tree``."""
        return cls(walk(tree, try_compile(query, mode)))

    def total(self) -> int:
        return len(self._matches)

    def at(self, i: int) -> Match:
        """Return match ``i``; negative indices are rejected."""
        if not 0 <= i < len(self._matches):
            msg = f"Match index {i} out of range (total {len(self._matches)})"
            raise IndexError(msg)
        return self._matches[i]

    def position_for(self, previous_position: int | None) -> int | None:
        """Re-seed the selected position after a rebuild.

        The old position is kept and clamped to the new total; no attempt
        is made to find the previously selected text again.
        """
        if previous_position is None or not self._matches:
            return None
        return max(0, min(previous_position, len(self._matches) - 1))

    def matches_in(self, path: tuple[int, ...]) -> tuple[Match, ...]:
        """Return the matches inside the node at ``path``."""
        return tuple(m for m in self._matches if m.path == path)

    def __len__(self) -> int:
        return len(self._matches)

    def __iter__(self) -> Iterator[Match]:
        return iter(self._matches)

    def __repr__(self) -> str:
        return f"MatchIndex(total={len(self._matches)})"
