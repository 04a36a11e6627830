"""Search state machine: rebuild on change, cyclic next/previous."""

from loguru import logger

from preview_search.config import DEFAULT_MATCHER
from preview_search.core.search.index import MatchIndex
from preview_search.models.state import Direction, SearchState, StateKind
from preview_search.models.tree import DocNode, Match, MatcherMode
from preview_search.protocols import DocumentNodeProtocol

_EMPTY_DOCUMENT = DocNode(tag="root")


def search(
    tree: DocumentNodeProtocol,
    query: str,
    mode: MatcherMode,
    previous_position: int | None = None,
) -> tuple[MatchIndex, SearchState]:
    """Rebuild the match index and derive the new state.

    Args:
        tree: Document to search.
        query: Query text; empty means no search.
        mode: Matcher mode.
        previous_position: Position selected before the rebuild, if any.

    Returns:
        Tuple of (match index, state). A fresh query (no previous position)
        selects the first match; otherwise the old position is clamped.
    """
    if not query:
        return MatchIndex(), SearchState.empty()

    index = MatchIndex.build(tree, query, mode)
    total = index.total()
    if total == 0:
        return index, SearchState.no_match()

    position = index.position_for(previous_position)
    if position is None:
        position = 0
    return index, SearchState.selected(position, total)


def next_position(previous: int | None, total: int, direction: Direction) -> int | None:
    """Position after one step from ``previous``, wrapping at both ends.

    ``previous`` may be stale (from before a rebuild); it is clamped to
    ``total`` first. Returns None when there is nothing to select.
    """
    if previous is None or total <= 0:
        return None
    previous = max(0, min(previous, total - 1))
    if direction is Direction.NEXT:
        return (previous + 1) % total
    return (previous - 1 + total) % total


def step(state: SearchState, direction: Direction) -> SearchState:
    """Move the selection one match forward or backward."""
    if state.kind is not StateKind.SELECTED:
        return state
    position = next_position(state.position, state.total, direction)
    if position is None:
        return state
    return SearchState.selected(position, state.total)


class NavigationController:
    """Holds the document, query and mode, and the resulting selection.

    Every change of query text, matcher mode or document triggers a full
    synchronous rebuild. After ``close()`` all events are ignored until
    ``reopen()``.
    """

    def __init__(
        self,
        tree: DocumentNodeProtocol | None = None,
        *,
        mode: MatcherMode = DEFAULT_MATCHER,
    ) -> None:
        self._tree: DocumentNodeProtocol = tree if tree is not None else _EMPTY_DOCUMENT
        self._mode = mode
        self._query = ""
        self._index = MatchIndex()
        self._state = SearchState.empty()

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def index(self) -> MatchIndex:
        return self._index

    @property
    def query(self) -> str:
        return self._query

    @property
    def mode(self) -> MatcherMode:
        return self._mode

    @property
    def closed(self) -> bool:
        return self._state.kind is StateKind.CLOSED

    def current(self) -> Match | None:
        """Return the selected match, or None."""
        position = self._state.position
        if not self._state.is_selected or position is None:
            return None
        return self._index.at(position)

    def _rebuild(self) -> None:
        previous = self._state.position
        self._index, self._state = search(self._tree, self._query, self._mode, previous)
        logger.debug(
            "Search rebuilt: query={!r} mode={} -> {} (position={}, total={})",
            self._query,
            self._mode.value,
            self._state.kind.value,
            self._state.position,
            self._state.total,
        )

    def set_query(self, text: str) -> None:
        if self.closed:
            return
        self._query = text
        self._rebuild()

    def set_mode(self, mode: MatcherMode) -> bool:
        """Switch matcher mode. Returns False when ``mode`` is already active."""
        if self.closed or mode is self._mode:
            return False
        self._mode = mode
        self._rebuild()
        return True

    def set_document(self, tree: DocumentNodeProtocol) -> None:
        """Replace the document; matches are recomputed against the new tree."""
        self._tree = tree
        if self.closed:
            return
        self._rebuild()

    def navigate(self, direction: Direction) -> SearchState:
        if self.closed:
            return self._state
        self._state = step(self._state, direction)
        logger.debug("Navigated {} -> position={}", direction.value, self._state.position)
        return self._state

    def next(self) -> SearchState:
        return self.navigate(Direction.NEXT)

    def previous(self) -> SearchState:
        return self.navigate(Direction.PREVIOUS)

    def close(self) -> None:
        """Discard the query and matches. The matcher mode is kept."""
        self._query = ""
        self._index = MatchIndex()
        self._state = SearchState.closed()
        logger.debug("Search closed")

    def reopen(self) -> None:
        """Leave the closed state with an empty query."""
        if self.closed:
            self._state = SearchState.empty()
