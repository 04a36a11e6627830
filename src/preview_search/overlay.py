"""Search overlay: user events in, highlight updates out."""

from loguru import logger

from preview_search.config import DEFAULT_MATCHER, MATCHER_MENU
from preview_search.core.dispatch.debounce import ImmediatePolicy
from preview_search.core.highlight.sync import HighlightSync
from preview_search.core.search.navigation import NavigationController
from preview_search.models.state import Direction, SearchState
from preview_search.models.tree import MatcherMode
from preview_search.protocols import (
    DocumentNodeProtocol,
    PresentationProtocol,
    RecomputePolicyProtocol,
)


class SearchOverlay:
    """Accepts the overlay's user events and keeps the presentation in sync.

    Query edits go through ``policy`` so the host can debounce them;
    navigation and close first flush any pending query so they always act
    on the latest text.
    """

    def __init__(
        self,
        presentation: PresentationProtocol,
        tree: DocumentNodeProtocol | None = None,
        *,
        mode: MatcherMode = DEFAULT_MATCHER,
        policy: RecomputePolicyProtocol | None = None,
    ) -> None:
        self.controller = NavigationController(tree, mode=mode)
        self._highlight = HighlightSync(presentation)
        self._policy: RecomputePolicyProtocol = policy or ImmediatePolicy()

    @property
    def state(self) -> SearchState:
        return self.controller.state

    @property
    def mode(self) -> MatcherMode:
        return self.controller.mode

    def _sync(self) -> None:
        if self.controller.closed:
            return
        self._highlight.sync(self.controller.index, self.controller.state)

    def query_changed(self, text: str) -> None:
        def recompute() -> None:
            self.controller.set_query(text)
            self._sync()

        self._policy.submit(recompute)

    def matcher_mode_changed(self, mode: MatcherMode) -> None:
        """Select a matcher from the menu; reselecting the active one does nothing."""
        if mode is self.controller.mode:
            return
        logger.debug("Search matcher selected: {}", mode.value)
        self._policy.flush()
        if self.controller.set_mode(mode):
            self._sync()

    def content_changed(self, tree: DocumentNodeProtocol) -> None:
        self._policy.flush()
        self.controller.set_document(tree)
        self._sync()

    def navigate(self, direction: Direction) -> None:
        self._policy.flush()
        self.controller.navigate(direction)
        self._sync()

    def close(self) -> None:
        self._policy.cancel()
        self.controller.close()
        self._highlight.clear()

    def open(self) -> None:
        """Show the overlay again after ``close()`` with an empty query."""
        self.controller.reopen()
        self._sync()

    def handle_key(self, key: str, *, shift: bool = False) -> bool:
        """Handle a key pressed in the search input.

        Enter steps forward, Shift+Enter backward and Escape closes.
        Returns False for keys the overlay does not consume.
        """
        if key == "Enter" and not shift:
            self.navigate(Direction.NEXT)
        elif key == "Enter" and shift:
            self.navigate(Direction.PREVIOUS)
        elif key == "Escape":
            self.close()
        else:
            return False
        return True

    def menu_items(self) -> list[tuple[MatcherMode, str, bool]]:
        """Matcher menu entries as (mode, label, selected), in fixed order."""
        return [(m, m.label, m is self.controller.mode) for m in MATCHER_MENU]
