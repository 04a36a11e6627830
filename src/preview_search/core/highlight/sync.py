"""Keep highlights, scroll position and the match counter in step with the search state."""

from dataclasses import dataclass

from loguru import logger

from preview_search.core.search.index import MatchIndex
from preview_search.models.state import SearchState
from preview_search.protocols import PresentationProtocol


@dataclass(frozen=True)
class Rect:
    """Bounding box relative to the viewport origin."""

    top: float
    left: float
    bottom: float
    right: float


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


def is_in_viewport(rect: Rect, viewport: Viewport) -> bool:
    """True when all four edges of ``rect`` lie inside the viewport."""
    return (
        0 <= rect.top
        and 0 <= rect.left
        and rect.bottom <= viewport.height
        and rect.right <= viewport.width
    )


def counter_text(state: SearchState) -> str:
    """Format the ``N / total`` counter; ``0 / total`` when nothing is selected."""
    nth = state.position + 1 if state.position is not None else 0
    return f"{nth} / {state.total}"


class HighlightSync:
    """Applies a search state to a presentation.

    Only this class touches the presentation; the rest of the engine is
    side-effect free.
    """

    def __init__(self, presentation: PresentationProtocol) -> None:
        self._presentation = presentation

    def sync(self, index: MatchIndex, state: SearchState) -> None:
        """Mark matches, bring the current one into view and update the counter.

        Calling this again for an unchanged, visible current match does not
        scroll.
        """
        current = index.at(state.position) if state.position is not None else None
        self._presentation.mark(tuple(index), current)

        if current is not None:
            rect = Rect(*self._presentation.bounding_rect(current))
            viewport = Viewport(*self._presentation.viewport())
            if not is_in_viewport(rect, viewport):
                logger.debug("Scrolling match at node {} into view", current.node_index)
                self._presentation.scroll_to_center(current)

        self._presentation.set_counter(counter_text(state))

    def clear(self) -> None:
        self._presentation.clear_marks()
        self._presentation.set_counter("")
