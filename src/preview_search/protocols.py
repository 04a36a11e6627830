"""Protocols for the collaborators the search engine talks to."""

from collections.abc import Callable, Sequence
from typing import Protocol, runtime_checkable

from preview_search.models.tree import Match


@runtime_checkable
class DocumentNodeProtocol(Protocol):
    """Read-only view of one node of a rendered document tree."""

    @property
    def tag(self) -> str: ...

    @property
    def children(self) -> Sequence["DocumentNodeProtocol"]: ...

    @property
    def text(self) -> str | None: ...


@runtime_checkable
class PresentationProtocol(Protocol):
    """Protocol for the surface that displays highlighted matches."""

    def mark(self, matches: Sequence[Match], current: Match | None) -> None:
        """Tag every match as a match and ``current`` as the current one."""
        ...

    def clear_marks(self) -> None:
        """Remove all match and current tags."""
        ...

    def bounding_rect(self, match: Match) -> tuple[float, float, float, float]:
        """Return (top, left, bottom, right) of the rendered match, viewport-relative."""
        ...

    def viewport(self) -> tuple[float, float]:
        """Return (width, height) of the visible viewport."""
        ...

    def scroll_to_center(self, match: Match) -> None:
        """Scroll so the match sits at the vertical and horizontal center."""
        ...

    def set_counter(self, text: str) -> None:
        """Show the ``N / total`` counter text."""
        ...


@runtime_checkable
class RecomputePolicyProtocol(Protocol):
    """Decides when a submitted recompute actually runs."""

    def submit(self, task: Callable[[], None]) -> None:
        """Schedule ``task``, superseding any task still pending."""
        ...

    def flush(self) -> None:
        """Run the pending task now, if any."""
        ...

    def cancel(self) -> None:
        """Drop the pending task without running it."""
        ...
