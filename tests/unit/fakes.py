"""Fake implementations for testing the search overlay."""

from collections.abc import Sequence

from preview_search.models.tree import Match


class FakePresentation:
    """In-memory fake for a preview surface.

    Every match is laid out on its own line, ``node_index`` rows down from
    the top of the document. Records all scroll requests for assertions.
    """

    def __init__(self, *, width: float = 800, height: float = 600, line_height: float = 20) -> None:
        self.width = width
        self.height = height
        self.line_height = line_height
        self.scroll_y = 0.0
        self.matches: tuple[Match, ...] = ()
        self.current: Match | None = None
        self.counter: str | None = None
        self.scrolled_to: list[Match] = []

    def mark(self, matches: Sequence[Match], current: Match | None) -> None:
        self.matches = tuple(matches)
        self.current = current

    def clear_marks(self) -> None:
        self.matches = ()
        self.current = None

    def bounding_rect(self, match: Match) -> tuple[float, float, float, float]:
        top = match.node_index * self.line_height - self.scroll_y
        left = float(match.offset * 8)
        return top, left, top + self.line_height, left + match.length * 8

    def viewport(self) -> tuple[float, float]:
        return self.width, self.height

    def scroll_to_center(self, match: Match) -> None:
        self.scrolled_to.append(match)
        self.scroll_y = match.node_index * self.line_height - self.height / 2

    def set_counter(self, text: str) -> None:
        self.counter = text


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds
