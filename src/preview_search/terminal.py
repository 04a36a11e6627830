"""Line-oriented presentation of a document tree for terminal use."""

from collections.abc import Sequence
from dataclasses import dataclass

import typer

from preview_search.config import (
    CURRENT_CLASS,
    MATCH_CLASS,
    TERMINAL_VIEWPORT_HEIGHT,
    TERMINAL_VIEWPORT_WIDTH,
)
from preview_search.core.search.index import MatchIndex
from preview_search.core.tree.walker import iter_text_nodes
from preview_search.models.tree import Match
from preview_search.protocols import DocumentNodeProtocol


@dataclass(frozen=True)
class _Row:
    node_index: int
    path: tuple[int, ...]
    start: int
    line: str


def _layout(tree: DocumentNodeProtocol) -> list[_Row]:
    """One row per line of every text node, in document order."""
    rows: list[_Row] = []
    for node_index, (path, node) in enumerate(iter_text_nodes(tree)):
        start = 0
        for line in (node.text or "").split("\n"):
            rows.append(_Row(node_index=node_index, path=path, start=start, line=line))
            start += len(line) + 1
    return rows


def _starts_in(row: _Row, match: Match) -> bool:
    if row.node_index != match.node_index:
        return False
    return row.start <= match.offset <= row.start + len(row.line)


class TerminalPresentation:
    """Shows a scrolling window of document rows with matches emphasized.

    Coordinates are character cells: a row is one unit high and a
    character one unit wide.
    """

    def __init__(
        self,
        tree: DocumentNodeProtocol,
        *,
        height: int = TERMINAL_VIEWPORT_HEIGHT,
        width: int = TERMINAL_VIEWPORT_WIDTH,
    ) -> None:
        self.height = height
        self.width = width
        self.scroll_top = 0
        self.scroll_left = 0
        self.counter = ""
        self.classes: dict[Match, str] = {}
        self._marked = MatchIndex()
        self.set_document(tree)

    def set_document(self, tree: DocumentNodeProtocol) -> None:
        self._rows = _layout(tree)
        self.classes = {}
        self._marked = MatchIndex()
        self.scroll_top = 0
        self.scroll_left = 0

    def _locate(self, match: Match) -> tuple[int, int]:
        """Return (row, column) of the first character of ``match``."""
        for row_no, row in enumerate(self._rows):
            if _starts_in(row, match):
                return row_no, match.offset - row.start
        msg = f"Match {match!r} is not part of the displayed document"
        raise LookupError(msg)

    def mark(self, matches: Sequence[Match], current: Match | None) -> None:
        self._marked = MatchIndex(matches)
        self.classes = {m: MATCH_CLASS for m in matches}
        if current is not None:
            self.classes[current] = CURRENT_CLASS

    def clear_marks(self) -> None:
        self.classes = {}
        self._marked = MatchIndex()

    def bounding_rect(self, match: Match) -> tuple[float, float, float, float]:
        row, col = self._locate(match)
        top = row - self.scroll_top
        left = col - self.scroll_left
        return top, left, top + 1, left + match.length

    def viewport(self) -> tuple[float, float]:
        return self.width, self.height

    def scroll_to_center(self, match: Match) -> None:
        row, col = self._locate(match)
        self.scroll_top = max(0, row - self.height // 2)
        self.scroll_left = max(0, col + match.length // 2 - self.width // 2)

    def set_counter(self, text: str) -> None:
        self.counter = text

    def _style_row(self, row: _Row) -> str:
        """Return the visible part of ``row`` with match spans styled."""
        first, last = self.scroll_left, self.scroll_left + self.width
        spans = sorted(
            (m.offset - row.start, m.length, self.classes.get(m, MATCH_CLASS))
            for m in self._marked.matches_in(row.path)
            if _starts_in(row, m)
        )
        out: list[str] = []
        pos = first
        for col, length, cls in spans:
            start, end = max(col, first), min(col + length, last)
            if start >= end:
                continue
            out.append(row.line[pos:start])
            fragment = row.line[start:end]
            if cls == CURRENT_CLASS:
                out.append(typer.style(fragment, fg=typer.colors.BLACK, bg=typer.colors.YELLOW))
            else:
                out.append(typer.style(fragment, bold=True, underline=True))
            pos = end
        out.append(row.line[pos:last])
        return "".join(out)

    def render(self) -> str:
        """Return the visible rows followed by the counter line."""
        visible = self._rows[self.scroll_top : self.scroll_top + self.height]
        lines = [self._style_row(row) for row in visible]
        if self.counter:
            lines.append(f"[{self.counter}]")
        return "\n".join(lines)
