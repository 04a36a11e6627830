"""Domain models for the rendered document and its search matches."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MatcherMode(Enum):
    """How a query string is interpreted against document text."""

    SMART_CASE = "SmartCase"
    CASE_SENSITIVE = "CaseSensitive"
    CASE_INSENSITIVE = "CaseInsensitive"
    CASE_SENSITIVE_REGEX = "CaseSensitiveRegex"

    @property
    def label(self) -> str:
        """Fixed display label shown in the matcher menu."""
        return _LABELS[self]

    @classmethod
    def parse(cls, name: str) -> "MatcherMode":
        """Resolve a wire name (``SmartCase``) or a menu label (``smart case``)."""
        for mode in cls:
            if name in (mode.value, mode.label):
                return mode
        msg = f"Unknown matcher mode: {name!r}"
        raise ValueError(msg)


_LABELS: dict[MatcherMode, str] = {
    MatcherMode.SMART_CASE: "smart case",
    MatcherMode.CASE_SENSITIVE: "case sensitive",
    MatcherMode.CASE_INSENSITIVE: "case insensitive",
    MatcherMode.CASE_SENSITIVE_REGEX: "regular expression",
}


@dataclass(frozen=True)
class DocNode:
    """A single node in a rendered document tree.

    Structural nodes (paragraph, list_item, ...) carry children only;
    leaf nodes such as ``text`` or ``code_inline`` carry the literal text.
    """

    tag: str
    children: tuple["DocNode", ...] = ()
    text: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


@dataclass(frozen=True, order=True)
class Match:
    """One occurrence of the query inside a single text-bearing node.

    ``path`` is the tuple of child indices from the root to the node, and
    ``node_index`` the ordinal of that node among text-bearing nodes in
    document order. Ordering compares (node_index, offset) first.
    """

    node_index: int
    offset: int
    length: int
    path: tuple[int, ...] = ()

    @property
    def end(self) -> int:
        return self.offset + self.length
