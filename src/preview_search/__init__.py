"""Find-in-page search and match navigation for rendered markdown previews."""

from preview_search.core.highlight.sync import HighlightSync, counter_text, is_in_viewport
from preview_search.core.matcher.strategy import (
    NO_MATCHER,
    CompiledMatcher,
    InvalidPatternError,
    compile_matcher,
    find,
    try_compile,
)
from preview_search.core.search.index import MatchIndex
from preview_search.core.search.navigation import NavigationController, search, step
from preview_search.core.tree.markdown import parse_markdown
from preview_search.core.tree.walker import walk
from preview_search.models.state import Direction, SearchState, StateKind
from preview_search.models.tree import DocNode, Match, MatcherMode
from preview_search.overlay import SearchOverlay
from preview_search.protocols import DocumentNodeProtocol, PresentationProtocol

__all__ = [
    "NO_MATCHER",
    "CompiledMatcher",
    "Direction",
    "DocNode",
    "DocumentNodeProtocol",
    "HighlightSync",
    "InvalidPatternError",
    "Match",
    "MatchIndex",
    "MatcherMode",
    "NavigationController",
    "PresentationProtocol",
    "SearchOverlay",
    "SearchState",
    "StateKind",
    "compile_matcher",
    "counter_text",
    "find",
    "is_in_viewport",
    "parse_markdown",
    "search",
    "step",
    "try_compile",
    "walk",
]
