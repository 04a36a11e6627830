"""Configuration constants for preview-search."""

from preview_search.models.tree import MatcherMode

# Matcher used when the overlay opens for the first time.
DEFAULT_MATCHER: MatcherMode = MatcherMode.SMART_CASE

# Order of the entries in the matcher menu.
MATCHER_MENU: tuple[MatcherMode, ...] = (
    MatcherMode.SMART_CASE,
    MatcherMode.CASE_SENSITIVE,
    MatcherMode.CASE_INSENSITIVE,
    MatcherMode.CASE_SENSITIVE_REGEX,
)

# CSS-style classes handed to the presentation layer.
MATCH_CLASS: str = "search-text"
CURRENT_CLASS: str = "search-text-current"

# Seconds to wait after the last keystroke before re-running a search,
# used only when a debounced policy is selected.
DEBOUNCE_DELAY: float = 0.25

# Rows shown by the terminal browser when --height is not given.
TERMINAL_VIEWPORT_HEIGHT: int = 10
TERMINAL_VIEWPORT_WIDTH: int = 100
