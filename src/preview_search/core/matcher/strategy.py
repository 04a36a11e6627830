"""Compile a query under a matcher mode and find its spans in text."""

import re
from dataclasses import dataclass

from loguru import logger

from preview_search.models.tree import MatcherMode


class InvalidPatternError(ValueError):
    """Raised when a regular-expression query does not compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"Invalid pattern {pattern!r}: {reason}")


@dataclass(frozen=True)
class CompiledMatcher:
    """A query compiled for one matcher mode.

    ``regex`` is set for regex and case-insensitive modes; ``needle`` for
    exact literal search.
    """

    query: str
    mode: MatcherMode
    needle: str | None = None
    regex: re.Pattern[str] | None = None


class _NoMatcher:
    """Sentinel matcher that finds nothing (empty query, broken pattern)."""

    def __repr__(self) -> str:
        return "NO_MATCHER"

    def __bool__(self) -> bool:
        return False


NO_MATCHER = _NoMatcher()

# What the tree walker consumes: a compiled matcher or the sentinel.
Matcher = CompiledMatcher | _NoMatcher


def _is_case_sensitive(query: str, mode: MatcherMode) -> bool:
    if mode is MatcherMode.SMART_CASE:
        return any(c.isupper() for c in query)
    return mode is not MatcherMode.CASE_INSENSITIVE


def compile_matcher(query: str, mode: MatcherMode) -> CompiledMatcher:
    """Compile ``query`` for ``mode``.

    Smart case is resolved here, once: a query with any upper-case letter
    is matched case-sensitively, otherwise case-insensitively.

    Raises:
        InvalidPatternError: The query is not a valid regular expression
            under ``CASE_SENSITIVE_REGEX``.
    """
    if mode is MatcherMode.CASE_SENSITIVE_REGEX:
        try:
            return CompiledMatcher(query=query, mode=mode, regex=re.compile(query))
        except (re.error, OverflowError, RecursionError) as exc:
            raise InvalidPatternError(query, str(exc)) from exc

    if _is_case_sensitive(query, mode):
        return CompiledMatcher(query=query, mode=mode, needle=query)
    regex = re.compile(re.escape(query), re.IGNORECASE)
    return CompiledMatcher(query=query, mode=mode, regex=regex)


def try_compile(query: str, mode: MatcherMode) -> Matcher:
    """Compile ``query``, returning ``NO_MATCHER`` instead of failing.

    An empty query and a malformed pattern both yield ``NO_MATCHER`` so
    the overlay keeps working while the user is still typing.
    """
    if not query:
        return NO_MATCHER
    try:
        return compile_matcher(query, mode)
    except InvalidPatternError as exc:
        logger.debug("Ignoring incomplete pattern: {}", exc)
        return NO_MATCHER


def find(matcher: Matcher, text: str) -> list[tuple[int, int]]:
    """Return non-overlapping ``(offset, length)`` spans of ``matcher`` in ``text``.

    Scanning is leftmost-first and resumes at the end of the previous
    match. Empty regex matches are skipped.
    """
    if not isinstance(matcher, CompiledMatcher) or not text:
        return []

    spans: list[tuple[int, int]] = []
    if matcher.needle is not None:
        size = len(matcher.needle)
        if not size:
            return spans
        start = text.find(matcher.needle)
        while start != -1:
            spans.append((start, size))
            start = text.find(matcher.needle, start + size)
        return spans

    if matcher.regex is None:
        return spans
    for m in matcher.regex.finditer(text):
        if m.end() > m.start():
            spans.append((m.start(), m.end() - m.start()))
    return spans
