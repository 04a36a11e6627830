"""Tests for highlight marking, viewport visibility and the counter."""

import pytest

from preview_search.core.highlight.sync import (
    HighlightSync,
    Rect,
    Viewport,
    counter_text,
    is_in_viewport,
)
from preview_search.core.search.index import MatchIndex
from preview_search.core.search.navigation import search
from preview_search.models.state import SearchState
from preview_search.models.tree import DocNode, MatcherMode
from tests.unit.docs import document, paragraph
from tests.unit.fakes import FakePresentation

VIEWPORT = Viewport(width=800, height=600)


def test_rect_fully_inside_is_in_viewport() -> None:
    assert is_in_viewport(Rect(top=10, left=10, bottom=30, right=100), VIEWPORT)


def test_rect_touching_edges_is_in_viewport() -> None:
    assert is_in_viewport(Rect(top=0, left=0, bottom=600, right=800), VIEWPORT)


@pytest.mark.parametrize(
    "rect",
    [
        Rect(top=-1, left=10, bottom=19, right=100),
        Rect(top=10, left=-5, bottom=30, right=100),
        Rect(top=590, left=10, bottom=610, right=100),
        Rect(top=10, left=700, bottom=30, right=801),
    ],
)
def test_rect_crossing_any_edge_is_not_in_viewport(rect: Rect) -> None:
    assert not is_in_viewport(rect, VIEWPORT)


def test_counter_text_for_selection() -> None:
    assert counter_text(SearchState.selected(0, 2)) == "1 / 2"
    assert counter_text(SearchState.selected(1, 2)) == "2 / 2"


def test_counter_text_without_selection() -> None:
    assert counter_text(SearchState.empty()) == "0 / 0"
    assert counter_text(SearchState.no_match()) == "0 / 0"


def test_sync_marks_all_matches_and_current(
    hello_doc: DocNode, presentation: FakePresentation
) -> None:
    index, state = search(hello_doc, "world", MatcherMode.CASE_SENSITIVE)
    HighlightSync(presentation).sync(index, state)

    assert presentation.matches == tuple(index)
    assert presentation.current == index.at(0)
    assert presentation.counter == "1 / 2"


def test_sync_does_not_scroll_visible_match(
    hello_doc: DocNode, presentation: FakePresentation
) -> None:
    index, state = search(hello_doc, "world", MatcherMode.CASE_SENSITIVE)
    sync = HighlightSync(presentation)
    sync.sync(index, state)
    sync.sync(index, state)
    assert presentation.scrolled_to == []


def test_sync_scrolls_offscreen_match_once() -> None:
    tree = document(*(paragraph(f"line {i}") for i in range(100)), paragraph("needle"))
    presentation = FakePresentation(height=200)
    index, state = search(tree, "needle", MatcherMode.CASE_SENSITIVE)
    sync = HighlightSync(presentation)

    sync.sync(index, state)
    sync.sync(index, state)

    assert presentation.scrolled_to == [index.at(0)]


def test_sync_without_matches_clears_current(presentation: FakePresentation) -> None:
    HighlightSync(presentation).sync(MatchIndex(), SearchState.no_match())
    assert presentation.matches == ()
    assert presentation.current is None
    assert presentation.counter == "0 / 0"
    assert presentation.scrolled_to == []


def test_clear_removes_marks_and_counter(
    hello_doc: DocNode, presentation: FakePresentation
) -> None:
    index, state = search(hello_doc, "world", MatcherMode.CASE_SENSITIVE)
    sync = HighlightSync(presentation)
    sync.sync(index, state)
    sync.clear()
    assert presentation.matches == ()
    assert presentation.counter == ""
