"""Tests for the match index and position re-seeding."""

import pytest

from preview_search.core.search.index import MatchIndex
from preview_search.models.tree import DocNode, Match, MatcherMode


def _index(total: int) -> MatchIndex:
    return MatchIndex([Match(node_index=i, offset=0, length=1, path=(i,)) for i in range(total)])


def test_build_collects_matches(hello_doc: DocNode) -> None:
    index = MatchIndex.build(hello_doc, "world", MatcherMode.CASE_SENSITIVE)
    assert index.total() == 2
    assert index.at(0).offset == 6
    assert index.at(1).node_index == 1


def test_build_with_empty_query_is_empty(hello_doc: DocNode) -> None:
    assert MatchIndex.build(hello_doc, "", MatcherMode.CASE_SENSITIVE).total() == 0


def test_build_with_invalid_regex_is_empty(hello_doc: DocNode) -> None:
    assert MatchIndex.build(hello_doc, "(", MatcherMode.CASE_SENSITIVE_REGEX).total() == 0


@pytest.mark.parametrize("i", [-1, 3])
def test_at_rejects_out_of_range(i: int) -> None:
    with pytest.raises(IndexError):
        _index(3).at(i)


def test_position_for_keeps_position_when_in_range() -> None:
    assert _index(5).position_for(2) == 2


def test_position_for_clamps_to_new_total() -> None:
    assert _index(3).position_for(4) == 2


def test_position_for_none_previous_is_none() -> None:
    assert _index(3).position_for(None) is None


def test_position_for_empty_index_is_none() -> None:
    assert _index(0).position_for(1) is None


def test_matches_in_filters_by_node_path(mixed_case_doc: DocNode) -> None:
    index = MatchIndex.build(mixed_case_doc, "ab", MatcherMode.CASE_INSENSITIVE)
    assert [m.offset for m in index.matches_in((0, 1))] == [0, 3]
