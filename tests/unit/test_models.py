import pytest

from preview_search.models.state import SearchState, StateKind
from preview_search.models.tree import DocNode, Match, MatcherMode


def test_matcher_mode_labels() -> None:
    assert [m.label for m in MatcherMode] == [
        "smart case",
        "case sensitive",
        "case insensitive",
        "regular expression",
    ]


@pytest.mark.parametrize("name", ["CaseSensitiveRegex", "regular expression"])
def test_matcher_mode_parse_accepts_value_or_label(name: str) -> None:
    assert MatcherMode.parse(name) is MatcherMode.CASE_SENSITIVE_REGEX


def test_matcher_mode_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unknown matcher mode"):
        MatcherMode.parse("Fuzzy")


def test_selected_state_rejects_out_of_range_position() -> None:
    with pytest.raises(ValueError):
        SearchState.selected(3, 3)
    with pytest.raises(ValueError):
        SearchState(StateKind.NO_MATCH, position=0)


def test_match_ordering_follows_document_order() -> None:
    a = Match(node_index=0, offset=6, length=5)
    b = Match(node_index=1, offset=0, length=5)
    assert a < b
    assert a.end == 11


def test_doc_node_with_attrs_is_hashable() -> None:
    node = DocNode(tag="fence", text="x = 1\n", attrs={"language": "python"})
    assert node in {node}
