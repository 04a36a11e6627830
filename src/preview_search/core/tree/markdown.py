"""Render markdown source into a searchable document tree."""

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from preview_search.models.tree import DocNode

# Leaf token types whose content is shown verbatim in the preview. Raw HTML
# renders as elements, so its source is not searchable.
_TEXT_TYPES = frozenset({"text", "code_inline", "code_block", "fence"})


def _make_parser() -> MarkdownIt:
    return MarkdownIt("commonmark", {"html": True}).enable("table").enable("strikethrough")


_PARSER = _make_parser()


def _convert(node: SyntaxTreeNode) -> DocNode:
    if node.is_root:
        return DocNode(tag="root", children=tuple(_convert(c) for c in node.children))

    attrs: dict[str, object] = {}
    if node.type == "heading":
        attrs["level"] = int(node.tag[1:])
    elif node.type == "fence" and node.info:
        attrs["language"] = node.info.split(maxsplit=1)[0]
    elif node.type == "link":
        attrs["href"] = node.attrs.get("href", "")

    text = node.content if node.type in _TEXT_TYPES else None
    return DocNode(
        tag=node.type,
        children=tuple(_convert(c) for c in node.children),
        text=text,
        attrs=attrs,
    )


def parse_markdown(source: str) -> DocNode:
    """Parse markdown into a ``DocNode`` tree rooted at a ``root`` node.

    Structural nodes are tagged with the markdown-it token type
    (``paragraph``, ``heading``, ``bullet_list``, ...). Leaf nodes of type
    ``text``, ``code_inline``, ``fence`` and the like carry their literal
    content in ``text``.
    """
    return _convert(SyntaxTreeNode(_PARSER.parse(source)))
