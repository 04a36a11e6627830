"""Pre-order traversal of a document tree, matching each text node."""

from collections.abc import Iterator

from preview_search.core.matcher.strategy import CompiledMatcher, Matcher, find
from preview_search.models.tree import Match
from preview_search.protocols import DocumentNodeProtocol


def iter_text_nodes(
    tree: DocumentNodeProtocol,
) -> Iterator[tuple[tuple[int, ...], DocumentNodeProtocol]]:
    """Yield ``(path, node)`` for every node carrying non-empty text.

    Nodes are visited in document order (pre-order, depth-first). The
    root's path is ``()``.
    """
    # Children are pushed reversed so they pop in document order.
    todo: list[tuple[tuple[int, ...], DocumentNodeProtocol]] = [((), tree)]
    while todo:
        path, node = todo.pop()
        if node.text:
            yield path, node
        children = node.children
        todo.extend((path + (i,), children[i]) for i in reversed(range(len(children))))


def walk(tree: DocumentNodeProtocol, matcher: Matcher) -> tuple[Match, ...]:
    """Find all matches of ``matcher`` in ``tree``, in document order.

    Every text node is matched on its own: a match never spans two nodes.
    """
    if not isinstance(matcher, CompiledMatcher):
        return ()

    matches: list[Match] = []
    for node_index, (path, node) in enumerate(iter_text_nodes(tree)):
        for offset, length in find(matcher, node.text or ""):
            matches.append(Match(node_index=node_index, offset=offset, length=length, path=path))
    return tuple(matches)


def node_at(tree: DocumentNodeProtocol, path: tuple[int, ...]) -> DocumentNodeProtocol:
    """Return the node reached by following ``path`` from ``tree``."""
    node = tree
    for i in path:
        node = node.children[i]
    return node
