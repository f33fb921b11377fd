"""Orphan comment placement.

Orphan comments sit among a parent's children by source position instead of
being attached to the node they precede. These helpers decide, for a node
about to be printed, which of its parent's orphan comments go right before it,
and which trail after the parent's last ordinary child. They only select; the
backend prints.

A parent's children are sorted once into a `Siblings` context; every lookup
against it is by identity.
"""

from __future__ import annotations

from javaconv.ast import Comment, Node
from javaconv.backend.util import RenderError


class CommentPlacementError(RenderError):
    """A node is missing from its own sibling list, or a non-comment sits where a comment must."""


class Siblings:
    """All children of `parent`, comments included, in begin-position order."""

    def __init__(self, parent: Node) -> None:
        self.parent = parent
        self.nodes: list[Node] = sorted(parent.children(), key=Node.sort_key)
        self._index: dict[int, int] = {id(n): i for i, n in enumerate(self.nodes)}

    def index_of(self, node: Node) -> int:
        i = self._index.get(id(node))
        if i is None or self.nodes[i] is not node:
            raise CommentPlacementError(
                f"{type(node).__name__} not found among the {len(self.nodes)} "
                f"children of {type(self.parent).__name__}"
            )
        return i


def comments_before(node: Node, siblings: Siblings | None) -> list[Comment]:
    """Orphan comments between the previous ordinary sibling and `node`."""
    if isinstance(node, Comment) or siblings is None:
        return []
    nodes = siblings.nodes
    index = siblings.index_of(node)
    previous = index - 1
    while previous >= 0 and isinstance(nodes[previous], Comment):
        previous -= 1
    result: list[Comment] = []
    for i in range(previous + 1, index):
        sibling = nodes[i]
        if not isinstance(sibling, Comment):
            raise CommentPlacementError(
                f"expected comment at position {i}, found {type(sibling).__name__} "
                f"(previous sibling at {previous}, node at {index})"
            )
        result.append(sibling)
    return result


def trailing_comments(siblings: Siblings) -> list[Comment]:
    """The run of comments after the last ordinary child, in order."""
    nodes = siblings.nodes
    start = len(nodes)
    while start > 0 and isinstance(nodes[start - 1], Comment):
        start -= 1
    result: list[Comment] = []
    for sibling in nodes[start:]:
        if not isinstance(sibling, Comment):
            raise CommentPlacementError(
                f"expected trailing comment, found {type(sibling).__name__}"
            )
        result.append(sibling)
    return result
