"""Binary tree node with parent links."""

from __future__ import annotations

from typing import Iterator, Optional


class Node:
    """A binary tree node holding an integer value.

    Creating a node with a parent only records the parent; attaching the
    node as one of the parent's children is up to the caller.
    """

    __slots__ = ("value", "parent", "left", "right")

    def __init__(self, value: int, parent: Optional[Node] = None) -> None:
        self.value = value
        self.parent = parent
        self.left: Optional[Node] = None
        self.right: Optional[Node] = None

    def __repr__(self) -> str:
        return f"Node({self.value!r})"

    def insert_left(self, value: int) -> Node:
        """Insert a new left child; any existing left child moves under it."""
        node = Node(value, self)
        if self.left is not None:
            node.left = self.left
            self.left.parent = node
        self.left = node
        return node

    def insert_right(self, value: int) -> Node:
        """Insert a new right child; any existing right child moves under it."""
        node = Node(value, self)
        if self.right is not None:
            node.right = self.right
            self.right.parent = node
        self.right = node
        return node

    def _subtree(self) -> Iterator[Node]:
        pending = [self]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(child for child in (node.left, node.right) if child)

    def delete(self) -> None:
        """Dismantle the subtree rooted here and detach it from its parent."""
        parent = self.parent
        if parent is not None:
            if parent.left is self:
                parent.left = None
            elif parent.right is self:
                parent.right = None
        for node in list(self._subtree()):
            node.left = None
            node.right = None
            node.parent = None

    def is_leaf(self) -> bool:
        """Return True if the node has no children."""
        return self.left is None and self.right is None

    def is_root(self) -> bool:
        """Return True if the node has no parent."""
        return self.parent is None

    def depth(self) -> int:
        """Return the number of edges from this node up to the root."""
        count = 0
        node = self.parent
        while node is not None:
            count += 1
            node = node.parent
        return count

    def sibling(self) -> Optional[Node]:
        """Return the other child of this node's parent, if any."""
        parent = self.parent
        if parent is None:
            return None
        if parent.left is self:
            return parent.right
        if parent.right is self:
            return parent.left
        return None

    def uncle(self) -> Optional[Node]:
        """Return the sibling of this node's parent, if any."""
        parent = self.parent
        if parent is None or parent.parent is None:
            return None
        grandparent = parent.parent
        if grandparent.right is parent:
            return grandparent.left
        if grandparent.left is parent:
            return grandparent.right
        return None