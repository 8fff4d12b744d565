"""Measurements and shape checks on binary trees."""

from __future__ import annotations

from typing import Optional

from bintree.node import Node


def height(tree: Optional[Node]) -> int:
    """Return the number of edges on the longest downward path; 0 for None or a leaf."""
    if tree is None or tree.is_leaf():
        return 0
    return 1 + max(height(tree.left), height(tree.right))


def _levels(tree: Optional[Node]) -> int:
    """Return the number of nodes on the longest downward path."""
    if tree is None:
        return 0
    return 1 + max(_levels(tree.left), _levels(tree.right))


def size(tree: Optional[Node]) -> int:
    """Return the number of nodes in the tree."""
    if tree is None:
        return 0
    return 1 + size(tree.left) + size(tree.right)


def leaves(tree: Optional[Node]) -> int:
    """Return the number of nodes without children."""
    if tree is None:
        return 0
    if tree.is_leaf():
        return 1
    return leaves(tree.left) + leaves(tree.right)


def inner_nodes(tree: Optional[Node]) -> int:
    """Return the number of nodes with at least one child."""
    if tree is None:
        return 0
    own = 0 if tree.is_leaf() else 1
    return own + inner_nodes(tree.left) + inner_nodes(tree.right)


def balance(tree: Optional[Node]) -> int:
    """Return the left subtree's height minus the right subtree's."""
    if tree is None:
        return 0
    return _levels(tree.left) - _levels(tree.right)


def is_full(tree: Optional[Node]) -> bool:
    """Return True if every node has either zero or two children."""
    if tree is None:
        return False
    if tree.is_leaf():
        return True
    if tree.left is not None and tree.right is not None:
        return is_full(tree.left) and is_full(tree.right)
    return False


def _is_perfect_at(tree: Optional[Node], level: int, leaf_level: int) -> bool:
    if tree is None:
        return True
    if tree.is_leaf():
        return level == leaf_level
    if tree.left is not None and tree.right is not None:
        return _is_perfect_at(tree.left, level + 1, leaf_level) and _is_perfect_at(
            tree.right, level + 1, leaf_level
        )
    return False


def is_perfect(tree: Optional[Node]) -> bool:
    """Return True if the tree is full and all leaves sit on the same level."""
    if tree is None:
        return False
    return _is_perfect_at(tree, 0, _levels(tree) - 1)