"""Text rendering of a binary tree as boxed values joined by branch lines."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from bintree.node import Node


class _Canvas:
    """Rows of characters that grow to the right as cells are written."""

    def __init__(self, rows: int) -> None:
        self._rows: list[list[str]] = [[] for _ in range(rows)]

    def put(self, row: int, column: int, char: str) -> None:
        line = self._rows[row]
        if column >= len(line):
            line.extend(" " * (column + 1 - len(line)))
        line[column] = char

    def lines(self) -> list[str]:
        rendered = []
        for line in self._rows:
            text = "".join(line).rstrip(" ")
            # The first two columns are never trimmed.
            rendered.append(text.ljust(2) if len(text) < 2 else text)
        return rendered


def _height(tree: Node) -> int:
    left = 1 + _height(tree.left) if tree.left is not None else 0
    right = 1 + _height(tree.right) if tree.right is not None else 0
    return max(left, right)


def _draw(tree: Optional[Node], offset: int, depth: int, canvas: _Canvas) -> int:
    """Draw the subtree and return the number of columns it spans."""
    if tree is None:
        return 0
    is_left = tree.parent is not None and tree.parent.left is tree
    label = f"({tree.value:03d})"
    width = len(label)
    left = _draw(tree.left, offset, depth + 1, canvas)
    right = _draw(tree.right, offset + left + width, depth + 1, canvas)

    for i, char in enumerate(label):
        canvas.put(depth, offset + left + i, char)

    if depth:
        half = width // 2
        if is_left:
            for i in range(width + right):
                canvas.put(depth - 1, offset + left + half + i, "-")
        else:
            for i in range(left + width):
                canvas.put(depth - 1, offset - half + i, "-")
        canvas.put(depth - 1, offset + left + half, ".")

    return left + width + right


def format_tree(tree: Optional[Node]) -> str:
    """Return the drawing of the tree, one newline-terminated line per level."""
    if tree is None:
        return ""
    canvas = _Canvas(_height(tree) + 1)
    _draw(tree, 0, 0, canvas)
    return "".join(f"{line}\n" for line in canvas.lines())


def print_tree(tree: Optional[Node], file: Optional[TextIO] = None) -> None:
    """Write the drawing of the tree to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_tree(tree))