# bintree

Linked binary tree nodes, plus the usual helpers you need around them:
walking the tree, measuring it, and drawing it as ASCII art.

It is a library only; it has no command-line program.

## Installation

```
pip install .
```

## Building a tree

Every `Node` (in `bintree.node`) holds an integer `value` and links to its
`parent`, its `left` child and its `right` child.

```python
from bintree.node import Node

root = Node(98)
root.left = Node(12, root)
root.right = Node(402, root)

root.left.insert_right(54)
root.insert_right(128)   # the old right child (402) moves under 128
```

`Node(value, parent)` only records the parent; attaching the new node as
one of the parent's children is up to you.

`insert_left(value)` and `insert_right(value)` create a new node, put it
in that child position and return it. A child already in that place
becomes the matching child of the new node.

Relationships and position:

```python
root.is_root()            # True
root.right.is_leaf()      # False (128 has 402 as its right child)
root.left.right.depth()   # 2
root.left.sibling()       # the node holding 128
root.left.right.uncle()   # the node holding 128
```

`sibling()` and `uncle()` return `None` when there is no such node.
`delete()` detaches a node from its parent and unlinks every node of its
subtree.

## Traversals

`preorder`, `inorder` and `postorder` (in `bintree.traversal`) are
generators that yield a tree's values in the stated order. An empty tree
(`None`) yields nothing.

```python
from bintree.traversal import preorder, inorder, postorder

list(preorder(root))    # [98, 12, 54, 128, 402]
list(inorder(root))     # [12, 54, 98, 128, 402]
list(postorder(root))   # [54, 12, 402, 128, 98]
```

## Measures

```python
from bintree.measures import (
    height, size, leaves, inner_nodes, balance, is_full, is_perfect,
)

height(root)       # edges on the longest path down from the root; 0 for a leaf
size(root)         # number of nodes
leaves(root)       # nodes without children
inner_nodes(root)  # nodes with at least one child
balance(root)      # levels in the left subtree minus levels in the right
is_full(root)      # every node has zero or two children
is_perfect(root)   # full, with all leaves at the same depth
```

For an empty tree (`None`) the counts, the height and the balance are `0`,
and `is_full` and `is_perfect` are `False`.

## Printing

```python
from bintree.printer import format_tree, print_tree

print_tree(root)
```

This draws each value as `(nnn)`, one tree level per line:

```
  .-------(098)--.
(012)--.       (128)--.
     (054)          (402)
```

`format_tree(root)` returns the same drawing as a string, each line ending
in a newline; for `None` it returns an empty string. `print_tree` also
takes a `file` to write to in place of standard output.