from bintree.node import Node


def attach_left(parent, value):
    parent.left = Node(value, parent)
    return parent.left


def attach_right(parent, value):
    parent.right = Node(value, parent)
    return parent.right


def family_tree():
    root = Node(98)
    left = attach_left(root, 12)
    right = attach_right(root, 128)
    attach_right(left, 54)
    big = attach_right(right, 402)
    attach_left(left, 10)
    attach_left(right, 110)
    attach_left(big, 200)
    attach_right(big, 512)
    return root


def test_new_node_is_root_and_leaf():
    node = Node(98)
    assert node.value == 98
    assert node.is_root() is True
    assert node.is_leaf() is True
    assert node.depth() == 0


def test_node_with_parent_is_not_attached():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None and root.right is None
    assert child.is_root() is False
    assert child.sibling() is None


def test_insert_left_on_empty_side():
    root = Node(98)
    new = root.insert_left(54)
    assert root.left is new
    assert new.parent is root
    assert new.value == 54
    assert new.is_leaf()


def test_insert_left_pushes_old_child_down():
    root = Node(98)
    old = attach_left(root, 12)
    attach_right(root, 402)
    new = root.insert_left(54)
    assert root.left is new
    assert new.left is old
    assert old.parent is new
    assert new.right is None
    assert new.parent is root


def test_insert_right_pushes_old_child_down():
    root = Node(98)
    attach_left(root, 12)
    old = attach_right(root, 402)
    new = root.insert_right(128)
    assert root.right is new
    assert new.right is old
    assert old.parent is new
    assert new.left is None
    assert new.parent is root


def test_is_leaf_and_is_root():
    root = Node(98)
    attach_left(root, 12)
    attach_right(root, 402)
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.is_leaf() is False
    assert root.right.is_leaf() is False
    assert root.right.right.is_leaf() is True
    assert root.is_root() is True
    assert root.right.is_root() is False
    assert root.right.right.is_root() is False


def test_depth_grows_by_one_per_level():
    root = Node(98)
    attach_left(root, 12)
    attach_right(root, 402)
    root.left.insert_right(54)
    root.insert_right(128)
    assert root.depth() == 0
    assert root.right.depth() == root.depth() + 1
    assert root.left.right.depth() == root.left.depth() + 1
    assert root.right.right.depth() == root.right.depth() + 1


def test_sibling():
    root = family_tree()
    assert root.left.sibling().value == 128
    assert root.right.left.sibling().value == 402
    assert root.left.right.sibling().value == 10
    assert root.sibling() is None


def test_sibling_is_symmetric():
    root = family_tree()
    assert root.left.sibling() is root.right
    assert root.right.sibling() is root.left


def test_sibling_missing_when_only_child():
    root = Node(98)
    only = attach_left(root, 12)
    assert only.sibling() is None


def test_uncle():
    root = family_tree()
    assert root.right.left.uncle().value == 12
    assert root.left.right.uncle().value == 128
    assert root.left.uncle() is None
    assert root.uncle() is None


def test_uncle_is_sibling_of_parent():
    root = family_tree()
    node = root.right.right.left
    assert node.uncle() is node.parent.sibling()


def test_delete_subtree_detaches_from_parent():
    root = family_tree()
    left = root.left
    grandchild = left.left
    left.delete()
    assert root.left is None
    assert left.parent is None
    assert left.left is None and left.right is None
    assert grandchild.parent is None
    assert root.right is not None and root.right.value == 128


def test_delete_root_clears_all_links():
    root = family_tree()
    right = root.right
    deep = right.right.right
    root.delete()
    assert root.is_leaf() and root.is_root()
    assert right.is_leaf() and right.is_root()
    assert deep.is_root()