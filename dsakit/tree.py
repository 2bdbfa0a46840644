"""Binary tree nodes, traversals and binary search tree operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(slots=True, eq=False)
class TreeNode:
    """A binary tree node holding one value and links to two children."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _preorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield node.data
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.data


def _inorder(node: Optional[TreeNode]) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.data
        yield from _inorder(node.right)


def preorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in root, left, right order."""
    return list(_preorder(root))


def postorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, right, root order."""
    return list(_postorder(root))


def inorder(root: Optional[TreeNode]) -> list[Any]:
    """Return values in left, root, right order."""
    return list(_inorder(root))


def is_bst(root: Optional[TreeNode]) -> bool:
    """Tell whether the in-order values are strictly increasing."""
    previous: Any = None
    first = True
    for value in _inorder(root):
        if not first and value <= previous:
            return False
        previous = value
        first = False
    return True


def search(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Find the node holding a key by walking down the tree; None if absent."""
    node = root
    while node is not None:
        if node.data == key:
            return node
        node = node.left if key < node.data else node.right
    return None


def search_recursive(root: Optional[TreeNode], key: Any) -> Optional[TreeNode]:
    """Find the node holding a key by recursion; None if absent."""
    if root is None:
        return None
    if root.data == key:
        return root
    if root.data < key:
        return search_recursive(root.right, key)
    return search_recursive(root.left, key)


def insert(root: Optional[TreeNode], key: Any) -> TreeNode:
    """Insert a key as a new leaf and return the root.

    Raises ValueError if the key is already in the tree.
    """
    new_node = TreeNode(key)
    if root is None:
        return new_node
    node = root
    while True:
        if key == node.data:
            raise ValueError(f"cannot insert because {key!r} already exists in BST")
        if key < node.data:
            if node.left is None:
                node.left = new_node
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = new_node
                return root
            node = node.right


def inorder_predecessor(root: TreeNode) -> TreeNode:
    """Return the rightmost node of the left subtree."""
    node = root.left
    if node is None:
        raise ValueError("node has no left subtree")
    while node.right is not None:
        node = node.right
    return node


def delete(root: Optional[TreeNode], value: Any) -> Optional[TreeNode]:
    """Remove a value from the tree and return the new root.

    A node with a left subtree takes its in-order predecessor's value.
    A tree without the value is returned unchanged.
    """
    if root is None:
        return None
    if value < root.data:
        root.left = delete(root.left, value)
    elif value > root.data:
        root.right = delete(root.right, value)
    elif root.left is None:
        return root.right
    else:
        predecessor = inorder_predecessor(root)
        root.data = predecessor.data
        root.left = delete(root.left, predecessor.data)
    return root