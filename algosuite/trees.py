"""Binary tree node and traversals, level views and whole-tree comparisons."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

_END = object()


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with None marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            pending.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            pending.append(node.right)
    return root


def _inorder(root: Optional[TreeNode]) -> Iterator[int]:
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def _preorder_nodes(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def _levels(root: Optional[TreeNode]) -> Iterator[list[int]]:
    if root is None:
        return
    queue = deque([root])
    while queue:
        level = []
        for _ in range(len(queue)):
            node = queue.popleft()
            level.append(node.val)
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield level


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in left, root, right order."""
    return list(_inorder(root))


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Return the values in root, left, right order."""
    return [node.val for node in _preorder_nodes(root)]


def _signature(root: Optional[TreeNode]) -> Iterator[int]:
    for node in _preorder_nodes(root):
        if node.left is None and node.right is not None:
            yield -1
        yield node.val


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Compare two trees by their preorder signature.

    The signature lists values in preorder, with -1 placed before a node that
    has a right child but no left one.
    """
    return list(_signature(p)) == list(_signature(q))


def level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the values level by level, top to bottom, each left to right."""
    return list(_levels(root))


def zigzag_level_order(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the levels top to bottom, alternating left-to-right and right-to-left."""
    return [
        level if depth % 2 == 0 else level[::-1]
        for depth, level in enumerate(_levels(root))
    ]


def level_order_bottom(root: Optional[TreeNode]) -> list[list[int]]:
    """Return the levels from the deepest up to the root."""
    return list(_levels(root))[::-1]


def max_depth(root: Optional[TreeNode]) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    return sum(1 for _ in _levels(root))


def right_side_view(root: Optional[TreeNode]) -> list[int]:
    """Return the rightmost value of each level, top to bottom."""
    return [level[-1] for level in _levels(root)]


def count_nodes(root: Optional[TreeNode]) -> int:
    """Return the number of nodes in the tree."""
    return sum(1 for _ in _preorder_nodes(root))


def _leaves(root: Optional[TreeNode]) -> list[int]:
    return [
        node.val
        for node in _preorder_nodes(root)
        if node.left is None and node.right is None
    ]


def leaf_similar(root1: Optional[TreeNode], root2: Optional[TreeNode]) -> bool:
    """Report whether both trees have the same leaf values from left to right."""
    return _leaves(root1) == _leaves(root2)