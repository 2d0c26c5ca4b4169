"""Queries over binary trees: search-tree checks, root-to-leaf paths and ancestors."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Iterator, Optional, Sequence

from .trees import TreeNode, inorder_traversal


@dataclass(eq=False)
class LinkedTreeNode:
    """A binary tree node that also points at its right neighbour on the same level."""

    val: int = 0
    left: Optional[LinkedTreeNode] = None
    right: Optional[LinkedTreeNode] = None
    next: Optional[LinkedTreeNode] = None


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Report whether every node lies strictly between the bounds its ancestors set."""

    def within(node: Optional[TreeNode], low: Optional[int], high: Optional[int]) -> bool:
        if node is None:
            return True
        if (low is not None and node.val <= low) or (high is not None and node.val >= high):
            return False
        return within(node.left, low, node.val) and within(node.right, node.val, high)

    return within(root, None, None)


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values, rooting each part at its middle."""

    def build(low: int, high: int) -> Optional[TreeNode]:
        if low > high:
            return None
        mid = (low + high) // 2
        return TreeNode(nums[mid], build(low, mid - 1), build(mid + 1, high))

    return build(0, len(nums) - 1)


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def _root_to_leaf_paths(root: Optional[TreeNode]) -> Iterator[list[int]]:
    """Yield the value path to every leaf, leaves taken left to right."""
    if root is None:
        return
    path: list[int] = []

    def walk(node: Optional[TreeNode]) -> Iterator[list[int]]:
        if node is None:
            return
        path.append(node.val)
        if _is_leaf(node):
            yield list(path)
        yield from walk(node.left)
        yield from walk(node.right)
        path.pop()

    yield from walk(root)


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Report whether some root-to-leaf path adds up to ``target_sum``."""
    return any(sum(path) == target_sum for path in _root_to_leaf_paths(root))


def path_sum(root: Optional[TreeNode], target_sum: int) -> list[list[int]]:
    """Return every root-to-leaf path whose values add up to ``target_sum``."""
    return [path for path in _root_to_leaf_paths(root) if sum(path) == target_sum]


def connect(root: Optional[LinkedTreeNode]) -> Optional[LinkedTreeNode]:
    """Point each node of a perfect binary tree at its right neighbour; return the root.

    Raises ValueError when a node has a left child but no right one.
    """
    leftmost = root
    while leftmost is not None and leftmost.left is not None:
        node: Optional[LinkedTreeNode] = leftmost
        while node is not None:
            if node.left is not None:
                if node.right is None:
                    raise ValueError("tree is not perfect")
                node.left.next = node.right
                if node.next is not None:
                    node.right.next = node.next.left
            node = node.next
        leftmost = leftmost.left
    return root


def sum_numbers(root: Optional[TreeNode]) -> int:
    """Sum the numbers spelled by the digits along each root-to-leaf path."""
    total = 0
    for path in _root_to_leaf_paths(root):
        number = 0
        for digit in path:
            number = number * 10 + digit
        total += number
    return total


def lowest_common_ancestor_bst(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node of a search tree whose value splits ``p`` and ``q``."""
    node = root
    while node is not None:
        if p.val < node.val and q.val < node.val:
            node = node.left
        elif p.val > node.val and q.val > node.val:
            node = node.right
        else:
            return node
    return None


def lowest_common_ancestor(
    root: Optional[TreeNode], p: TreeNode, q: TreeNode
) -> Optional[TreeNode]:
    """Return the lowest node having both ``p`` and ``q`` (by identity) beneath or at it."""
    if root is None or root is p or root is q:
        return root
    left = lowest_common_ancestor(root.left, p, q)
    right = lowest_common_ancestor(root.right, p, q)
    if left is not None and right is not None:
        return root
    return left if left is not None else right


def binary_tree_paths(root: Optional[TreeNode]) -> list[str]:
    """Return each root-to-leaf path written as values joined by ``->``."""
    return ["->".join(map(str, path)) for path in _root_to_leaf_paths(root)]


def sum_of_left_leaves(root: Optional[TreeNode]) -> int:
    """Sum the values of leaves that are the left child of their parent."""
    total = 0
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        if node.left is not None:
            if _is_leaf(node.left):
                total += node.left.val
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return total


def find_mode(root: Optional[TreeNode]) -> list[int]:
    """Return the values of the longest runs of equal values in inorder, in order."""
    runs = [(value, sum(1 for _ in group)) for value, group in groupby(inorder_traversal(root))]
    if not runs:
        return []
    longest = max(count for _, count in runs)
    return [value for value, count in runs if count == longest]


def smallest_from_leaf(root: Optional[TreeNode]) -> str:
    """Return the smallest leaf-to-root string, each value read as a letter from ``a``."""
    words = (
        "".join(chr(ord("a") + value) for value in reversed(path))
        for path in _root_to_leaf_paths(root)
    )
    return min(words, default="")