"""Binary trees: serialisation, traversal and in-place transformations."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def _levels(root: Optional[TreeNode]) -> Iterator[list[TreeNode]]:
    level = [root] if root is not None else []
    while level:
        yield level
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]


class Codec:
    """Encodes a tree as comma-terminated level-order values with ``null`` gaps."""

    def serialize(self, root: Optional[TreeNode]) -> str:
        if root is None:
            return ""
        parts = []
        queue: deque[Optional[TreeNode]] = deque([root])
        while queue:
            node = queue.popleft()
            if node is None:
                parts.append("null,")
            else:
                parts.append(f"{node.val},")
                queue.append(node.left)
                queue.append(node.right)
        return "".join(parts)

    def deserialize(self, data: str) -> Optional[TreeNode]:
        if data == "":
            return None
        tokens = data.split(",")
        if tokens[-1] == "":
            tokens.pop()
        items = iter(tokens)

        def take() -> Optional[TreeNode]:
            try:
                token = next(items)
            except StopIteration:
                raise ValueError("encoded tree is truncated") from None
            return None if token == "null" else TreeNode(int(token))

        root = TreeNode(int(next(items)))
        queue = deque([root])
        while queue:
            node = queue.popleft()
            node.left = take()
            if node.left is not None:
                queue.append(node.left)
            node.right = take()
            if node.right is not None:
                queue.append(node.right)
        return root


class FindElements:
    """Recovers a contaminated tree (root 0, children 2x+1 and 2x+2) and answers lookups."""

    def __init__(self, root: Optional[TreeNode]) -> None:
        self._values: set[int] = set()
        stack = [(root, 0)]
        while stack:
            node, value = stack.pop()
            if node is None:
                continue
            node.val = value
            self._values.add(value)
            stack.append((node.left, 2 * value + 1))
            stack.append((node.right, 2 * value + 2))

    def find(self, target: int) -> bool:
        return target in self._values


def bst_to_gst(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Replace every value with the sum of all values not smaller, in place."""
    total = 0
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        total += node.val
        node.val = total
        node = node.left
    return root


def deepest_leaves_sum(root: Optional[TreeNode]) -> int:
    """Sum of the values on the deepest level."""
    last: list[TreeNode] = []
    for level in _levels(root):
        last = level
    return sum(node.val for node in last)


def sum_even_grandparent(root: Optional[TreeNode]) -> int:
    """Sum of values of nodes whose grandparent holds an even value."""
    total = 0
    stack = [(root, None, None)]
    while stack:
        node, parent, grandparent = stack.pop()
        if node is None:
            continue
        if grandparent is not None and grandparent.val % 2 == 0:
            total += node.val
        stack.append((node.left, node, parent))
        stack.append((node.right, node, parent))
    return total


def good_nodes(root: Optional[TreeNode]) -> int:
    """Count nodes not smaller than any value on the path from the root."""
    if root is None:
        return 0
    count = 0
    stack = [(root, root.val)]
    while stack:
        node, best = stack.pop()
        if node is None:
            continue
        if node.val >= best:
            count += 1
            best = node.val
        stack.append((node.left, best))
        stack.append((node.right, best))
    return count


def _truncating_average(total: int, size: int) -> int:
    quotient = abs(total) // size
    return quotient if total >= 0 else -quotient


def average_of_subtree(root: Optional[TreeNode]) -> int:
    """Count nodes equal to the truncated average of their subtree."""
    matches = 0

    def visit(node: Optional[TreeNode]) -> tuple[int, int]:
        nonlocal matches
        if node is None:
            return 0, 0
        left_sum, left_size = visit(node.left)
        right_sum, right_size = visit(node.right)
        total = left_sum + right_sum + node.val
        size = left_size + right_size + 1
        if _truncating_average(total, size) == node.val:
            matches += 1
        return total, size

    visit(root)
    return matches


def reverse_odd_levels(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Reverse the order of values on every odd depth, in place."""
    for depth, level in enumerate(_levels(root)):
        if depth % 2 == 1:
            values = [node.val for node in level]
            for node, value in zip(level, reversed(values)):
                node.val = value
    return root