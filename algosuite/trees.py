"""Binary tree construction, inspection and validation."""

from __future__ import annotations

from collections import Counter, deque
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

_MISSING = object()


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree holding an integer value."""

    val: int = 0
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def tree_from_level_order(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from a level-order listing where ``None`` marks a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    pending = deque([root])
    while pending:
        node = pending.popleft()
        left_value = next(items, _MISSING)
        if left_value is _MISSING:
            break
        if left_value is not None:
            node.left = TreeNode(left_value)
            pending.append(node.left)
        right_value = next(items, _MISSING)
        if right_value is _MISSING:
            break
        if right_value is not None:
            node.right = TreeNode(right_value)
            pending.append(node.right)
    return root


def _preorder(root: Optional[TreeNode]) -> Iterator[TreeNode]:
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)


def is_valid_bst(root: Optional[TreeNode]) -> bool:
    """Return True if every node is strictly between the bounds set by its ancestors."""
    stack = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if low is not None and node.val <= low:
            return False
        if high is not None and node.val >= high:
            return False
        stack.append((node.left, low, node.val))
        stack.append((node.right, node.val, high))
    return True


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Return True if both trees have the same shape and values."""
    stack = [(p, q)]
    while stack:
        a, b = stack.pop()
        if a is None and b is None:
            continue
        if a is None or b is None or a.val != b.val:
            return False
        stack.append((a.left, b.left))
        stack.append((a.right, b.right))
    return True


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    depth = 0
    level = [root] if root is not None else []
    while level:
        depth += 1
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return depth


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from a sorted sequence."""

    def build(begin: int, end: int) -> Optional[TreeNode]:
        if begin > end:
            return None
        mid = (begin + end) // 2
        return TreeNode(nums[mid], build(begin, mid - 1), build(mid + 1, end))

    return build(0, len(nums) - 1)


def find_mode(root: Optional[TreeNode]) -> List[int]:
    """Values occurring most often in the tree, in order of first visit."""
    counter = Counter(node.val for node in _preorder(root))
    if not counter:
        return []
    highest = max(counter.values())
    return [value for value, count in counter.items() if count == highest]


def largest_values(root: Optional[TreeNode]) -> List[int]:
    """Largest value on each level of the tree, from the root down."""
    result = []
    level = [root] if root is not None else []
    while level:
        result.append(max(node.val for node in level))
        level = [child for node in level for child in (node.left, node.right) if child is not None]
    return result


def tree_to_str(root: Optional[TreeNode]) -> str:
    """Render the tree in preorder with parentheses, omitting needless empty pairs."""
    parts: List[str] = []

    def visit(node: Optional[TreeNode]) -> None:
        if node is None:
            return
        parts.append(str(node.val))
        if node.left is not None or node.right is not None:
            parts.append("(")
            visit(node.left)
            parts.append(")")
        if node.right is not None:
            parts.append("(")
            visit(node.right)
            parts.append(")")

    visit(root)
    return "".join(parts)


def inorder_traversal(root: Optional[TreeNode]) -> List[int]:
    """Values of the tree in left-root-right order."""
    result = []
    stack: List[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        result.append(node.val)
        node = node.right
    return result


def validate_binary_tree_nodes(n: int, left_child: Sequence[int], right_child: Sequence[int]) -> bool:
    """Return True if the child arrays describe exactly one binary tree over nodes 0..n-1."""
    in_degree = [0] * n
    for left, right in zip(left_child, right_child):
        for child in (left, right):
            if child == -1:
                continue
            if in_degree[child] == 1:
                return False
            in_degree[child] += 1

    roots = [node for node in range(len(left_child)) if in_degree[node] == 0]
    if len(roots) != 1:
        return False

    visited = 0
    stack = [roots[0]]
    while stack:
        node = stack.pop()
        if node == -1:
            continue
        visited += 1
        stack.append(left_child[node])
        stack.append(right_child[node])
    return visited == n