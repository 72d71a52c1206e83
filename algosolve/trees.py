"""Binary tree nodes and the algorithms that work on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    val: int = 0
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


_END = object()


def build_tree(values: Iterable[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order values, with None marking a missing child."""
    items = iter(values)
    first = next(items, None)
    if first is None:
        return None
    root = TreeNode(first)
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = next(items, _END)
        if left is _END:
            break
        if left is not None:
            node.left = TreeNode(left)
            queue.append(node.left)
        right = next(items, _END)
        if right is _END:
            break
        if right is not None:
            node.right = TreeNode(right)
            queue.append(node.right)
    return root


def _balanced_height(node: Optional[TreeNode]) -> Optional[int]:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return max(left, right) + 1


def is_balanced(root: Optional[TreeNode]) -> bool:
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


def inorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Inorder values using Morris traversal; the tree is left unchanged."""
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        pred = current.left
        while pred.right is not None and pred.right is not current:
            pred = pred.right
        if pred.right is None:
            pred.right = current
            current = current.left
        else:
            pred.right = None
            result.append(current.val)
            current = current.right
    return result


def preorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Preorder values using Morris traversal; the tree is left unchanged."""
    result = []
    current = root
    while current is not None:
        if current.left is None:
            result.append(current.val)
            current = current.right
            continue
        pred = current.left
        while pred.right is not None and pred.right is not current:
            pred = pred.right
        if pred.right is None:
            pred.right = current
            result.append(current.val)
            current = current.left
        else:
            pred.right = None
            current = current.right
    return result


def postorder_traversal(root: Optional[TreeNode]) -> list[int]:
    """Postorder values using mirrored Morris traversal; the tree is left unchanged."""
    result = []
    current = root
    while current is not None:
        if current.right is None:
            result.append(current.val)
            current = current.left
            continue
        pred = current.right
        while pred.left is not None and pred.left is not current:
            pred = pred.left
        if pred.left is None:
            result.append(current.val)
            pred.left = current
            current = current.right
        else:
            pred.left = None
            current = current.left
    result.reverse()
    return result


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced search tree from sorted values."""

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        mid = left + (right - left) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def _leaf_exists(root: TreeNode, index: int, height: int) -> bool:
    node: Optional[TreeNode] = root
    low, high = 0, (1 << height) - 1
    for _ in range(height):
        if node is None:
            return False
        mid = low + (high - low) // 2
        if index <= mid:
            node = node.left
            high = mid
        else:
            node = node.right
            low = mid + 1
    return node is not None


def count_nodes(root: Optional[TreeNode]) -> int:
    """Count the nodes of a complete binary tree in O(log^2 n)."""
    if root is None:
        return 0
    height = 0
    node = root
    while node.left is not None:
        height += 1
        node = node.left
    low, high = 0, (1 << height) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if _leaf_exists(root, mid, height):
            low = mid + 1
        else:
            high = mid - 1
    return (1 << height) - 1 + low


def invert_tree(root: Optional[TreeNode]) -> Optional[TreeNode]:
    """Mirror the tree in place and return its root."""
    if root is not None:
        root.left, root.right = invert_tree(root.right), invert_tree(root.left)
    return root


def max_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(max_depth(root.left), max_depth(root.right)) + 1


def min_depth(root: Optional[TreeNode]) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    queue = deque([(root, 1)])
    while queue:
        node, depth = queue.popleft()
        if node.left is None and node.right is None:
            return depth
        if node.left is not None:
            queue.append((node.left, depth + 1))
        if node.right is not None:
            queue.append((node.right, depth + 1))
    return 0


def has_path_sum(root: Optional[TreeNode], target_sum: int) -> bool:
    """Tell whether some root-to-leaf path adds up to ``target_sum``."""
    if root is None:
        return False
    if root.left is None and root.right is None:
        return root.val == target_sum
    remaining = target_sum - root.val
    return has_path_sum(root.left, remaining) or has_path_sum(root.right, remaining)


def is_same_tree(p: Optional[TreeNode], q: Optional[TreeNode]) -> bool:
    """Tell whether two trees have the same shape and values."""
    if p is None and q is None:
        return True
    if p is None or q is None or p.val != q.val:
        return False
    return is_same_tree(p.left, q.left) and is_same_tree(p.right, q.right)


def _mirrors(a: Optional[TreeNode], b: Optional[TreeNode]) -> bool:
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    return a.val == b.val and _mirrors(a.left, b.right) and _mirrors(a.right, b.left)


def is_symmetric(root: Optional[TreeNode]) -> bool:
    """Tell whether the tree is a mirror image of itself."""
    if root is None:
        return True
    return _mirrors(root.left, root.right)