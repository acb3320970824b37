"""Traversals and transformations of a binary tree: pre-order, level order, mirror, minimum."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque

from treegraph.tree import BTNode, build_tree, read_items, render_tree

_LIST_PROMPT = (
    "Enter a list of numbers for a Binary Tree, terminated by any non-digit character: "
)
_RULE = "-" * 63


def preorder_iterative(root: BTNode | None) -> list[int]:
    """Return the items in pre-order (node, left subtree, right subtree)."""
    order: list[int] = []
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        order.append(node.item)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return order


def level_order(root: BTNode | None) -> list[int]:
    """Return the items level by level, left to right within each level."""
    order: list[int] = []
    queue = deque([root] if root is not None else [])
    while queue:
        node = queue.popleft()
        order.append(node.item)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return order


def mirror_tree(root: BTNode | None) -> BTNode | None:
    """Swap the children of every node in place and return the same root."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)
    return root


def smallest_value(root: BTNode | None) -> int:
    """Return the smallest item of a non-empty tree.

    A subtree minimum wins only when it is strictly below both the node's
    item and the other subtree's minimum; when the two subtree minima tie,
    the node's own item is returned.
    """
    if root is None:
        raise ValueError("an empty tree has no smallest value")

    def smallest(node: BTNode) -> int:
        left = smallest(node.left) if node.left is not None else node.item
        right = smallest(node.right) if node.right is not None else node.item
        if left < node.item and left < right:
            return left
        if right < node.item and right < left:
            return right
        return node.item

    return smallest(root)


def main(argv: list[str] | None = None) -> int:
    """Build a tree from standard input and run one traversal or transformation on it."""
    parser = argparse.ArgumentParser(
        prog="treegraph-traverse",
        description="Traverse or transform a binary tree read from standard input.",
    )
    parser.add_argument("operation", choices=("preorder", "level", "mirror", "smallest"))
    parser.add_argument("--seed", type=int, default=None, help="seed for tree shape")
    args = parser.parse_args(argv)

    print(_LIST_PROMPT)
    items, _ = read_items(sys.stdin.read())
    root = build_tree(items, random.Random(args.seed))

    if args.operation == "preorder":
        sys.stdout.write(render_tree(root))
        print("".join(f"{value} " for value in preorder_iterative(root)), end="")
    elif args.operation == "level":
        sys.stdout.write(render_tree(root))
        print("".join(f"{value} " for value in level_order(root)), end="")
    elif args.operation == "mirror":
        print("Original Tree")
        sys.stdout.write(render_tree(root))
        print(_RULE)
        mirror_tree(root)
        sys.stdout.write(render_tree(root))
        print("Mirrored Tree")
    else:
        print("The Binary Tree:")
        sys.stdout.write(render_tree(root))
        if root is not None:
            print(f"The smallest number in the tree is {smallest_value(root)}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())