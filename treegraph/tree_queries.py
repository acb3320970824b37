"""Queries over a binary tree: smaller values, great-grandparents, depth and search."""

from __future__ import annotations

import argparse
import random
import re
import sys

from treegraph.tree import BTNode, build_tree, read_items, render_tree

_LIST_PROMPT = (
    "Enter a list of numbers for a Binary Tree, terminated by any non-digit character: "
)
_INT = re.compile(r"\s*([+-]?\d+)")


def smaller_values(root: BTNode | None, limit: int) -> list[int]:
    """Return, in pre-order, the items that are less than ``limit``."""
    found: list[int] = []
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        if node.item < limit:
            found.append(node.item)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return found


def nodes_with_great_grandchild(root: BTNode | None) -> list[int]:
    """Return, in post-order, the items of nodes that have a great-grandchild."""
    found: list[int] = []

    def height(node: BTNode | None) -> int:
        if node is None:
            return 0
        left = height(node.left)
        right = height(node.right)
        if left > 2 or right > 2:
            found.append(node.item)
        return max(left, right) + 1

    height(root)
    return found


def max_depth(root: BTNode | None) -> int:
    """Return the number of edges on the longest root-to-leaf path, -1 if empty."""
    deepest = -1
    stack = [(root, 0)] if root else []
    while stack:
        node, depth = stack.pop()
        deepest = max(deepest, depth)
        for child in (node.left, node.right):
            if child is not None:
                stack.append((child, depth + 1))
    return deepest


def search_node(root: BTNode | None, key: int) -> BTNode | None:
    """Return the first node in pre-order whose item equals ``key``, or None."""
    stack = [root] if root else []
    while stack:
        node = stack.pop()
        if node.item == key:
            return node
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return None


def _read_int(text: str) -> int:
    match = _INT.match(text)
    if match is None:
        raise ValueError("an integer is expected")
    return int(match.group(1))


def main(argv: list[str] | None = None) -> int:
    """Build a tree from standard input and answer one query about it."""
    parser = argparse.ArgumentParser(
        prog="treegraph-tree",
        description="Answer a query about a binary tree read from standard input.",
    )
    parser.add_argument(
        "query", choices=("smaller", "great-grandchild", "depth", "search")
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for tree shape")
    args = parser.parse_args(argv)

    print(_LIST_PROMPT)
    items, rest = read_items(sys.stdin.read())
    root = build_tree(items, random.Random(args.seed))
    print("The Binary Tree:")
    sys.stdout.write(render_tree(root))

    try:
        if args.query == "smaller":
            print("Enter an integer:")
            limit = _read_int(rest)
            print("Smaller number(s) in the tree:")
            print("".join(f"{value} " for value in smaller_values(root, limit)))
        elif args.query == "great-grandchild":
            print("The node(s) with great grandchild:")
            print("".join(f"{value} " for value in nodes_with_great_grandchild(root)))
        elif args.query == "depth":
            print(f"The maximum depth of the binary tree is: {max_depth(root)}")
        else:
            print("Please enter a value to search:", end="")
            key = _read_int(rest)
            if search_node(root, key) is not None:
                print("The node is found.")
            else:
                print("The node is not found.")
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())