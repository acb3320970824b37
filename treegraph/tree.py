"""Binary trees grown by random insertion, plus text input and rendering helpers."""

from __future__ import annotations

import random
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol


class _BitSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class BTNode:
    """A binary tree node holding an integer item."""

    item: int
    left: BTNode | None = None
    right: BTNode | None = None


_INT = re.compile(r"\s*([+-]?\d+)")
_WORD = re.compile(r"\s*\S*")


def insert_node(root: BTNode | None, item: int, rng: _BitSource) -> BTNode:
    """Add ``item`` at the end of a random walk down from ``root`` and return the root.

    At each node a draw of ``rng.randrange(2)`` picks the left child when it
    is non-zero and the right child otherwise.
    """
    node = BTNode(item)
    if root is None:
        return node
    current = root
    while True:
        if rng.randrange(2):
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def build_tree(items: Iterable[int], rng: _BitSource | None = None) -> BTNode | None:
    """Insert ``items`` one after another into an empty tree and return its root."""
    source = rng if rng is not None else random.Random()
    root: BTNode | None = None
    for item in items:
        root = insert_node(root, item, source)
    return root


def render_tree(root: BTNode | None) -> str:
    """Draw the tree one node per line, children indented under their parent.

    A left child is marked ``|---`` and a right child ``|___``; every level
    above the parent adds a ``|`` followed by a tab.
    """
    lines: list[str] = []
    stack: list[tuple[BTNode, int, bool]] = [(root, 0, False)] if root else []
    while stack:
        node, depth, is_left = stack.pop()
        marker = ("|---" if is_left else "|___") if depth else ""
        lines.append(f"{'|' + chr(9) * 1 if False else ''}{'|\t' * (depth - 1)}{marker}{node.item}\n")
        if node.right is not None:
            stack.append((node.right, depth + 1, False))
        if node.left is not None:
            stack.append((node.left, depth + 1, True))
    return "".join(lines)


def read_items(text: str) -> tuple[list[int], str]:
    """Read integers from the start of ``text`` until something else is met.

    The word that ends the list is skipped. Returns the integers and the text
    that follows that word.
    """
    items: list[int] = []
    pos = 0
    while (match := _INT.match(text, pos)) is not None:
        items.append(int(match.group(1)))
        pos = match.end()
    word = _WORD.match(text, pos)
    if word is not None:
        pos = word.end()
    return items, text[pos:]