"""Search a path tree for a knight's tour that covers the whole board."""

from __future__ import annotations

from knighttour.board import BOARD_SQUARES, Position
from knighttour.tree import PathTree, TreeNode


def find_knight_path_covering_all_board(tree: PathTree) -> list[Position] | None:
    """Return the first root-to-leaf branch that visits every square, or None.

    Branches are tried depth first in the order the children were added, so the
    tour returned is the first one the tree holds.
    """
    reversed_path = _find(tree.root, 1)
    if reversed_path is None:
        return None
    reversed_path.reverse()
    return reversed_path


def _find(node: TreeNode, depth: int) -> list[Position] | None:
    """Return the tour through ``node`` from leaf back to ``node``, or None."""
    if node.is_leaf():
        return [node.position] if depth == BOARD_SQUARES else None
    for child in node.children:
        found = _find(child, depth + 1)
        if found is not None:
            found.append(node.position)
            return found
    return None