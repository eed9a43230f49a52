"""The tree of every knight path from a starting square that never revisits a square."""

from __future__ import annotations

from dataclasses import dataclass, field

from knighttour.board import Position, valid_knight_moves


@dataclass(slots=True)
class TreeNode:
    """A square on a path, with the squares the path may continue to."""

    position: Position
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, child: TreeNode) -> TreeNode:
        """Append ``child`` as the next possible square and return it."""
        self.children.append(child)
        return child

    def is_leaf(self) -> bool:
        """Return True if no path continues from this node."""
        return not self.children


@dataclass(slots=True)
class PathTree:
    """A tree whose root-to-leaf branches are maximal knight paths from the root."""

    root: TreeNode


def find_all_possible_knight_paths(start: Position) -> PathTree:
    """Build the tree of every knight path from ``start`` that visits no square twice."""
    moves = valid_knight_moves()
    root = TreeNode(start)
    _grow(root, moves, {start})
    return PathTree(root)


def _grow(
    node: TreeNode,
    moves: dict[Position, tuple[Position, ...]],
    visited: set[Position],
) -> None:
    for target in moves[node.position]:
        if target not in visited:
            visited.add(target)
            _grow(node.add_child(TreeNode(target)), moves, visited)
    visited.discard(node.position)