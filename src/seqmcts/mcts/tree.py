"""MCTS tree structure.

The tree is an arena: every node lives in a single list and is addressed
by its index. Nodes are never removed, so indices stay valid for the
lifetime of the search.
"""

import threading
from typing import Iterator, List, Optional, Sequence

from ..types import Move, MoveGenerator
from .node import SearchNode


class SearchTree:
    """Arena-backed search tree rooted at the caller's initial sequence."""

    def __init__(self, initial_sequence: Sequence[Move], move_generator: MoveGenerator):
        self.move_generator = move_generator
        # Guards index allocation and the arena append
        self._arena_lock = threading.Lock()
        self.nodes: List[SearchNode] = [
            SearchNode(index=0, sequence=tuple(initial_sequence))
        ]

    @property
    def root(self) -> SearchNode:
        return self.nodes[0]

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[SearchNode]:
        return iter(self.nodes)

    def create_child(self, parent: SearchNode, move: Move) -> SearchNode:
        """Append a move to parent's sequence and register the new node.

        Args:
            parent: Node to extend
            move: Move appended to the parent's sequence

        Returns:
            The new child node (no statistics, unpopulated move pool)
        """
        with parent.lock:
            with self._arena_lock:
                child = SearchNode(
                    index=len(self.nodes),
                    sequence=parent.sequence + (move,),
                    parent=parent.index,
                )
                self.nodes.append(child)
            parent.children.append(child.index)
        return child

    def generate_moves(self, node: SearchNode) -> List[Move]:
        """Ask the move generator for candidates after node's sequence."""
        moves = self.move_generator(list(node.sequence))
        return list(moves) if moves else []

    def is_expandable(self, node: SearchNode) -> bool:
        """Check whether node still has untried moves.

        The pool is populated from the move generator on first use.
        """
        with node.lock:
            if node.untried_moves is None:
                node.untried_moves = self.generate_moves(node)
            return len(node.untried_moves) > 0

    def parent_of(self, node: SearchNode) -> Optional[SearchNode]:
        if node.parent is None:
            return None
        return self.nodes[node.parent]

    def children_of(self, node: SearchNode) -> List[SearchNode]:
        return [self.nodes[i] for i in node.children]

    def path_to_root(self, node: SearchNode) -> List[SearchNode]:
        """Get path from node to root (node first, root last)."""
        path = []
        current = node
        while current is not None:
            path.append(current)
            current = self.parent_of(current)
        return path

    def depth(self) -> int:
        """Longest chain of child edges from the root to a leaf."""
        max_depth = 0
        stack = [(self.root, 0)]
        while stack:
            node, d = stack.pop()
            max_depth = max(max_depth, d)
            for child_index in node.children:
                stack.append((self.nodes[child_index], d + 1))
        return max_depth

    def count_nodes(self) -> int:
        """Count total nodes."""
        return len(self.nodes)

    def best_child(self) -> Optional[SearchNode]:
        """Most visited child of the root (first one wins ties)."""
        best = None
        for child in self.children_of(self.root):
            if best is None or child.visit_count > best.visit_count:
                best = child
        return best

    def get_statistics(self) -> dict:
        """Get tree statistics."""
        return {
            "total_nodes": self.count_nodes(),
            "depth": self.depth(),
            "root_visits": self.root.visit_count,
            "root_Q": self.root.Q
        }
