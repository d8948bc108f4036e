"""MCTS node for sequence search."""

import threading
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..types import Move


@dataclass
class SearchNode:
    """One entry in the search tree arena.

    Nodes reference each other by arena index, never by object, so the
    tree holds no reference cycles.

    Attributes:
        index: Position of this node in the tree arena
        sequence: Moves from the root to this node (immutable)
        parent: Arena index of the parent (None for the root)
        children: Arena indices of children, in creation order
        visit_count: N - number of simulations backpropagated through here
        total_value: W - sum of backpropagated fitness values
        untried_moves: Moves not yet expanded (None until first populated)
        lock: Guards statistics and the untried-move pool
    """
    index: int
    sequence: Tuple[Move, ...]
    parent: Optional[int] = None
    children: List[int] = field(default_factory=list)
    visit_count: int = 0
    total_value: float = 0.0
    untried_moves: Optional[List[Move]] = None
    lock: threading.RLock = field(
        default_factory=threading.RLock, repr=False, compare=False
    )

    @property
    def Q(self) -> float:
        """Mean fitness (Q = W / N). Lower is better."""
        if self.visit_count == 0:
            return 0.0
        return self.total_value / self.visit_count

    @property
    def depth(self) -> int:
        """Number of moves in this node's sequence."""
        return len(self.sequence)

    def is_root(self) -> bool:
        return self.parent is None

    def is_leaf(self) -> bool:
        """Check if node has no children."""
        return len(self.children) == 0

    def record_visit(self, fitness: float) -> None:
        """Count one simulation and accumulate its fitness."""
        with self.lock:
            self.visit_count += 1
            self.total_value += fitness

    def snapshot(self) -> Tuple[int, float]:
        """Read (visit_count, total_value) consistently."""
        with self.lock:
            return self.visit_count, self.total_value

    def __repr__(self) -> str:
        return (f"SearchNode(index={self.index}, depth={self.depth}, "
                f"visits={self.visit_count}, Q={self.Q:.3f}, "
                f"children={len(self.children)})")
