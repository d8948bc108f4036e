"""Expansion: grow the tree by one node per iteration."""

from typing import Optional

import numpy as np

from .node import SearchNode
from .termination import TerminationRule
from .tree import SearchTree


def expand(
    tree: SearchTree,
    node: SearchNode,
    termination: TerminationRule,
    rng: np.random.Generator
) -> Optional[SearchNode]:
    """Create one new child of node from a random untried move.

    The node's lock is held for the whole draw-and-create. An empty pool is
    refilled from the move generator, which tolerates generators that
    answer differently across calls.

    Args:
        tree: Search tree
        node: Frontier node
        termination: Completion rule; complete nodes are not expanded
        rng: Generator for this search run

    Returns:
        The new child, or None if node is complete or a dead end
    """
    with node.lock:
        if termination.is_complete(node.sequence):
            return None

        if not node.untried_moves:
            node.untried_moves = tree.generate_moves(node)

        if not node.untried_moves:
            return None

        # Swap-remove: pool order is not preserved
        pool = node.untried_moves
        move_index = int(rng.integers(len(pool)))
        move = pool[move_index]
        pool[move_index] = pool[-1]
        pool.pop()

        return tree.create_child(node, move)
