"""Backpropagation for sequence MCTS.

Each simulation updates every node on the path to the root:
- Visit counts
- Total fitness

No discounting: every ancestor receives the same raw fitness.
"""

from typing import List

from .node import SearchNode
from .tree import SearchTree


def backpropagate(tree: SearchTree, node: SearchNode, fitness: float) -> None:
    """Backpropagate fitness from node to root.

    Locks one node at a time, never two at once.

    Args:
        tree: Search tree owning node
        node: Expanded node the simulation started from
        fitness: Fitness of the simulated sequence
    """
    current = node

    while current is not None:
        current.record_visit(fitness)
        current = tree.parent_of(current)


def backpropagate_path(path: List[SearchNode], fitness: float) -> None:
    """Backpropagate along explicit path."""
    for node in path:
        node.record_visit(fitness)
