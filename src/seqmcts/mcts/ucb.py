"""UCT selection for sequence MCTS.

Lower fitness is better, so this is the minimization form of UCT: the
confidence term is subtracted from the mean and the child with the lowest
score is followed.
"""

import math
from typing import Optional

from .node import SearchNode
from .termination import TerminationRule
from .tree import SearchTree


def ucb_score(
    child: SearchNode,
    parent: SearchNode,
    c: float = 1.41
) -> float:
    """Compute UCT score (minimization).

    UCT = Q - c * sqrt(ln(N_parent) / N_child)

    Args:
        child: Child node
        parent: Parent node
        c: Exploration constant

    Returns:
        UCT score; -inf for unvisited children so they are tried first
    """
    visits, total = child.snapshot()
    if visits == 0:
        return float('-inf')

    parent_visits, _ = parent.snapshot()

    exploitation = total / visits
    exploration = c * math.sqrt(math.log(parent_visits) / visits)

    return exploitation - exploration


def select_child(
    tree: SearchTree,
    node: SearchNode,
    c: float = 1.41
) -> Optional[SearchNode]:
    """Pick the child with the lowest UCT score.

    The first child reaching the strict minimum wins ties, in creation
    order. Returns None if no child scores below +inf.
    """
    selected = None
    best_score = math.inf

    for child in tree.children_of(node):
        score = ucb_score(child, node, c)
        if score < best_score:
            best_score = score
            selected = child

    return selected


def ucb_select(
    tree: SearchTree,
    termination: TerminationRule,
    c: float = 1.41
) -> SearchNode:
    """Descend from the root to the frontier node.

    Descent stops at a complete node, a node without children, or a node
    that still has untried moves.

    Stopping at nodes with untried moves lets every node gain siblings;
    otherwise the root would only ever grow a single chain.

    Args:
        tree: Search tree
        termination: Completion rule
        c: Exploration constant

    Returns:
        Frontier node for expansion
    """
    node = tree.root

    while not termination.is_complete(node.sequence) and node.children:
        if tree.is_expandable(node):
            break

        selected = select_child(tree, node, c)
        if selected is None:
            break
        node = selected

    return node
