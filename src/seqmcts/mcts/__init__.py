"""MCTS module: tree search over move sequences.

Classic UCT in minimization form. The caller's move generator proposes
continuations, random playouts estimate their value, the caller's fitness
function scores them, and the tree remembers what worked.
"""

from .node import SearchNode
from .tree import SearchTree
from .termination import TerminationRule
from .ucb import ucb_select, ucb_score, select_child
from .expansion import expand
from .simulation import simulate
from .backprop import backpropagate, backpropagate_path
from .fallback import build_greedy_sequence
from .diagnostics import ProgressStats, log_progress
from .search import SequenceSearch, SearchResult, run_search

__all__ = [
    "SearchNode",
    "SearchTree",
    "TerminationRule",
    "ucb_select",
    "ucb_score",
    "select_child",
    "expand",
    "simulate",
    "backpropagate",
    "backpropagate_path",
    "build_greedy_sequence",
    "ProgressStats",
    "log_progress",
    "SequenceSearch",
    "SearchResult",
    "run_search"
]
