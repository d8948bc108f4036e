"""Monte Carlo Tree Search over sequences of caller-defined moves.

The caller supplies two functions:
- a move generator: sequence -> legal next moves
- a fitness function: sequence -> float, lower is better

Core loop:
1. Select: descend the tree by minimum UCT score
2. Expand: add one child from an untried move
3. Simulate: random playout to a complete or dead-end sequence
4. Backprop: fold the playout's fitness into every ancestor

Components:
- mcts/ - Tree, UCT selection, expansion, playout, backprop, driver
- problems/ - Example problems (digit sums, tic-tac-toe)
- comparison/ - Repeated independent attempts and their statistics
"""

__version__ = "0.1.0"

from .config import SearchConfig, load_search_config
from .errors import ConfigurationError
from .types import INVALID_FITNESS
from .mcts.search import SequenceSearch, SearchResult, run_search

__all__ = [
    "SearchConfig",
    "load_search_config",
    "ConfigurationError",
    "INVALID_FITNESS",
    "SequenceSearch",
    "SearchResult",
    "run_search"
]
