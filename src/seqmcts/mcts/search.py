"""Main MCTS search over move sequences.

One iteration:

    node = ucb_select(root)
    child = expand(node)            # skip the iteration on a dead end
    playout = simulate(child)
    fitness = fitness_fn(playout)
    backpropagate(child, fitness)
    track playout if complete and strictly better than the best so far

After max_iterations, the best complete playout is returned. If none was
ever found, a greedy first-candidate sequence is built instead so the
caller always gets a result.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

import numpy as np

from ..config import SearchConfig
from ..types import (
    INVALID_FITNESS,
    FitnessFunction,
    Move,
    MoveGenerator,
    MoveSequence,
)
from ..utils.seed import make_rng
from .backprop import backpropagate
from .diagnostics import ProgressStats, log_progress
from .expansion import expand
from .fallback import build_greedy_sequence
from .simulation import simulate
from .termination import TerminationRule
from .tree import SearchTree
from .ucb import ucb_select

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[ProgressStats], None]


@dataclass
class SearchResult:
    """Outcome of one search run.

    Attributes:
        best_sequence: Best complete sequence, or the greedy fallback
        best_fitness: Its fitness (INVALID_FITNESS when the fallback was used)
        iterations: Iterations run, including skipped ones
        expansions: Iterations that expanded a node (equals root visits)
        used_fallback: Whether the greedy builder produced best_sequence
        elapsed: Wall time in seconds
        tree_stats: SearchTree.get_statistics() at the end of the run
    """
    best_sequence: MoveSequence
    best_fitness: float = INVALID_FITNESS
    iterations: int = 0
    expansions: int = 0
    used_fallback: bool = False
    elapsed: float = 0.0
    tree_stats: dict = field(default_factory=dict)

    @property
    def found(self) -> bool:
        """Whether a complete sequence was scored during the search."""
        return not self.used_fallback


class SequenceSearch:
    """Monte Carlo Tree Search for a fitness-minimizing move sequence.

    A search owns its tree and its random generator. Independent searches
    can run concurrently because nothing is shared between instances.
    """

    def __init__(
        self,
        move_generator: MoveGenerator,
        fitness_fn: FitnessFunction,
        config: Optional[SearchConfig] = None,
        rng: Optional[np.random.Generator] = None,
        progress_callback: Optional[ProgressCallback] = None
    ):
        self.config = config or SearchConfig()
        self.config.validate()

        self.move_generator = move_generator
        self.fitness_fn = fitness_fn
        self.termination = TerminationRule.from_config(self.config)
        self.exploration_constant = self.config.effective_exploration_constant
        self.rng = rng if rng is not None else make_rng(self.config.random_seed)
        self.progress_callback = progress_callback

        self.tree: Optional[SearchTree] = None
        self.best_sequence: Optional[MoveSequence] = None
        self.best_fitness = INVALID_FITNESS

        # Statistics
        self.num_expansions = 0
        self.num_dead_ends = 0

    def reset(self, initial_sequence: Sequence[Move]) -> None:
        """Start a fresh tree rooted at initial_sequence."""
        self.tree = SearchTree(initial_sequence, self.move_generator)
        self.best_sequence = None
        self.best_fitness = INVALID_FITNESS
        self.num_expansions = 0
        self.num_dead_ends = 0

    def iterate(self) -> Optional[float]:
        """Run one select/expand/simulate/backpropagate cycle.

        Returns:
            Fitness of the playout, or None if expansion hit a dead end
        """
        if self.tree is None:
            raise RuntimeError("Call reset() before iterate()")

        node = ucb_select(self.tree, self.termination, self.exploration_constant)

        expanded = expand(self.tree, node, self.termination, self.rng)
        if expanded is None:
            self.num_dead_ends += 1
            return None
        self.num_expansions += 1

        playout = simulate(expanded.sequence, self.move_generator, self.termination, self.rng)
        fitness = self.fitness_fn(playout)

        backpropagate(self.tree, expanded, fitness)

        if self.termination.is_complete(playout) and fitness < self.best_fitness:
            self.best_fitness = fitness
            self.best_sequence = list(playout)

        return fitness

    def _report(self, iteration: int, start_time: float) -> None:
        stats = ProgressStats(
            iterations=iteration,
            best_fitness=self.best_fitness,
            best_sequence=self.best_sequence,
            tree_depth=self.tree.depth(),
            total_nodes=self.tree.count_nodes(),
            elapsed=time.time() - start_time
        )
        if self.progress_callback is not None:
            self.progress_callback(stats)
        else:
            log_progress(stats, self.config.verbosity, self.config.sequence_formatter)

    def _reporting(self) -> bool:
        return self.progress_callback is not None or self.config.verbosity > 0

    def search(self, initial_sequence: Sequence[Move] = ()) -> SearchResult:
        """Run the search and return the best sequence found.

        Args:
            initial_sequence: Moves already fixed at the root

        Returns:
            SearchResult
        """
        self.reset(initial_sequence)
        start_time = time.time()
        interval = self.config.report_interval

        logger.debug(
            f"Starting search: iterations={self.config.max_iterations}, "
            f"c={self.exploration_constant}, target_length={self.config.target_length}"
        )

        for i in range(self.config.max_iterations):
            if self.iterate() is None:
                continue

            if self._reporting() and i % interval == 0:
                self._report(i + 1, start_time)

        used_fallback = self.best_sequence is None
        if used_fallback:
            logger.info("No complete sequence found, building greedy fallback")
            best_sequence = build_greedy_sequence(
                initial_sequence, self.move_generator, self.termination
            )
        else:
            best_sequence = self.best_sequence

        elapsed = time.time() - start_time
        logger.debug(
            f"Search finished in {elapsed:.3f}s: expansions={self.num_expansions}, "
            f"dead_ends={self.num_dead_ends}, best_fitness={self.best_fitness}"
        )

        return SearchResult(
            best_sequence=best_sequence,
            best_fitness=self.best_fitness,
            iterations=self.config.max_iterations,
            expansions=self.num_expansions,
            used_fallback=used_fallback,
            elapsed=elapsed,
            tree_stats=self.tree.get_statistics()
        )

    def get_statistics(self) -> dict:
        """Return search statistics."""
        total = self.num_expansions + self.num_dead_ends
        return {
            "num_expansions": self.num_expansions,
            "num_dead_ends": self.num_dead_ends,
            "dead_end_rate": self.num_dead_ends / (total + 1e-8)
        }


def run_search(
    initial_sequence: Sequence[Move],
    move_generator: MoveGenerator,
    fitness_fn: FitnessFunction,
    config: SearchConfig
) -> MoveSequence:
    """Search for the sequence minimizing fitness_fn.

    Args:
        initial_sequence: Moves already fixed at the root
        move_generator: Candidate moves for a sequence
        fitness_fn: Fitness of a sequence, lower is better
        config: Search configuration

    Returns:
        Best complete sequence found, or a greedy fallback sequence

    Raises:
        ConfigurationError: if target_length is None and no is_terminated
            predicate was given
    """
    search = SequenceSearch(move_generator, fitness_fn, config)
    return search.search(initial_sequence).best_sequence
