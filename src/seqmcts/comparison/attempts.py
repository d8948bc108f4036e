"""Repeated independent searches on one problem.

A single MCTS run is stochastic. Judging a configuration means running it
many times with different seeds and looking at how often it succeeds.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

import numpy as np

from ..config import SearchConfig
from ..mcts.search import SequenceSearch
from ..types import INVALID_FITNESS, FitnessFunction, Move, MoveGenerator, MoveSequence

logger = logging.getLogger(__name__)


@dataclass
class AttemptResult:
    """One independent search run."""
    seed: Optional[int]
    sequence: MoveSequence
    fitness: float

    @property
    def valid(self) -> bool:
        return self.fitness < INVALID_FITNESS


def run_attempt(
    initial_sequence: Sequence[Move],
    move_generator: MoveGenerator,
    fitness_fn: FitnessFunction,
    config: SearchConfig,
    seed: Optional[int] = None
) -> AttemptResult:
    """Run one silent search with its own seed and score its result."""
    attempt_config = config.replace(random_seed=seed, verbosity=0)
    search = SequenceSearch(move_generator, fitness_fn, attempt_config)
    result = search.search(initial_sequence)

    return AttemptResult(
        seed=seed,
        sequence=result.best_sequence,
        fitness=fitness_fn(result.best_sequence)
    )


def run_attempts(
    initial_sequence: Sequence[Move],
    move_generator: MoveGenerator,
    fitness_fn: FitnessFunction,
    config: SearchConfig,
    num_attempts: int = 100,
    num_workers: int = 8,
    base_seed: Optional[int] = None
) -> List[AttemptResult]:
    """Run independent searches concurrently.

    Each attempt builds its own tree and its own generator, seeded with
    base_seed + i (or fresh entropy when base_seed is None).

    Args:
        initial_sequence: Root sequence shared by all attempts
        move_generator: Candidate moves for a sequence
        fitness_fn: Fitness of a sequence, lower is better
        config: Search configuration (seed and verbosity are overridden)
        num_attempts: Number of independent searches
        num_workers: Thread pool size
        base_seed: Seed of the first attempt

    Returns:
        Results in attempt order
    """
    config.validate()
    seeds = [
        base_seed + i if base_seed is not None else None
        for i in range(num_attempts)
    ]

    with ThreadPoolExecutor(max_workers=num_workers) as pool:
        futures = [
            pool.submit(run_attempt, initial_sequence, move_generator, fitness_fn, config, seed)
            for seed in seeds
        ]
        results = [future.result() for future in futures]

    logger.debug(f"Completed {len(results)} attempts with {num_workers} workers")
    return results


def summarize_attempts(results: List[AttemptResult]) -> Dict:
    """Success rate and fitness statistics over valid attempts.

    Returns:
        Dict with num_attempts, num_valid, success_rate, and min/max/mean
        fitness of valid attempts (None when there are none), plus the best
        valid sequence
    """
    valid = [r for r in results if r.valid]
    n = len(results)

    summary = {
        'num_attempts': n,
        'num_valid': len(valid),
        'success_rate': len(valid) / n if n else 0.0,
        'min_fitness': None,
        'max_fitness': None,
        'mean_fitness': None,
        'best_sequence': None
    }

    if valid:
        fitness = np.array([r.fitness for r in valid], dtype=float)
        best = valid[int(np.argmin(fitness))]
        summary.update({
            'min_fitness': float(np.min(fitness)),
            'max_fitness': float(np.max(fitness)),
            'mean_fitness': float(np.mean(fitness)),
            'best_sequence': best.sequence
        })

    return summary
