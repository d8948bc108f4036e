#!/usr/bin/env python3
"""Run sequence MCTS on one of the example problems.

Runs a single search, or a batch of independent attempts with a success
rate summary.

Usage:
    python experiments/run_search.py \
        --problem digit-sum \
        --config configs/search/digit_sum.yaml \
        --attempts 100
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from seqmcts.config import SearchConfig, load_search_config
from seqmcts.mcts.search import SequenceSearch
from seqmcts.problems import (
    DigitSumProblem,
    MonotonicDigitProblem,
    TicTacToeProblem,
    TicTacToeState,
)
from seqmcts.comparison import run_attempts, summarize_attempts, success_rate_test
from seqmcts.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def build_problem(args):
    """Create the example problem named on the command line."""
    if args.problem == "digit-sum":
        return DigitSumProblem(target_sum=args.target_sum, length=args.length)
    if args.problem == "monotonic":
        return MonotonicDigitProblem(
            target_sum=args.target_sum, length=args.length, strict=args.strict
        )
    if args.problem == "tictactoe":
        # X to move, X wins at 6
        state = TicTacToeState(board=[1, 0, 0, 1, 2, 2, 0, 0, 0], next_player=1)
        return TicTacToeProblem(state, player=1, forced_replies=False)
    raise ValueError(f"Unknown problem: {args.problem}")


def main():
    parser = argparse.ArgumentParser(description="Run sequence MCTS on an example problem")
    parser.add_argument("--problem", type=str, default="digit-sum",
                        choices=["digit-sum", "monotonic", "tictactoe"],
                        help="Example problem to solve")
    parser.add_argument("--config", type=str, default=None,
                        help="YAML search config")
    parser.add_argument("--target_sum", type=int, default=15,
                        help="Target sum for digit problems")
    parser.add_argument("--length", type=int, default=4,
                        help="Sequence length for digit problems")
    parser.add_argument("--strict", action="store_true",
                        help="Strictly increasing digits (monotonic problem)")
    parser.add_argument("--attempts", type=int, default=1,
                        help="Number of independent searches")
    parser.add_argument("--workers", type=int, default=8,
                        help="Worker threads for batch attempts")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--log_file", type=str, default=None, help="Log file")

    args = parser.parse_args()

    if args.config:
        config = load_search_config(args.config)
    else:
        config = SearchConfig(max_iterations=2000, exploration_constant=2.0)

    setup_logging(log_file=args.log_file, verbosity=config.verbosity)

    problem = build_problem(args)
    if args.problem == "tictactoe":
        config = config.replace(target_length=1)
    elif config.target_length is None:
        config = config.replace(target_length=args.length)
    if args.seed is not None:
        config = config.replace(random_seed=args.seed)

    if args.attempts <= 1:
        search = SequenceSearch(problem.next_moves, problem.fitness, config)
        result = search.search([])
        logger.info(f"Best sequence: {result.best_sequence}")
        logger.info(f"Fitness: {problem.fitness(result.best_sequence)}")
        logger.info(f"Used fallback: {result.used_fallback}")
        logger.info(f"Tree: {result.tree_stats}")
        return

    results = run_attempts(
        [], problem.next_moves, problem.fitness, config,
        num_attempts=args.attempts,
        num_workers=args.workers,
        base_seed=config.random_seed
    )
    summary = summarize_attempts(results)
    test = success_rate_test(summary['num_valid'], summary['num_attempts'])

    logger.info(f"Success rate: {summary['success_rate'] * 100:.2f}% "
                f"({summary['num_valid']}/{summary['num_attempts']})")
    logger.info(f"Fitness min/max/mean: {summary['min_fitness']} / "
                f"{summary['max_fitness']} / {summary['mean_fitness']}")
    logger.info(f"Best sequence found: {summary['best_sequence']}")
    logger.info(f"95% CI: [{test['ci_low']:.3f}, {test['ci_high']:.3f}], "
                f"p={test['p_value']:.4f}")


if __name__ == "__main__":
    main()
