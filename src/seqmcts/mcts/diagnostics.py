"""Progress reporting for long searches."""

import logging
from dataclasses import dataclass
from typing import Optional

from ..types import MoveSequence, SequenceFormatter

logger = logging.getLogger(__name__)


@dataclass
class ProgressStats:
    """Snapshot of a running search.

    Depth and node count need a full tree walk, so they are only computed
    when a report is due.
    """
    iterations: int
    best_fitness: float
    best_sequence: Optional[MoveSequence] = None
    tree_depth: int = 0
    total_nodes: int = 0
    elapsed: float = 0.0


def format_sequence(
    sequence: Optional[MoveSequence],
    formatter: Optional[SequenceFormatter] = None
) -> str:
    if sequence is None:
        return "None"
    if formatter is not None:
        return formatter(sequence)
    return str(sequence)


def log_progress(
    stats: ProgressStats,
    verbosity: int = 1,
    formatter: Optional[SequenceFormatter] = None
) -> None:
    """Log a progress report.

    Args:
        stats: Progress snapshot
        verbosity: 1 = summary, 2 = summary plus tree size and best sequence
        formatter: Optional sequence renderer
    """
    if verbosity <= 0:
        return

    logger.info(f"=== Progress Report (Iteration {stats.iterations}) ===")
    logger.info(f"Best Fitness: {stats.best_fitness:f}")
    logger.info(f"Time Elapsed: {stats.elapsed:.3f}s")

    if verbosity > 1:
        logger.info(f"Tree Depth: {stats.tree_depth}")
        logger.info(f"Total Nodes: {stats.total_nodes}")
        logger.info(f"Best Sequence: {format_sequence(stats.best_sequence, formatter)}")
