"""Random playout from a newly expanded node."""

from typing import Sequence

import numpy as np

from ..types import Move, MoveGenerator, MoveSequence
from .termination import TerminationRule


def simulate(
    sequence: Sequence[Move],
    move_generator: MoveGenerator,
    termination: TerminationRule,
    rng: np.random.Generator
) -> MoveSequence:
    """Extend sequence with uniformly random moves.

    Stops when the sequence is complete or the generator offers no
    candidates. A dead end leaves the playout shorter than a complete one.

    Args:
        sequence: Starting sequence (not modified)
        move_generator: Candidate moves for a sequence
        termination: Completion rule
        rng: Generator for this search run

    Returns:
        The played-out sequence
    """
    playout = list(sequence)

    while not termination.is_complete(playout):
        moves = move_generator(list(playout))
        if not moves:
            break
        moves = list(moves)
        playout.append(moves[int(rng.integers(len(moves)))])

    return playout
