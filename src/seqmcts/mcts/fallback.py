"""Deterministic greedy sequence construction."""

from typing import Sequence

from ..types import Move, MoveGenerator, MoveSequence
from .termination import TerminationRule


def build_greedy_sequence(
    initial_sequence: Sequence[Move],
    move_generator: MoveGenerator,
    termination: TerminationRule
) -> MoveSequence:
    """Build a sequence by always taking the first candidate move.

    Used when a search never scored a complete sequence, so the caller
    still gets a result. Uses no randomness.
    """
    sequence = list(initial_sequence)

    while not termination.is_complete(sequence):
        moves = move_generator(list(sequence))
        if not moves:
            break
        sequence.append(list(moves)[0])

    return sequence
