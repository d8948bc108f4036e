"""Digit puzzles: pick digits whose sum hits a target.

DigitSumProblem allows any digit at any position. MonotonicDigitProblem
only offers digits that keep the sequence strictly increasing (strict) or
non-decreasing.
"""

from dataclasses import dataclass, field
from typing import List

from ..types import INVALID_FITNESS, MoveSequence


@dataclass
class DigitSumProblem:
    """Sequences of `length` allowed digits summing close to target_sum."""
    target_sum: int
    allowed_digits: List[int] = field(default_factory=lambda: [1, 2, 3, 4, 5])
    length: int = 4

    def next_moves(self, sequence: MoveSequence) -> List[int]:
        if len(sequence) >= self.length:
            return []
        return list(self.allowed_digits)

    def fitness(self, sequence: MoveSequence) -> float:
        """Squared distance from the target sum."""
        if len(sequence) != self.length:
            return INVALID_FITNESS
        return float((sum(sequence) - self.target_sum) ** 2)

    def is_valid(self, sequence: MoveSequence) -> bool:
        return self.fitness(sequence) < INVALID_FITNESS


@dataclass
class MonotonicDigitProblem(DigitSumProblem):
    """Digit sum with an ordering constraint.

    Attributes:
        strict: True for strictly increasing, False for non-decreasing
    """
    strict: bool = True

    def _allowed_after(self, previous: int, digit: int) -> bool:
        if self.strict:
            return digit > previous
        return digit >= previous

    def next_moves(self, sequence: MoveSequence) -> List[int]:
        if len(sequence) >= self.length:
            return []
        if not sequence:
            return list(self.allowed_digits)

        previous = sequence[-1]
        return [d for d in self.allowed_digits if self._allowed_after(previous, d)]

    def is_monotonic(self, sequence: MoveSequence) -> bool:
        return all(
            self._allowed_after(prev, cur)
            for prev, cur in zip(sequence, sequence[1:])
        )

    def fitness(self, sequence: MoveSequence) -> float:
        if len(sequence) != self.length or not self.is_monotonic(sequence):
            return INVALID_FITNESS
        return float((sum(sequence) - self.target_sum) ** 2)
