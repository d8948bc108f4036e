"""Example problems for the sequence search engine.

Each problem exposes `next_moves(sequence)` and `fitness(sequence)`, the
two callables the engine consumes.
"""

from .digit_sum import DigitSumProblem, MonotonicDigitProblem
from .tictactoe import TicTacToeProblem, TicTacToeState

__all__ = [
    "DigitSumProblem",
    "MonotonicDigitProblem",
    "TicTacToeProblem",
    "TicTacToeState",
]
