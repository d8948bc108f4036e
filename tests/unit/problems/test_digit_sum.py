"""Unit tests for the digit puzzles."""

from seqmcts.problems import DigitSumProblem, MonotonicDigitProblem
from seqmcts.types import INVALID_FITNESS


class TestDigitSumProblem:

    def test_moves_until_length(self, digit_sum_problem):
        assert digit_sum_problem.next_moves([]) == [1, 2, 3, 4, 5]
        assert digit_sum_problem.next_moves([1, 1, 1, 1]) == []

    def test_fitness_squared_error(self, digit_sum_problem):
        assert digit_sum_problem.fitness([3, 4, 4, 4]) == 0.0
        assert digit_sum_problem.fitness([1, 1, 1, 1]) == 121.0

    def test_wrong_length_invalid(self, digit_sum_problem):
        assert digit_sum_problem.fitness([5, 5, 5]) == INVALID_FITNESS
        assert not digit_sum_problem.is_valid([5, 5, 5])


class TestMonotonicDigitProblem:

    def test_strict_moves(self):
        problem = MonotonicDigitProblem(target_sum=10, length=3, strict=True)
        assert problem.next_moves([]) == [1, 2, 3, 4, 5]
        assert problem.next_moves([3]) == [4, 5]
        assert problem.next_moves([5]) == []

    def test_non_decreasing_moves(self):
        problem = MonotonicDigitProblem(target_sum=15, length=4, strict=False)
        assert problem.next_moves([3]) == [3, 4, 5]

    def test_fitness_rejects_order_violation(self):
        problem = MonotonicDigitProblem(target_sum=10, length=3, strict=True)
        assert problem.fitness([1, 4, 5]) == 0.0
        assert problem.fitness([1, 1, 5]) == INVALID_FITNESS
        assert problem.fitness([5, 4, 1]) == INVALID_FITNESS

    def test_impossible_has_no_complete_sequence(self, impossible_problem):
        assert impossible_problem.next_moves([1, 2]) == []
        assert impossible_problem.next_moves([2]) == []
