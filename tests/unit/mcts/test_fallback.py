"""Unit tests for the greedy fallback builder."""

from seqmcts.mcts.fallback import build_greedy_sequence
from seqmcts.mcts.termination import TerminationRule


def test_takes_first_candidate(digit_sum_problem, fixed_length):
    assert build_greedy_sequence([], digit_sum_problem.next_moves, fixed_length) == [1, 1, 1, 1]


def test_keeps_initial_sequence(digit_sum_problem, fixed_length):
    assert build_greedy_sequence([5, 5], digit_sum_problem.next_moves, fixed_length) == [5, 5, 1, 1]


def test_stops_at_dead_end(impossible_problem):
    rule = TerminationRule(target_length=4)
    assert build_greedy_sequence([], impossible_problem.next_moves, rule) == [1, 2]


def test_deterministic(impossible_problem):
    rule = TerminationRule(target_length=4)
    results = {
        tuple(build_greedy_sequence([], impossible_problem.next_moves, rule))
        for _ in range(10)
    }
    assert len(results) == 1


def test_predicate_mode():
    rule = TerminationRule(predicate=lambda seq: len(seq) == 3)
    assert build_greedy_sequence([], lambda seq: ["a", "b"], rule) == ["a", "a", "a"]
