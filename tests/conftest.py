"""Pytest fixtures for testing."""

import pytest

from seqmcts.config import SearchConfig
from seqmcts.mcts.termination import TerminationRule
from seqmcts.mcts.tree import SearchTree
from seqmcts.problems import DigitSumProblem, MonotonicDigitProblem
from seqmcts.utils.seed import make_rng


@pytest.fixture
def seed():
    """Fixed seed for reproducible runs."""
    return 42


@pytest.fixture
def rng(seed):
    """Generator for a single test."""
    return make_rng(seed)


@pytest.fixture
def digit_sum_problem():
    """Four digits from 1-5 summing to 15."""
    return DigitSumProblem(target_sum=15, allowed_digits=[1, 2, 3, 4, 5], length=4)


@pytest.fixture
def impossible_problem():
    """Strictly increasing length 4 from {1, 2}: no valid sequence exists."""
    return MonotonicDigitProblem(
        target_sum=15, allowed_digits=[1, 2], length=4, strict=True
    )


@pytest.fixture
def fixed_length(digit_sum_problem):
    return TerminationRule(target_length=digit_sum_problem.length)


@pytest.fixture
def digit_tree(digit_sum_problem):
    """Empty tree over the digit sum problem."""
    return SearchTree([], digit_sum_problem.next_moves)


@pytest.fixture
def digit_config():
    return SearchConfig(
        exploration_constant=2.0,
        max_iterations=2000,
        target_length=4,
        random_seed=7
    )
