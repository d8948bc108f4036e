"""Repeated-attempt evaluation of search configurations."""

from .attempts import AttemptResult, run_attempt, run_attempts, summarize_attempts
from .statistical_tests import success_rate_test

__all__ = [
    "AttemptResult",
    "run_attempt",
    "run_attempts",
    "summarize_attempts",
    "success_rate_test",
]
