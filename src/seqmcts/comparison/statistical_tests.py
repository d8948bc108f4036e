"""Statistical checks on repeated search attempts."""

from typing import Dict

from scipy import stats


def success_rate_test(
    successes: int,
    n: int,
    required_rate: float = 0.95,
    alpha: float = 0.05
) -> Dict:
    """Exact binomial test of a success rate against a requirement.

    H_0: p >= required_rate
    H_1: p < required_rate

    Args:
        successes: Number of successful attempts
        n: Number of attempts
        required_rate: Success rate the configuration must reach
        alpha: Significance level

    Returns:
        Dict with:
        {
            'success_rate': float,
            'p_value': float,
            'ci_low': float,
            'ci_high': float,
            'meets_requirement': bool
        }
        meets_requirement is False only when the observed rate is
        significantly below required_rate.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    if not 0 <= successes <= n:
        raise ValueError(f"successes must be in [0, {n}], got {successes}")

    result = stats.binomtest(successes, n, p=required_rate, alternative="less")
    ci = result.proportion_ci(confidence_level=1 - alpha, method="wilson")

    return {
        'success_rate': successes / n,
        'p_value': float(result.pvalue),
        'ci_low': float(ci.low),
        'ci_high': float(ci.high),
        'meets_requirement': bool(result.pvalue >= alpha)
    }
