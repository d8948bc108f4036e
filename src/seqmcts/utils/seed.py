"""Random number generators for search runs."""

from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create an independent generator for one search run.

    Each run gets its own generator so concurrent searches never share
    random state, and a given seed reproduces a given run.

    Args:
        seed: Random seed, or None for fresh OS entropy

    Returns:
        numpy Generator
    """
    return np.random.default_rng(seed)
