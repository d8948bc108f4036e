from .logging import level_for_verbosity, setup_logging
from .seed import make_rng

__all__ = ["level_for_verbosity", "setup_logging", "make_rng"]
