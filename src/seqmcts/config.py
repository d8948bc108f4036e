"""Search configuration.

Configurations are plain dataclasses. Numeric fields can be loaded from a
YAML file; the termination predicate and sequence formatter are callables
and must be attached in code.
"""

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigurationError
from .types import SequenceFormatter, TerminationPredicate

DEFAULT_EXPLORATION_CONSTANT = 1.41

# Fields that can come from a config file
_FILE_FIELDS = (
    "exploration_constant",
    "max_iterations",
    "target_length",
    "random_seed",
    "verbosity",
    "report_interval",
)


@dataclass
class SearchConfig:
    """Configuration for one search run.

    Attributes:
        exploration_constant: UCT exploration constant c (0 means default 1.41)
        max_iterations: Number of select/expand/simulate/backprop cycles
        target_length: Fixed sequence length, or None to use is_terminated
        random_seed: Seed for the run's generator (None = fresh entropy)
        verbosity: 0 = silent, 1 = periodic summary, 2 = summary plus tree
            size and best sequence
        report_interval: Iterations between progress reports
        is_terminated: Termination predicate, required when target_length
            is None
        sequence_formatter: Renders sequences in progress reports
    """
    exploration_constant: float = DEFAULT_EXPLORATION_CONSTANT
    max_iterations: int = 1000
    target_length: Optional[int] = None
    random_seed: Optional[int] = None
    verbosity: int = 0
    report_interval: int = 100
    is_terminated: Optional[TerminationPredicate] = None
    sequence_formatter: Optional[SequenceFormatter] = None

    @property
    def effective_exploration_constant(self) -> float:
        """Exploration constant with zero mapped to the default."""
        if self.exploration_constant == 0:
            return DEFAULT_EXPLORATION_CONSTANT
        return self.exploration_constant

    def validate(self) -> None:
        """Check the configuration can run.

        Raises:
            ConfigurationError: if the termination mode is incomplete or a
                numeric field is out of range
        """
        if self.target_length is None and self.is_terminated is None:
            raise ConfigurationError(
                "target_length is unset, so an is_terminated predicate must be provided"
            )
        if self.target_length is not None and self.target_length < 0:
            raise ConfigurationError(
                f"target_length must be >= 0, got {self.target_length}"
            )
        if self.max_iterations < 0:
            raise ConfigurationError(
                f"max_iterations must be >= 0, got {self.max_iterations}"
            )
        if self.report_interval <= 0:
            raise ConfigurationError(
                f"report_interval must be positive, got {self.report_interval}"
            )

    def replace(self, **changes: Any) -> "SearchConfig":
        """Return a copy with some fields changed."""
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], **extra: Any) -> "SearchConfig":
        """Build a config from a mapping of file fields.

        Args:
            data: Mapping of field name -> value, optionally nested under
                a "search" key
            **extra: Additional fields (e.g. is_terminated) set directly

        Returns:
            SearchConfig
        """
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Expected a mapping of search settings, got {type(data).__name__}"
            )
        if "search" in data:
            data = data["search"] or {}

        unknown = sorted(set(data) - set(_FILE_FIELDS))
        if unknown:
            raise ConfigurationError(f"Unknown search config keys: {unknown}")

        return cls(**{**data, **extra})


def load_search_config(path: Union[str, Path], **extra: Any) -> SearchConfig:
    """Load a search config from a YAML file.

    Args:
        path: Path to YAML file
        **extra: Fields set in code (callables, overrides)

    Returns:
        SearchConfig
    """
    path = Path(path)
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse {path}: {e}") from e

    return SearchConfig.from_dict(data, **extra)
