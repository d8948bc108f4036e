"""Termination model: when is a sequence complete."""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..config import SearchConfig
from ..errors import ConfigurationError
from ..types import Move, TerminationPredicate


@dataclass(frozen=True)
class TerminationRule:
    """Decides whether a sequence is complete.

    Exactly one mode is active: a fixed target length, or a caller
    predicate when target_length is None.
    """
    target_length: Optional[int] = None
    predicate: Optional[TerminationPredicate] = None

    def __post_init__(self):
        if self.target_length is None and self.predicate is None:
            raise ConfigurationError(
                "target_length is unset, so an is_terminated predicate must be provided"
            )
        if self.target_length is not None and self.target_length < 0:
            raise ConfigurationError(
                f"target_length must be >= 0, got {self.target_length}"
            )

    @classmethod
    def from_config(cls, config: SearchConfig) -> "TerminationRule":
        return cls(target_length=config.target_length, predicate=config.is_terminated)

    @property
    def fixed_length(self) -> bool:
        return self.target_length is not None

    def is_complete(self, sequence: Sequence[Move]) -> bool:
        if self.target_length is not None:
            return len(sequence) >= self.target_length
        return bool(self.predicate(list(sequence)))
