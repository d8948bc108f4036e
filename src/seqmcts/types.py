"""Shared type aliases for the search engine.

Moves are opaque to the engine: it only stores, copies and compares them.
"""

import sys
from typing import Any, Callable, List, Optional, Sequence

Move = Any
MoveSequence = List[Move]

# (sequence) -> candidate moves; empty or None means no legal continuation
MoveGenerator = Callable[[MoveSequence], Optional[Sequence[Move]]]

# (sequence) -> fitness; lower is better
FitnessFunction = Callable[[MoveSequence], float]

TerminationPredicate = Callable[[MoveSequence], bool]
SequenceFormatter = Callable[[MoveSequence], str]

# Sentinel fitness for invalid or unscored sequences. Never reported as best.
INVALID_FITNESS = sys.float_info.max
