from ._shared import NO_PAIR, PairResult, StripEvent
from .brute_force import brute_force_closest_pair
from .divide_and_conquer import (
    ClosestPairConfig,
    closest_pair,
    closest_pair_presorted,
)
from .strip import closest_in_strip

__all__ = [
    "NO_PAIR",
    "PairResult",
    "StripEvent",
    "ClosestPairConfig",
    "brute_force_closest_pair",
    "closest_in_strip",
    "closest_pair",
    "closest_pair_presorted",
]
