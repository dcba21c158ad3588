"""
Practical Scheduling Layer.

Turns an energy curve and fixed obligations into generated blocks.

Modules:
- slot_finder: Free intervals between sleep and commitments
- activity_placer: Greedy focus/exercise/break placement
- normalizer: Split midnight-crossing blocks for linear timelines
"""

from .activity_placer import PLACEMENT_PROFILES, ActivityPlacer
from .normalizer import normalize_blocks, split_across_midnight
from .slot_finder import DEFAULT_MIN_SLOT_MINUTES, find_available_slots

__all__ = [
    "ActivityPlacer",
    "PLACEMENT_PROFILES",
    "find_available_slots",
    "DEFAULT_MIN_SLOT_MINUTES",
    "split_across_midnight",
    "normalize_blocks",
]
