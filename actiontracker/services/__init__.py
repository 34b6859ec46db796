"""
ActionTracker services.

Weapon deck simulation: per-deck state and the three-deck collection.
"""

from actiontracker.services.deck_collection import DeckCollection
from actiontracker.services.deck_state import (
    DeckState,
    effective_count,
    has_adjacent_duplicates,
)
from actiontracker.services.sample_pool import SAMPLE_POOL, get_sample_pool

__all__ = [
    "DeckCollection",
    "DeckState",
    "SAMPLE_POOL",
    "effective_count",
    "get_sample_pool",
    "has_adjacent_duplicates",
]
