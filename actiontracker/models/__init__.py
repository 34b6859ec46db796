from actiontracker.models.pool import (
    DisabledCards,
    filter_by_deck,
    filter_pool,
    list_expansions,
)
from actiontracker.models.snapshot import (
    CardRef,
    CollectionSnapshot,
    DeckSnapshot,
    SnapshotMismatchError,
)
from actiontracker.models.weapon import (
    AmmoType,
    DeckType,
    DifficultyMode,
    Weapon,
    WeaponCategory,
)

__all__ = [
    "AmmoType",
    "CardRef",
    "CollectionSnapshot",
    "DeckSnapshot",
    "DeckType",
    "DifficultyMode",
    "DisabledCards",
    "SnapshotMismatchError",
    "Weapon",
    "WeaponCategory",
    "filter_by_deck",
    "filter_pool",
    "list_expansions",
]
