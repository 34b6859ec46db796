"""
Deck collection.

Holds the Starting, Regular, and Ultrared decks together and keeps them on a
shared difficulty.

INVARIANT: Every managed deck reports the collection's difficulty.
"""

import logging
import random
from collections.abc import Iterable, Iterator

from actiontracker.config import settings
from actiontracker.models.pool import DisabledCards, filter_pool
from actiontracker.models.snapshot import CollectionSnapshot, SnapshotMismatchError
from actiontracker.models.weapon import DeckType, DifficultyMode, Weapon
from actiontracker.services.deck_state import DeckState

logger = logging.getLogger(__name__)


class DeckCollection:
    """
    All three weapon decks built from one template pool.

    Every deck receives the same unfiltered pool and keeps only its own
    category.

    Args:
        weapons: Template pool covering any or all decks
        difficulty: Starting difficulty; defaults to the configured one
        rng: Random source shared by every deck
    """

    def __init__(
        self,
        weapons: Iterable[Weapon],
        difficulty: DifficultyMode | None = None,
        rng: random.Random | None = None,
    ) -> None:
        pool = list(weapons)
        self._difficulty = difficulty if difficulty is not None else settings.default_difficulty
        self._decks: dict[DeckType, DeckState] = {
            deck_type: DeckState(deck_type, self._difficulty, pool, rng=rng)
            for deck_type in DeckType
        }

    @property
    def difficulty(self) -> DifficultyMode:
        return self._difficulty

    def get_deck(self, deck_type: DeckType) -> DeckState:
        return self._decks[deck_type]

    def __getitem__(self, deck_type: DeckType) -> DeckState:
        return self._decks[deck_type]

    def __iter__(self) -> Iterator[DeckState]:
        return iter(self._decks.values())

    def set_difficulty(self, mode: DifficultyMode) -> None:
        """
        Switch every deck to a new difficulty.

        Resets all decks, including their discard piles. No-op when the
        difficulty is unchanged.
        """
        if mode == self._difficulty:
            return

        logger.info("Changing difficulty %s -> %s", self._difficulty.value, mode.value)
        self._difficulty = mode
        for deck in self._decks.values():
            deck.change_difficulty(mode)

    def reset_all(self) -> None:
        for deck in self._decks.values():
            deck.reset()

    def update_pool(self, weapons: Iterable[Weapon]) -> None:
        """Give every deck a new template pool and reset them."""
        pool = list(weapons)
        logger.info("Updating template pool: %d templates", len(pool))
        for deck in self._decks.values():
            deck.update_source_pool(pool)

    def apply_filters(
        self,
        weapons: Iterable[Weapon],
        selected_expansions: Iterable[str] | None = None,
        disabled: DisabledCards | None = None,
    ) -> None:
        """Rebuild every deck from the selected expansions, minus disabled cards."""
        self.update_pool(filter_pool(weapons, selected_expansions, disabled))

    def snapshot(self) -> CollectionSnapshot:
        return CollectionSnapshot(
            difficulty=self._difficulty,
            decks={deck_type: deck.snapshot() for deck_type, deck in self._decks.items()},
        )

    def restore(self, snapshot: CollectionSnapshot) -> None:
        """
        Restore every deck from a collection snapshot.

        Raises:
            SnapshotMismatchError: If a deck is missing, or a deck's
                difficulty disagrees with the collection's, or any deck
                snapshot does not match its deck. No deck is changed.
        """
        for deck_type in DeckType:
            deck_snapshot = snapshot.decks.get(deck_type)
            if deck_snapshot is None:
                raise SnapshotMismatchError("decks", f"missing {deck_type.value} deck")
            if deck_snapshot.difficulty != snapshot.difficulty:
                raise SnapshotMismatchError(
                    "difficulty",
                    f"{deck_type.value} deck is {deck_snapshot.difficulty.value}, "
                    f"collection is {snapshot.difficulty.value}",
                )
            # Validate every deck before touching any of them
            self._decks[deck_type].check_snapshot(deck_snapshot, adopt_difficulty=True)

        self._difficulty = snapshot.difficulty
        for deck_type, deck in self._decks.items():
            deck.restore(snapshot.decks[deck_type], adopt_difficulty=True)
