"""
Weapon deck state.

Owns one physical deck (Starting, Regular, or Ultrared): the draw pile, the
discard pile, and the log of drawn cards.

Lifecycle:
    build -> shuffle -> draw <-> discard -> reshuffle on exhaustion -> reset

INVARIANT: Every card in the draw pile, discard pile, or history came from a
single build of this deck's pool. A drawn card that has not been discarded
belongs to the caller and sits in neither pile.

INVARIANT: remaining_count + discard_count <= total_built. The gap is the
number of cards in play. When the deck and discard pile both run dry a fresh
build is made, and cards still in play from the old build fall outside this
count.

Rebuilds (reset, change_difficulty, update_source_pool) are destructive:
discard and history are dropped and cards in play are forgotten.
"""

import logging
import random
from collections.abc import Iterable, Sequence
from uuid import UUID

from actiontracker.config import MAX_SHUFFLE_ATTEMPTS, RECENT_DRAWS_LIMIT
from actiontracker.models.pool import filter_by_deck
from actiontracker.models.snapshot import CardRef, DeckSnapshot, SnapshotMismatchError
from actiontracker.models.weapon import DeckType, DifficultyMode, Weapon

logger = logging.getLogger(__name__)


def effective_count(weapon: Weapon, mode: DifficultyMode) -> int:
    """
    Number of copies of a template built into a deck at a difficulty.

    Easy weights toward strong weapons, Hard toward weak ones. Each
    qualifying condition adds one more base count; missing stats never
    qualify.

    - Easy: +base if dice >= 4, +base if damage >= 3 (up to 3x)
    - Medium: base
    - Hard: +base if dice <= 2, +base if damage <= 1,
      +base if accuracy >= 5 (up to 4x)
    """
    base = weapon.count

    if mode is DifficultyMode.MEDIUM:
        return base

    count = base
    if mode is DifficultyMode.EASY:
        if weapon.dice is not None and weapon.dice >= 4:
            count += base
        if weapon.damage is not None and weapon.damage >= 3:
            count += base
    elif mode is DifficultyMode.HARD:
        accuracy = weapon.accuracy_numeric
        if weapon.dice is not None and weapon.dice <= 2:
            count += base
        if weapon.damage is not None and weapon.damage <= 1:
            count += base
        if accuracy is not None and accuracy >= 5:
            count += base
    return count


def has_adjacent_duplicates(cards: Sequence[Weapon]) -> bool:
    """True if any two neighbouring cards share a name."""
    return any(cards[i].name == cards[i + 1].name for i in range(len(cards) - 1))


def _take_by_id(pile: list[Weapon], card: Weapon) -> bool:
    """Remove the card with the same identity from a pile; False if absent."""
    for index, held in enumerate(pile):
        if held.id == card.id:
            del pile[index]
            return True
    return False


class DeckState:
    """
    State of a single weapon deck.

    Args:
        deck_type: Which deck this is
        difficulty: Difficulty the deck is built at
        weapons: Template pool; filtered down to `deck_type`
        rng: Random source for shuffling. Pass a seeded instance for
            reproducible order.
    """

    def __init__(
        self,
        deck_type: DeckType,
        difficulty: DifficultyMode,
        weapons: Iterable[Weapon],
        rng: random.Random | None = None,
    ) -> None:
        self.deck_type = deck_type
        self.difficulty = difficulty
        self._rng = rng if rng is not None else random.Random()
        self._source = filter_by_deck(weapons, deck_type)

        self._remaining: list[Weapon] = []
        self._discard: list[Weapon] = []
        self._history: list[Weapon] = []
        self._total_built = 0

        self.reset()

    # =========================================================================
    # DECK MANAGEMENT
    # =========================================================================

    def reset(self) -> None:
        """Rebuild and shuffle at the current difficulty; clear discard and history."""
        self._remaining = self._build_deck(self.difficulty)
        self.shuffle()
        self._discard.clear()
        self._history.clear()
        logger.info(
            "Reset %s deck at %s: %d cards",
            self.deck_type.value,
            self.difficulty.value,
            len(self._remaining),
        )

    def shuffle(self) -> None:
        """
        Shuffle the draw pile, avoiding identical cards next to each other.

        Best effort: up to MAX_SHUFFLE_ATTEMPTS full permutations are tried
        and the first one without adjacent duplicates wins. If none is found
        the last permutation is kept as is. The Starting deck is too small
        for the constraint and always gets a single plain shuffle.
        """
        if self.deck_type is DeckType.STARTING or len(self._remaining) <= 1:
            self._rng.shuffle(self._remaining)
            return

        for _ in range(MAX_SHUFFLE_ATTEMPTS):
            self._rng.shuffle(self._remaining)
            if not has_adjacent_duplicates(self._remaining):
                return

        logger.debug(
            "Accepted %s deck order with adjacent duplicates after %d attempts",
            self.deck_type.value,
            MAX_SHUFFLE_ATTEMPTS,
        )

    def change_difficulty(self, mode: DifficultyMode) -> None:
        self.difficulty = mode
        self.reset()

    def update_source_pool(self, weapons: Iterable[Weapon]) -> None:
        """Replace the template pool (e.g. after an expansion filter change) and reset."""
        self._source = filter_by_deck(weapons, self.deck_type)
        self.reset()

    # =========================================================================
    # DRAWING
    # =========================================================================

    def draw(self) -> Weapon | None:
        """
        Draw the top card.

        Reshuffles the discard pile in when the draw pile runs out. Returns
        None only when this deck's template pool is empty.
        """
        if not self._remaining:
            self._reshuffle_on_exhaustion()

        if not self._remaining:
            return None

        card = self._remaining.pop(0)
        self._history.insert(0, card)
        logger.debug("Drew %s from %s deck", card.name, self.deck_type.value)
        return card

    def draw_two(self) -> list[Weapon]:
        """Draw up to two cards (Flashlight and similar effects)."""
        cards: list[Weapon] = []
        for _ in range(2):
            card = self.draw()
            if card is None:
                break
            cards.append(card)
        return cards

    def peek(self, n: int = 1) -> tuple[Weapon, ...]:
        """The next `n` cards without drawing them."""
        return tuple(self._remaining[:n])

    def _reshuffle_on_exhaustion(self) -> None:
        if self._discard:
            logger.info(
                "%s deck exhausted, reshuffling %d discarded cards",
                self.deck_type.value,
                len(self._discard),
            )
            self._remaining.extend(self._discard)
            self._discard.clear()
            self.shuffle()
            return

        # Nothing to reshuffle: manufacture a fresh deck rather than run dry
        self._remaining = self._build_deck(self.difficulty)
        self.shuffle()
        if self._remaining:
            logger.warning(
                "%s deck and discard both empty, rebuilt %d cards",
                self.deck_type.value,
                len(self._remaining),
            )

    # =========================================================================
    # DISCARD MANAGEMENT
    # =========================================================================

    def discard(self, card: Weapon) -> None:
        """Put a card on top of the discard pile."""
        self._discard.insert(0, card)
        logger.debug("Discarded %s to %s deck", card.name, self.deck_type.value)

    def return_to_top(self, card: Weapon) -> None:
        """Move a card from the discard pile to the top of the deck. No-op if not discarded."""
        if self._take_from_discard(card):
            self._remaining.insert(0, card)

    def return_to_bottom(self, card: Weapon) -> None:
        """Move a card from the discard pile to the bottom of the deck. No-op if not discarded."""
        if self._take_from_discard(card):
            self._remaining.append(card)

    def remove_from_discard(self, card: Weapon) -> None:
        """Take a card out of the discard pile entirely (e.g. into an inventory)."""
        self._take_from_discard(card)

    def reclaim_all_discard(self, shuffle: bool = True) -> None:
        """Move the whole discard pile back into the deck."""
        self._remaining.extend(self._discard)
        self._discard.clear()
        if shuffle:
            self.shuffle()

    def clear_discard(self) -> None:
        """Drop the discard pile. Those cards leave the simulation."""
        self._discard.clear()

    def _take_from_discard(self, card: Weapon) -> bool:
        return _take_by_id(self._discard, card)

    # =========================================================================
    # DECK REORDERING
    # =========================================================================

    def remove_from_deck(self, card: Weapon) -> None:
        """Take a card out of the draw pile entirely (e.g. into an inventory)."""
        _take_by_id(self._remaining, card)

    def move_to_top(self, card: Weapon) -> None:
        """Move a card already in the draw pile to the top. No-op if not in the pile."""
        if _take_by_id(self._remaining, card):
            self._remaining.insert(0, card)

    def move_to_bottom(self, card: Weapon) -> None:
        if _take_by_id(self._remaining, card):
            self._remaining.append(card)

    def discard_from_deck(self, card: Weapon) -> None:
        """Move a card from the draw pile straight onto the discard pile."""
        if _take_by_id(self._remaining, card):
            self._discard.insert(0, card)
            logger.debug("Discarded %s from %s deck", card.name, self.deck_type.value)

    # =========================================================================
    # DECK BUILDING
    # =========================================================================

    def _build_deck(self, mode: DifficultyMode) -> list[Weapon]:
        deck = [
            weapon.duplicate()
            for weapon in self._source
            for _ in range(effective_count(weapon, mode))
        ]
        self._total_built = len(deck)
        return deck

    # =========================================================================
    # SNAPSHOTS
    # =========================================================================

    def snapshot(self) -> DeckSnapshot:
        return DeckSnapshot(
            deck_type=self.deck_type,
            difficulty=self.difficulty,
            remaining=[CardRef.from_weapon(card) for card in self._remaining],
            discard=[CardRef.from_weapon(card) for card in self._discard],
            history=[CardRef.from_weapon(card) for card in self._history],
            total_built=self._total_built,
        )

    def restore(self, snapshot: DeckSnapshot, adopt_difficulty: bool = False) -> None:
        """
        Replace all piles with the ones described by a snapshot.

        Cards are rebuilt from the current template pool, keeping their
        stored identities. The snapshot must have been taken at this deck's
        difficulty. `DeckCollection.restore` passes `adopt_difficulty=True`
        so the whole collection switches difficulty together.

        Raises:
            SnapshotMismatchError: If the snapshot is for another deck or
                difficulty, lists a card twice in its piles, or references a
                template not in the pool. The deck is left unchanged.
        """
        remaining, discard, history = self._materialize(snapshot, adopt_difficulty)
        self.difficulty = snapshot.difficulty
        self._remaining = remaining
        self._discard = discard
        self._history = history
        self._total_built = snapshot.total_built
        logger.info(
            "Restored %s deck: %d remaining, %d discarded",
            self.deck_type.value,
            len(remaining),
            len(discard),
        )

    def check_snapshot(self, snapshot: DeckSnapshot, adopt_difficulty: bool = False) -> None:
        """Raise SnapshotMismatchError if `restore(snapshot)` would fail."""
        self._materialize(snapshot, adopt_difficulty)

    def _materialize(
        self, snapshot: DeckSnapshot, adopt_difficulty: bool
    ) -> tuple[list[Weapon], list[Weapon], list[Weapon]]:
        if snapshot.deck_type != self.deck_type:
            raise SnapshotMismatchError(
                "deck_type",
                f"expected {self.deck_type.value}, got {snapshot.deck_type.value}",
            )
        if not adopt_difficulty and snapshot.difficulty != self.difficulty:
            raise SnapshotMismatchError(
                "difficulty",
                f"expected {self.difficulty.value}, got {snapshot.difficulty.value}",
            )

        # A card is either in the draw pile or the discard pile, never both.
        # History may repeat ids held in either.
        seen: set[UUID] = set()
        for ref in [*snapshot.remaining, *snapshot.discard]:
            if ref.id in seen:
                raise SnapshotMismatchError(
                    "card", f"'{ref.name}' ({ref.id}) appears more than once in the piles"
                )
            seen.add(ref.id)

        templates = {(weapon.name, weapon.expansion): weapon for weapon in self._source}
        instances: dict[UUID, Weapon] = {}

        def resolve(ref: CardRef) -> Weapon:
            if ref.id in instances:
                return instances[ref.id]
            template = templates.get((ref.name, ref.expansion))
            if template is None:
                raise SnapshotMismatchError(
                    "card",
                    f"'{ref.name}' ({ref.expansion}) is not in the {self.deck_type.value} pool",
                )
            instances[ref.id] = template.duplicate(card_id=ref.id)
            return instances[ref.id]

        return (
            [resolve(ref) for ref in snapshot.remaining],
            [resolve(ref) for ref in snapshot.discard],
            [resolve(ref) for ref in snapshot.history],
        )

    # =========================================================================
    # VIEWS
    # =========================================================================

    @property
    def source_pool(self) -> tuple[Weapon, ...]:
        return self._source

    @property
    def discard_pile(self) -> tuple[Weapon, ...]:
        """Discarded cards, most recent first."""
        return tuple(self._discard)

    @property
    def draw_history(self) -> tuple[Weapon, ...]:
        """Every card drawn since the last rebuild, most recent first."""
        return tuple(self._history)

    @property
    def recent_draws(self) -> tuple[Weapon, ...]:
        return tuple(self._history[:RECENT_DRAWS_LIMIT])

    @property
    def remaining_count(self) -> int:
        return len(self._remaining)

    @property
    def discard_count(self) -> int:
        return len(self._discard)

    @property
    def is_empty(self) -> bool:
        return not self._remaining

    @property
    def total_built(self) -> int:
        """Size of the most recent full build."""
        return self._total_built

    @property
    def in_play_count(self) -> int:
        """Cards drawn and not yet discarded or returned."""
        return max(0, self._total_built - len(self._remaining) - len(self._discard))
