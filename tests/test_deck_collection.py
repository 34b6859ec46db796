"""
Tests for the three-deck collection.

INVARIANT: Every deck reports the collection's difficulty.
"""

import random

import pytest

from actiontracker.config import settings
from actiontracker.models.pool import DisabledCards
from actiontracker.models.weapon import DeckType, DifficultyMode, Weapon
from actiontracker.services.deck_collection import DeckCollection


@pytest.fixture
def collection(mixed_pool: list[Weapon], rng: random.Random) -> DeckCollection:
    return DeckCollection(mixed_pool, DifficultyMode.MEDIUM, rng=rng)


class TestConstruction:
    def test_one_deck_per_type(self, collection: DeckCollection) -> None:
        assert [deck.deck_type for deck in collection] == list(DeckType)

    def test_decks_partition_the_pool(self, collection: DeckCollection) -> None:
        assert collection.get_deck(DeckType.STARTING).remaining_count == 2
        assert collection.get_deck(DeckType.REGULAR).remaining_count == 7
        assert collection.get_deck(DeckType.ULTRARED).remaining_count == 1

    def test_getitem_matches_get_deck(self, collection: DeckCollection) -> None:
        for deck_type in DeckType:
            assert collection[deck_type] is collection.get_deck(deck_type)

    def test_default_difficulty_from_settings(self, mixed_pool) -> None:
        collection = DeckCollection(mixed_pool)

        assert collection.difficulty == settings.default_difficulty
        assert all(deck.difficulty == settings.default_difficulty for deck in collection)

    def test_pool_missing_a_deck(self, axe_and_pistol, rng) -> None:
        collection = DeckCollection(axe_and_pistol, DifficultyMode.MEDIUM, rng=rng)

        assert collection.get_deck(DeckType.STARTING).draw() is None
        assert collection.get_deck(DeckType.REGULAR).remaining_count == 5

    def test_accepts_generator(self, mixed_pool, rng) -> None:
        collection = DeckCollection((w for w in mixed_pool), DifficultyMode.MEDIUM, rng=rng)

        assert sum(deck.remaining_count for deck in collection) == 10


class TestDifficulty:
    def test_set_difficulty_rebuilds_every_deck(self, collection: DeckCollection) -> None:
        regular = collection.get_deck(DeckType.REGULAR)
        regular.discard(regular.draw())

        collection.set_difficulty(DifficultyMode.HARD)

        assert collection.difficulty is DifficultyMode.HARD
        assert all(deck.difficulty is DifficultyMode.HARD for deck in collection)
        assert collection.get_deck(DeckType.STARTING).remaining_count == 7
        assert regular.remaining_count == 16
        assert regular.discard_count == 0
        assert collection.get_deck(DeckType.ULTRARED).remaining_count == 1

    def test_easy_weighting(self, collection: DeckCollection) -> None:
        collection.set_difficulty(DifficultyMode.EASY)

        assert collection.get_deck(DeckType.REGULAR).remaining_count == 9
        assert collection.get_deck(DeckType.ULTRARED).remaining_count == 3

    def test_same_difficulty_is_noop(self, collection: DeckCollection) -> None:
        regular = collection.get_deck(DeckType.REGULAR)
        card = regular.draw()
        regular.discard(card)

        collection.set_difficulty(DifficultyMode.MEDIUM)

        assert regular.discard_pile == (card,)
        assert regular.remaining_count == 6


class TestBulkOperations:
    def test_reset_all(self, collection: DeckCollection) -> None:
        for deck in collection:
            card = deck.draw()
            deck.discard(card)

        collection.reset_all()

        for deck in collection:
            assert deck.discard_count == 0
            assert deck.draw_history == ()
            assert deck.remaining_count == deck.total_built

    def test_update_pool(self, collection: DeckCollection, make_weapon) -> None:
        new_pool = [
            make_weapon("Katana", count=2),
            make_weapon("Golden Kukri", deck=DeckType.ULTRARED),
        ]

        collection.update_pool(new_pool)

        assert collection.get_deck(DeckType.STARTING).is_empty
        assert collection.get_deck(DeckType.REGULAR).remaining_count == 2
        assert collection.get_deck(DeckType.ULTRARED).remaining_count == 1
        assert collection.difficulty is DifficultyMode.MEDIUM

    def test_apply_filters_by_expansion(self, mixed_pool, make_weapon, rng) -> None:
        pool = [*mixed_pool, make_weapon("Kukri", expansion="Washington Z.C.")]
        collection = DeckCollection(pool, DifficultyMode.MEDIUM, rng=rng)
        assert collection.get_deck(DeckType.REGULAR).remaining_count == 8

        collection.apply_filters(pool, selected_expansions=["Washington Z.C."])

        regular = collection.get_deck(DeckType.REGULAR)
        assert [weapon.name for weapon in regular.source_pool] == ["Kukri"]
        assert collection.get_deck(DeckType.STARTING).is_empty

    def test_apply_filters_disabled_cards(self, collection: DeckCollection, mixed_pool) -> None:
        disabled = DisabledCards()
        disabled.disable("Chainsaw", "Core Box")

        collection.apply_filters(mixed_pool, disabled=disabled)

        regular = collection.get_deck(DeckType.REGULAR)
        assert {weapon.name for weapon in regular.source_pool} == {"Axe", "Pistol"}
        assert regular.remaining_count == 5
