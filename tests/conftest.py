import random
from collections.abc import Callable
from typing import Any

import pytest

from actiontracker.models.weapon import DeckType, Weapon, WeaponCategory

WeaponFactory = Callable[..., Weapon]


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so deck order is reproducible."""
    return random.Random(1234)


@pytest.fixture
def make_weapon() -> WeaponFactory:
    """Build a template with sensible defaults; override any field by keyword."""

    def _make(name: str, count: int = 1, **overrides: Any) -> Weapon:
        fields: dict[str, Any] = {
            "name": name,
            "expansion": "Core Box",
            "deck": DeckType.REGULAR,
            "count": count,
            "category": WeaponCategory.MELEE,
        }
        fields.update(overrides)
        return Weapon(**fields)

    return _make


@pytest.fixture
def axe_and_pistol(make_weapon: WeaponFactory) -> list[Weapon]:
    """
    Two Regular templates.

    Axe x3: dice 1, damage 2, accuracy 3+ (Hard doubles it for low dice)
    Pistol x2: dice 1, damage 1, accuracy 4+ (Hard triples it)
    """
    return [
        make_weapon("Axe", count=3, dice=1, accuracy="3+", damage=2),
        make_weapon(
            "Pistol",
            count=2,
            category=WeaponCategory.RANGED,
            dice=1,
            accuracy="4+",
            damage=1,
            range_min=0,
            range_max=1,
        ),
    ]


@pytest.fixture
def mixed_pool(make_weapon: WeaponFactory, axe_and_pistol: list[Weapon]) -> list[Weapon]:
    """Templates spread across all three decks."""
    return [
        make_weapon("Crowbar", deck=DeckType.STARTING, dice=1, accuracy="4+", damage=1),
        make_weapon("Pan", deck=DeckType.STARTING, dice=1, accuracy="6+", damage=1),
        *axe_and_pistol,
        make_weapon("Chainsaw", count=2, dice=5, accuracy="5+", damage=2),
        make_weapon("Nailbat", deck=DeckType.ULTRARED, dice=4, accuracy="3+", damage=3),
    ]
