"""
Weapon card model.

One immutable shape serves both as a template in the source pool and as a
physical card instance in a deck. Instances are produced from templates with
`Weapon.duplicate()`, which assigns a fresh identity, so many instances can
share identical attributes and still be told apart.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from uuid import UUID, uuid4


class WeaponCategory(str, Enum):
    """Melee, ranged, or both."""

    MELEE = "Melee"
    RANGED = "Ranged"
    MELEE_RANGED = "Melee Ranged"


class AmmoType(str, Enum):
    BULLETS = "Bullets"
    SHELLS = "Shells"
    NONE = ""

    @property
    def display_name(self) -> str:
        return "None" if self is AmmoType.NONE else self.value


class DeckType(str, Enum):
    """The three physical weapon decks. Template pools are partitioned by this key."""

    STARTING = "Starting"
    REGULAR = "Regular"
    ULTRARED = "Ultrared"


class DifficultyMode(str, Enum):
    """Controls how many copies of each template are built into a deck."""

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


# Name fragments that mark a bonus item rather than a weapon
BONUS_ITEM_NAMES = ("flashlight", "water", "bag", "food", "bullets", "shells")


@dataclass(frozen=True, slots=True)
class Weapon:
    """
    A weapon card from the Equipment decks.

    Attributes:
        name: Card name as printed
        expansion: Box or expansion the card ships in
        deck: Which deck the card belongs to
        count: Base number of copies in the deck
        category: Melee, ranged, or both
        dice: Number of dice rolled
        accuracy: Accuracy threshold as printed (e.g., "4+")
        damage: Damage per success
        range_min: Minimum range for ranged weapons
        range_max: Maximum range for ranged weapons
        fixed_range: Range for melee weapons (always 0)
        ammo_type: Ammo the weapon uses, if any
        open_door: Can open doors
        door_noise: Opening a door makes noise
        kill_noise: Attacking makes noise
        dual: Can be dual-wielded
        overload: Has the Overload ability
        overload_dice: Extra dice when overloaded
        special: Special rule text
        id: Identity of this physical card
    """

    name: str
    expansion: str
    deck: DeckType
    count: int
    category: WeaponCategory
    dice: int | None = None
    accuracy: str | None = None
    damage: int | None = None
    range_min: int | None = None
    range_max: int | None = None
    fixed_range: int | None = None
    ammo_type: AmmoType = AmmoType.NONE
    open_door: bool = False
    door_noise: bool = False
    kill_noise: bool = False
    dual: bool = False
    overload: bool = False
    overload_dice: int | None = None
    special: str = ""
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if self.count < 1:
            raise ValueError(f"Weapon '{self.name}' has invalid count {self.count} (must be > 0)")

    @property
    def accuracy_numeric(self) -> int | None:
        """Accuracy as a number ("4+" -> 4), or None when absent or unreadable."""
        if self.accuracy is None:
            return None
        try:
            return int(self.accuracy.replace("+", "").strip())
        except ValueError:
            return None

    @property
    def range_display(self) -> str:
        if self.fixed_range is not None:
            return str(self.fixed_range)
        if self.range_min is not None and self.range_max is not None:
            if self.range_min == self.range_max:
                return str(self.range_min)
            return f"{self.range_min}-{self.range_max}"
        return "-"

    @property
    def is_bonus(self) -> bool:
        """True for bonus items (Flashlight, Food, ...) that carry no combat stats."""
        if self.category is not WeaponCategory.MELEE:
            return False
        if self.dice is not None or self.damage is not None:
            return False
        lowered = self.name.lower()
        return any(fragment in lowered for fragment in BONUS_ITEM_NAMES)

    @property
    def is_zombie_card(self) -> bool:
        return "AAAHH" in self.name

    @property
    def power_score(self) -> int:
        """
        Rough strength of the weapon; higher is stronger.

        More dice and damage add power, a higher accuracy threshold takes
        it away. Missing stats count as zero.
        """
        dice = self.dice or 0
        damage = self.damage or 0
        accuracy = self.accuracy_numeric or 0
        return dice * 2 + damage * 3 - accuracy

    def duplicate(self, card_id: UUID | None = None) -> "Weapon":
        """Copy with a new identity (or the given one)."""
        return replace(self, id=card_id if card_id is not None else uuid4())
