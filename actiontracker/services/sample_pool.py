"""
Sample template pool for demo mode.

A small hand-picked set of weapons covering all three decks, enough to
exercise deck building, difficulty weighting and the duplicate-avoiding
shuffle without loading the full card list.

DESIGN PRINCIPLE: Sample data is intentionally minimal. The full weapon list
is owned by the caller and passed to the engine; this pool is for demos and
the simulation job only.
"""

from actiontracker.models.weapon import AmmoType, DeckType, Weapon, WeaponCategory

CORE_BOX = "Core Box"

SAMPLE_POOL: tuple[Weapon, ...] = (
    # Starting (5)
    Weapon(
        name="Crowbar",
        expansion=CORE_BOX,
        deck=DeckType.STARTING,
        count=1,
        category=WeaponCategory.MELEE,
        dice=1,
        accuracy="4+",
        damage=1,
        fixed_range=0,
        open_door=True,
    ),
    Weapon(
        name="Fire Axe",
        expansion=CORE_BOX,
        deck=DeckType.STARTING,
        count=1,
        category=WeaponCategory.MELEE,
        dice=1,
        accuracy="4+",
        damage=2,
        fixed_range=0,
        open_door=True,
        door_noise=True,
    ),
    Weapon(
        name="Pistol",
        expansion=CORE_BOX,
        deck=DeckType.STARTING,
        count=2,
        category=WeaponCategory.RANGED,
        dice=1,
        accuracy="4+",
        damage=1,
        range_min=0,
        range_max=1,
        ammo_type=AmmoType.BULLETS,
        kill_noise=True,
        dual=True,
    ),
    Weapon(
        name="Pan",
        expansion=CORE_BOX,
        deck=DeckType.STARTING,
        count=1,
        category=WeaponCategory.MELEE,
        dice=1,
        accuracy="6+",
        damage=1,
        fixed_range=0,
    ),
    # Regular (18)
    Weapon(
        name="Katana",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.MELEE,
        dice=2,
        accuracy="4+",
        damage=1,
        fixed_range=0,
        dual=True,
    ),
    Weapon(
        name="Shotgun",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.RANGED,
        dice=2,
        accuracy="4+",
        damage=2,
        range_min=0,
        range_max=1,
        ammo_type=AmmoType.SHELLS,
        kill_noise=True,
        open_door=True,
        door_noise=True,
    ),
    Weapon(
        name="Sub-MG",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.RANGED,
        dice=3,
        accuracy="5+",
        damage=1,
        range_min=0,
        range_max=1,
        ammo_type=AmmoType.BULLETS,
        kill_noise=True,
        dual=True,
    ),
    Weapon(
        name="Chainsaw",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.MELEE,
        dice=5,
        accuracy="5+",
        damage=2,
        fixed_range=0,
        open_door=True,
        door_noise=True,
        kill_noise=True,
    ),
    Weapon(
        name="Sniper Rifle",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.RANGED,
        dice=1,
        accuracy="3+",
        damage=2,
        range_min=1,
        range_max=3,
        ammo_type=AmmoType.BULLETS,
        kill_noise=True,
        special="Sniper mode: choose the targets freely.",
    ),
    Weapon(
        name="Flashlight",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.MELEE,
        special="Draw 2 cards when searching.",
    ),
    Weapon(
        name="Plenty of Bullets",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.MELEE,
        special="Re-roll Bullets weapons.",
    ),
    Weapon(
        name="Canned Food",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.MELEE,
        special="Discard for 3 XP.",
    ),
    Weapon(
        name="AAAHH!!",
        expansion=CORE_BOX,
        deck=DeckType.REGULAR,
        count=2,
        category=WeaponCategory.MELEE,
        special="Spawn a Walker in your Zone. Discard and search again.",
    ),
    # Ultrared (4)
    Weapon(
        name="Ma's Shotgun",
        expansion=CORE_BOX,
        deck=DeckType.ULTRARED,
        count=1,
        category=WeaponCategory.MELEE_RANGED,
        dice=2,
        accuracy="3+",
        damage=3,
        range_min=0,
        range_max=1,
        ammo_type=AmmoType.SHELLS,
        kill_noise=True,
        open_door=True,
        door_noise=True,
    ),
    Weapon(
        name="Golden Kukri",
        expansion=CORE_BOX,
        deck=DeckType.ULTRARED,
        count=1,
        category=WeaponCategory.MELEE,
        dice=3,
        accuracy="3+",
        damage=2,
        fixed_range=0,
        dual=True,
    ),
    Weapon(
        name="Nailbat",
        expansion=CORE_BOX,
        deck=DeckType.ULTRARED,
        count=1,
        category=WeaponCategory.MELEE,
        dice=4,
        accuracy="3+",
        damage=3,
        fixed_range=0,
    ),
    Weapon(
        name="Army Sniper Rifle",
        expansion=CORE_BOX,
        deck=DeckType.ULTRARED,
        count=1,
        category=WeaponCategory.RANGED,
        dice=2,
        accuracy="2+",
        damage=3,
        range_min=1,
        range_max=3,
        ammo_type=AmmoType.BULLETS,
        kill_noise=True,
        overload=True,
        overload_dice=2,
    ),
)


def get_sample_pool() -> list[Weapon]:
    """
    Get the sample template pool.

    Returns a new list so callers can filter or extend it freely; the
    templates themselves are immutable.
    """
    return list(SAMPLE_POOL)
