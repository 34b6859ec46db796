"""
Template pool filtering.

The full template pool is owned by the caller. Before it reaches the decks it
can be narrowed to the expansions a group owns and to the cards they have not
switched off; each deck then narrows it further to its own category.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from actiontracker.models.weapon import DeckType, Weapon


def filter_by_deck(weapons: Iterable[Weapon], deck_type: DeckType) -> tuple[Weapon, ...]:
    """Templates belonging to one deck, in pool order."""
    return tuple(weapon for weapon in weapons if weapon.deck == deck_type)


def list_expansions(weapons: Iterable[Weapon]) -> list[str]:
    """Sorted unique expansion names in a pool."""
    return sorted({weapon.expansion for weapon in weapons})


@dataclass
class DisabledCards:
    """
    Cards switched off by the players, tracked per expansion.

    Structure: {expansion: {card_name, ...}}. Expansions with no disabled
    cards are dropped from the mapping so `has_custom` stays accurate.
    """

    by_expansion: dict[str, set[str]] = field(default_factory=dict)

    def is_disabled(self, name: str, expansion: str) -> bool:
        return name in self.by_expansion.get(expansion, set())

    def disable(self, name: str, expansion: str) -> None:
        self.by_expansion.setdefault(expansion, set()).add(name)

    def enable(self, name: str, expansion: str) -> None:
        disabled = self.by_expansion.get(expansion)
        if disabled is None:
            return
        disabled.discard(name)
        if not disabled:
            del self.by_expansion[expansion]

    def toggle(self, name: str, expansion: str) -> None:
        if self.is_disabled(name, expansion):
            self.enable(name, expansion)
        else:
            self.disable(name, expansion)

    def set_cards(
        self,
        enabled: bool,
        deck_type: DeckType,
        expansion: str,
        weapons: Iterable[Weapon],
    ) -> None:
        """Enable or disable every card of one deck within an expansion."""
        for weapon in weapons:
            if weapon.expansion != expansion or weapon.deck != deck_type:
                continue
            if enabled:
                self.enable(weapon.name, expansion)
            else:
                self.disable(weapon.name, expansion)

    def disabled_for(self, expansion: str) -> list[str]:
        return sorted(self.by_expansion.get(expansion, set()))

    @property
    def has_custom(self) -> bool:
        return bool(self.by_expansion)

    def clear_all(self) -> None:
        self.by_expansion.clear()


def filter_pool(
    weapons: Iterable[Weapon],
    selected_expansions: Iterable[str] | None = None,
    disabled: DisabledCards | None = None,
) -> list[Weapon]:
    """
    Narrow a template pool to selected expansions and enabled cards.

    Args:
        weapons: Full template pool
        selected_expansions: Expansions to keep. None keeps every expansion.
        disabled: Cards switched off per expansion

    Returns:
        Matching templates in their original order
    """
    selected = set(selected_expansions) if selected_expansions is not None else None

    result = []
    for weapon in weapons:
        if selected is not None and weapon.expansion not in selected:
            continue
        if disabled is not None and disabled.is_disabled(weapon.name, weapon.expansion):
            continue
        result.append(weapon)
    return result
