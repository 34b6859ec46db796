"""
Deck snapshots.

Plain pydantic models describing the piles of each deck as ordered card
references. An external persistence layer can serialize these however it
likes; the engine only produces and consumes them.
"""

from uuid import UUID

from pydantic import BaseModel, Field

from actiontracker.models.weapon import DeckType, DifficultyMode, Weapon


class SnapshotMismatchError(Exception):
    """Raised when a snapshot cannot be applied to a deck."""

    def __init__(self, field_name: str, detail: str) -> None:
        self.field_name = field_name
        self.detail = detail
        super().__init__(f"Snapshot does not match deck ({field_name}): {detail}")


class CardRef(BaseModel):
    """One physical card: its identity plus the template it was built from."""

    id: UUID
    name: str
    expansion: str

    @classmethod
    def from_weapon(cls, weapon: Weapon) -> "CardRef":
        return cls(id=weapon.id, name=weapon.name, expansion=weapon.expansion)


class DeckSnapshot(BaseModel):
    """Piles of a single deck, each ordered front first."""

    deck_type: DeckType
    difficulty: DifficultyMode
    remaining: list[CardRef] = Field(default_factory=list)
    discard: list[CardRef] = Field(default_factory=list)
    history: list[CardRef] = Field(default_factory=list)
    total_built: int = Field(default=0, ge=0)


class CollectionSnapshot(BaseModel):
    """Every deck of a collection plus the shared difficulty."""

    difficulty: DifficultyMode
    decks: dict[DeckType, DeckSnapshot] = Field(default_factory=dict)
