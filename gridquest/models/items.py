"""Item and equipment models."""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ItemKind(str, Enum):
    """Equipment kind used to pick the slot an item goes into."""

    GENERIC = "generic"
    WEAPON = "weapon"
    ARMOUR = "armour"
    SHIELD = "shield"
    RING = "ring"


class Item(BaseModel):
    """Anything that can lie on a board cell."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Item name")
    weight: int = Field(ge=0, description="Weight counted against the carrier's strength")
    kind: Literal[ItemKind.GENERIC] = Field(default=ItemKind.GENERIC, description="Equipment kind (slot selector)")


class Weapon(Item):
    """Weapon that raises attack."""

    kind: Literal[ItemKind.WEAPON] = ItemKind.WEAPON
    attack_bonus: int = Field(default=0, description="Attack added while wielded")


class Armour(Item):
    """Body armour: raises defence, may lower attack."""

    kind: Literal[ItemKind.ARMOUR] = ItemKind.ARMOUR
    defence_bonus: int = Field(default=0, description="Defence added while worn")
    attack_penalty: int = Field(default=0, description="Attack removed while worn")


class Shield(Item):
    """Shield: same modifiers as armour, separate slot."""

    kind: Literal[ItemKind.SHIELD] = ItemKind.SHIELD
    defence_bonus: int = Field(default=0, description="Defence added while carried")
    attack_penalty: int = Field(default=0, description="Attack removed while carried")


class Ring(Item):
    """Ring; any number of them can be worn."""

    kind: Literal[ItemKind.RING] = ItemKind.RING
    health_delta: int = Field(default=0, description="Change to maximum health (may be negative)")
    strength_bonus: int = Field(default=0, description="Strength added (also counts towards attack)")
