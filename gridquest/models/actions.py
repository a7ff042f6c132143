"""Action, outcome and combat result models."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ActionType(str, Enum):
    """Commands a player can issue during a turn."""

    MOVE = "move"
    PICK_UP = "pick_up"
    ATTACK = "attack"
    DROP = "drop"
    LOOK = "look"
    INVENTORY = "inventory"
    EXIT = "exit"


class Direction(str, Enum):
    """Movement directions on the board."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> tuple[int, int]:
        """(row, column) step for this direction."""
        return _DIRECTION_OFFSETS[self]

    @classmethod
    def from_key(cls, key: str) -> Optional["Direction"]:
        """Get direction from a name or one of the w/a/s/d keys."""
        key_lower = key.lower().strip()
        if key_lower in _DIRECTION_KEYS:
            return _DIRECTION_KEYS[key_lower]
        try:
            return cls(key_lower)
        except ValueError:
            return None


_DIRECTION_OFFSETS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_DIRECTION_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}


class DropSlot(str, Enum):
    """Equipment slots that can be emptied."""

    WEAPON = "weapon"
    ARMOUR = "armour"
    SHIELD = "shield"
    RING = "ring"


class EquipmentOutcome(str, Enum):
    """Result of picking up or dropping equipment."""

    EQUIPPED = "equipped"
    TOO_HEAVY = "too_heavy"
    NOT_RECOGNIZED = "not_recognized"
    DROPPED = "dropped"
    NOTHING_TO_DROP = "nothing_to_drop"
    INVALID_RING_INDEX = "invalid_ring_index"

    @property
    def succeeded(self) -> bool:
        """Whether equipment actually changed."""
        return self in (EquipmentOutcome.EQUIPPED, EquipmentOutcome.DROPPED)


class AttackOutcome(str, Enum):
    """The single thing that happened during an attack exchange."""

    MISS = "miss"
    DEFENDED = "defended"
    DAMAGED = "damaged"
    BLOCKED = "blocked"


class Action(BaseModel):
    """Player command with its parameters."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    action_type: ActionType = Field(description="Type of action")
    parameters: dict[str, Any] = Field(
        default_factory=dict, description="Action parameters (direction, slot, index)"
    )


class AttackResult(BaseModel):
    """Outcome of one attack exchange."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    attacker: str = Field(description="Attacker name")
    defender: str = Field(description="Defender name")
    outcome: AttackOutcome = Field(description="What happened")
    damage: int = Field(ge=0, default=0, description="Health removed by the damage step")
    health_change: int = Field(default=0, description="Net change of the defender's current health")
    defender_health: int = Field(ge=0, description="Defender's current health after the exchange")
    defeated: bool = Field(default=False, description="Whether the defender is defeated")
    attack_roll: float = Field(ge=0.0, le=1.0, description="Attack roll drawn")
    defence_roll: Optional[float] = Field(
        default=None, ge=0.0, le=1.0, description="Defence roll drawn (None on a miss)"
    )
