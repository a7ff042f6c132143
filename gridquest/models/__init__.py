"""Data models module for GridQuest."""

# Stats
from gridquest.models.stats import ORC_DAY_STATS, ORC_NIGHT_STATS, RACE_BASE_STATS, BaseStats, Race

# Items
from gridquest.models.items import Armour, Item, ItemKind, Ring, Shield, Weapon

# Actions and Combat
from gridquest.models.actions import (
    Action,
    ActionType,
    AttackOutcome,
    AttackResult,
    Direction,
    DropSlot,
    EquipmentOutcome,
)

# Characters
from gridquest.models.character import (
    CHARACTER_CLASSES,
    Character,
    Dwarf,
    Elf,
    Hobbit,
    Human,
    Orc,
    create_character,
)

# Board
from gridquest.models.board import Board, BoardCapacityError, Cell

# State
from gridquest.models.state import GameState

__all__ = [
    # Stats
    "BaseStats",
    "Race",
    "RACE_BASE_STATS",
    "ORC_DAY_STATS",
    "ORC_NIGHT_STATS",
    # Items
    "Item",
    "ItemKind",
    "Weapon",
    "Armour",
    "Shield",
    "Ring",
    # Actions and Combat
    "Action",
    "ActionType",
    "AttackOutcome",
    "AttackResult",
    "Direction",
    "DropSlot",
    "EquipmentOutcome",
    # Characters
    "Character",
    "Human",
    "Elf",
    "Dwarf",
    "Hobbit",
    "Orc",
    "CHARACTER_CLASSES",
    "create_character",
    # Board
    "Board",
    "BoardCapacityError",
    "Cell",
    # State
    "GameState",
]
