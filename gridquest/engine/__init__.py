"""Game engine package."""

from gridquest.engine.action_validator import ActionValidator
from gridquest.engine.combat import CombatSystem
from gridquest.engine.dice import DiceRoller
from gridquest.engine.game_engine import GameEngine, TurnReport
from gridquest.engine.state_serializer import StateSerializer
from gridquest.engine.time_manager import TimeManager

__all__ = [
    "ActionValidator",
    "CombatSystem",
    "DiceRoller",
    "GameEngine",
    "TurnReport",
    "StateSerializer",
    "TimeManager",
]
