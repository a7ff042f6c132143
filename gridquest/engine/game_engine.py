"""Turn engine: applies player commands to the game state."""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from gridquest.config import GameSettings
from gridquest.engine.action_validator import ActionValidator
from gridquest.engine.combat import CombatSystem
from gridquest.engine.state_serializer import StateSerializer
from gridquest.engine.time_manager import TimeManager
from gridquest.helpers.debug import log_call
from gridquest.models.actions import (
    Action,
    ActionType,
    AttackResult,
    Direction,
    DropSlot,
    EquipmentOutcome,
)
from gridquest.models.state import GameState

logger = logging.getLogger(__name__.split(".")[-1])


class TurnReport(BaseModel):
    """What happened while applying one command."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    success: bool = Field(description="Whether the command was accepted")
    error: str = Field(default="", description="Why the command was rejected")
    messages: list[str] = Field(default_factory=list, description="Events, in order")
    attacks: list[AttackResult] = Field(default_factory=list, description="Attack exchanges, in order")
    equipment_outcome: Optional[EquipmentOutcome] = Field(
        default=None, description="Result of a pick-up or drop"
    )
    details: dict[str, Any] = Field(default_factory=dict, description="Look/inventory data")
    time_changed: bool = Field(default=False, description="Whether day/night flipped this turn")
    is_night: bool = Field(default=False, description="Time of day after the turn")
    is_over: bool = Field(default=False, description="Whether the game ended")
    victory: bool = Field(default=False, description="Whether the player won")


class GameEngine:
    """Main state machine for turn processing."""

    def __init__(
        self,
        state: GameState,
        rng: Optional[Any] = None,
        settings: Optional[GameSettings] = None,
        gold_per_kill: Optional[int] = None,
        day_night_period: Optional[int] = None,
    ) -> None:
        """
        Initialize game engine.

        Args:
            state: Game state to drive (mutated in place)
            rng: Optional random source for combat
            settings: Game settings (environment defaults when None)
            gold_per_kill: Override for the gold awarded per defeated enemy
            day_night_period: Override for the commands per day (and per night)

        Raises:
            ValidationError: If an override is out of range
        """
        settings = settings or GameSettings()
        overrides = {
            key: value
            for key, value in (("gold_per_kill", gold_per_kill), ("day_night_period", day_night_period))
            if value is not None
        }
        if overrides:
            settings = GameSettings(**{**settings.model_dump(), **overrides})

        self._state = state
        self._rng = rng
        self._settings = settings

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._state

    @log_call
    def apply_action(self, action: Action) -> TurnReport:
        """
        Apply one command.

        The player is lifted off its cell, the command runs, the day/night
        cycle advances and the player is put back on its (possibly new) cell.

        Args:
            action: Action to apply

        Returns:
            TurnReport for the command
        """
        is_valid, error_msg = ActionValidator.validate_action(action, self._state)
        if not is_valid:
            logger.warning(f"Rejected {action.action_type.value}: {error_msg}")
            return self._report(success=False, error=error_msg)

        state = self._state
        state.current_cell.player = None

        report: dict[str, Any] = {"messages": [], "attacks": []}
        handler = {
            ActionType.MOVE: self._move,
            ActionType.PICK_UP: self._pick_up,
            ActionType.ATTACK: self._attack,
            ActionType.DROP: self._drop,
            ActionType.LOOK: self._look,
            ActionType.INVENTORY: self._inventory,
            ActionType.EXIT: self._exit,
        }[action.action_type]

        time_changed = False
        try:
            handler(action, report)

            if action.action_type != ActionType.EXIT:
                state.command_count += 1
                time_changed = TimeManager.advance(state, self._settings.day_night_period)
                if time_changed:
                    report["messages"].append("It is now night." if state.is_night else "It is now daytime.")
        finally:
            # The player is back on the board even when the turn raised
            state.current_cell.player = state.player
        return self._report(success=True, time_changed=time_changed, **report)

    def _report(self, **kwargs: Any) -> TurnReport:
        return TurnReport(is_night=self._state.is_night, is_over=self._state.is_over, victory=self._state.victory, **kwargs)

    def _move(self, action: Action, report: dict) -> None:
        state = self._state
        direction = action.parameters["direction"]
        if not isinstance(direction, Direction):
            direction = Direction.from_key(direction)

        d_row, d_col = direction.offset
        row, col = state.player_row + d_row, state.player_col + d_col
        if not state.board.in_bounds(row, col):
            report["messages"].append(f"Cannot move {direction.value}: edge of the board.")
            return

        state.player_row, state.player_col = row, col
        report["messages"].append(f"Moved {direction.value} to ({row}, {col}).")
        cell = state.current_cell
        if cell.enemy is not None:
            report["messages"].append(f"You've encountered an enemy: {cell.enemy.name}!")
        if cell.item is not None:
            report["messages"].append(f"You've found an item: {cell.item.name}!")

    def _pick_up(self, action: Action, report: dict) -> None:
        cell = self._state.current_cell
        if cell.item is None:
            report["messages"].append("No item here!")
            return

        item = cell.item
        outcome = self._state.player.pick_up(item)
        if outcome == EquipmentOutcome.EQUIPPED:
            # Ownership moves to the player
            cell.item = None
            report["messages"].append(f"Equipped {item.name}.")
        elif outcome == EquipmentOutcome.TOO_HEAVY:
            report["messages"].append(f"{item.name} is too heavy.")
        else:
            report["messages"].append(f"{item.name} is not recognized.")
        report["equipment_outcome"] = outcome

    def _attack(self, action: Action, report: dict) -> None:
        state = self._state
        cell = state.current_cell
        enemy = cell.enemy
        if enemy is None:
            report["messages"].append("No enemy to attack.")
            return

        result = CombatSystem.attack(state.player, enemy, self._rng)
        report["attacks"].append(result)
        if result.defeated:
            cell.enemy = None
            state.gold += self._settings.gold_per_kill
            report["messages"].append(f"{enemy.race.value} defeated! Received {self._settings.gold_per_kill} gold!")
            if not state.board.has_enemies():
                state.is_over = True
                state.victory = True
                report["messages"].append("You defeated all the enemies and won the game!")
                logger.info(f"{state.player.name} won with {state.gold} gold")
            return

        counter = CombatSystem.attack(enemy, state.player, self._rng)
        report["attacks"].append(counter)
        if counter.defeated:
            state.is_over = True
            report["messages"].append("You died! Game over!")
            logger.info(f"{state.player.name} was defeated by {enemy.name}")

    def _drop(self, action: Action, report: dict) -> None:
        player = self._state.player
        slot = DropSlot(action.parameters["slot"])
        if slot == DropSlot.WEAPON:
            outcome = player.drop_weapon()
        elif slot == DropSlot.ARMOUR:
            outcome = player.drop_armour()
        elif slot == DropSlot.SHIELD:
            outcome = player.drop_shield()
        else:
            outcome = player.drop_ring(action.parameters["index"])

        if outcome == EquipmentOutcome.DROPPED:
            report["messages"].append(f"Dropped {slot.value}.")
        elif outcome == EquipmentOutcome.NOTHING_TO_DROP:
            report["messages"].append(f"No {slot.value} to drop.")
        else:
            report["messages"].append("Invalid ring choice.")
        report["equipment_outcome"] = outcome

    def _look(self, action: Action, report: dict) -> None:
        contents = StateSerializer.cell_contents(self._state.current_cell)
        # The player was lifted off the cell for the turn
        contents["player"] = StateSerializer.character_stats(self._state.player)
        contents["is_empty"] = False
        report["details"] = contents

    def _inventory(self, action: Action, report: dict) -> None:
        details = StateSerializer.equipment(self._state.player)
        details["gold"] = self._state.gold
        report["details"] = details

    def _exit(self, action: Action, report: dict) -> None:
        self._state.is_over = True
        report["messages"].append("Exit")
