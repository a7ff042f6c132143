"""Action validation system."""

from gridquest.models.actions import Action, ActionType, Direction, DropSlot
from gridquest.models.state import GameState


class ActionValidator:
    """Validates player commands before the engine applies them."""

    @staticmethod
    def validate_action(action: Action, state: GameState) -> tuple[bool, str]:
        """
        Validate an action against the game state.

        Args:
            action: Action to validate
            state: Current game state

        Returns:
            Tuple of (is_valid, error_message)
        """
        if state.is_over:
            return False, "The game is over"

        if action.action_type == ActionType.MOVE:
            return ActionValidator._validate_move(action)
        elif action.action_type == ActionType.DROP:
            return ActionValidator._validate_drop(action)

        return True, ""

    @staticmethod
    def _validate_move(action: Action) -> tuple[bool, str]:
        """Validate move action."""
        if "direction" not in action.parameters:
            return False, "Move action requires 'direction' parameter"

        direction = action.parameters["direction"]
        if isinstance(direction, Direction):
            return True, ""
        if not isinstance(direction, str) or Direction.from_key(direction) is None:
            return False, f"Invalid direction: {direction}"

        return True, ""

    @staticmethod
    def _validate_drop(action: Action) -> tuple[bool, str]:
        """Validate drop action."""
        if "slot" not in action.parameters:
            return False, "Drop action requires 'slot' parameter"

        try:
            slot = DropSlot(action.parameters["slot"])
        except ValueError:
            return False, f"Invalid slot: {action.parameters['slot']}"

        if slot == DropSlot.RING:
            index = action.parameters.get("index")
            if not isinstance(index, int) or isinstance(index, bool):
                return False, "Dropping a ring requires an integer 'index' parameter"

        return True, ""
