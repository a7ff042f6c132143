"""Read-only views of characters, cells and the board for display layers."""

from typing import Any, Optional

from gridquest.models.board import Board, Cell
from gridquest.models.character import Character, Orc
from gridquest.models.items import Item
from gridquest.models.state import GameState

PLAYER_SYMBOL = "#"
ENEMY_SYMBOL = "*"
ITEM_SYMBOL = "+"
EMPTY_SYMBOL = " "


class StateSerializer:
    """Turns game objects into plain dicts; formatting is left to the caller."""

    @staticmethod
    def character_stats(character: Character) -> dict[str, Any]:
        """
        Current totals for a character.

        Args:
            character: Character to describe

        Returns:
            Name, race, total stats, chances and current health
        """
        stats = {
            "name": character.name,
            "race": character.race.value,
            "attack": character.total_attack(),
            "attack_chance": character.base.attack_chance,
            "defence": character.total_defence(),
            "defence_chance": character.base.defence_chance,
            "health": character.current_health,
            "max_health": character.total_health(),
            "strength": character.total_strength(),
            "weight": character.current_weight(),
        }
        if isinstance(character, Orc):
            stats["is_night"] = character.is_night
        return stats

    @staticmethod
    def item(item: Optional[Item]) -> Optional[dict[str, Any]]:
        """Item fields as a dict, or None for an empty slot."""
        if item is None:
            return None
        return item.model_dump(mode="json")

    @staticmethod
    def equipment(character: Character) -> dict[str, Any]:
        """
        Everything a character has equipped.

        Args:
            character: Character to describe

        Returns:
            Weapon, armour and shield (None when empty) and the ring list
        """
        return {
            "weapon": StateSerializer.item(character.weapon),
            "armour": StateSerializer.item(character.armour),
            "shield": StateSerializer.item(character.shield),
            "rings": [StateSerializer.item(ring) for ring in character.rings],
        }

    @staticmethod
    def cell_contents(cell: Cell) -> dict[str, Any]:
        """What stands or lies on a cell."""
        return {
            "enemy": StateSerializer.character_stats(cell.enemy) if cell.enemy else None,
            "item": StateSerializer.item(cell.item),
            "player": StateSerializer.character_stats(cell.player) if cell.player else None,
            "is_empty": cell.is_empty(),
        }

    @staticmethod
    def board_symbols(board: Board) -> list[str]:
        """One string per row; the player hides enemies, enemies hide items."""
        rows = []
        for row in board.cells:
            symbols = []
            for cell in row:
                if cell.player is not None:
                    symbols.append(PLAYER_SYMBOL)
                elif cell.enemy is not None:
                    symbols.append(ENEMY_SYMBOL)
                elif cell.item is not None:
                    symbols.append(ITEM_SYMBOL)
                else:
                    symbols.append(EMPTY_SYMBOL)
            rows.append("".join(symbols))
        return rows

    @staticmethod
    def summary(state: GameState) -> dict[str, Any]:
        """Status line values shown after each turn."""
        return {
            "location": (state.player_row, state.player_col),
            "player": StateSerializer.character_stats(state.player),
            "gold": state.gold,
            "is_night": state.is_night,
            "command_count": state.command_count,
            "enemies_left": len(state.board.enemy_positions()),
            "is_over": state.is_over,
            "victory": state.victory,
        }
