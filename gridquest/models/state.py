"""Game state model."""

import logging
from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field

from gridquest.config import GameSettings
from gridquest.models.board import Board, Cell
from gridquest.models.character import Character
from gridquest.models.items import Item

logger = logging.getLogger(__name__.split(".")[-1])


class GameState(BaseModel):
    """Everything a turn needs: the board, the player and the running counters.

    The state is owned by the caller and passed into the engine; nothing in
    the core keeps global player or enemy handles.
    """

    model_config = ConfigDict(validate_assignment=True)

    board: Board = Field(description="Game board")
    player: Character = Field(description="Player character")
    player_row: int = Field(ge=0, default=0, description="Player row on the board")
    player_col: int = Field(ge=0, default=0, description="Player column on the board")

    enemies: list[Character] = Field(default_factory=list, description="Every enemy created for this game")

    gold: int = Field(ge=0, default=0, description="Gold collected")
    command_count: int = Field(ge=0, default=0, description="Commands processed so far (exit excluded)")
    is_night: bool = Field(default=False, description="Current time of day")
    is_over: bool = Field(default=False, description="Whether the game has ended")
    victory: bool = Field(default=False, description="Whether the player won")

    @classmethod
    def new(
        cls,
        player: Character,
        width: Optional[int] = None,
        height: Optional[int] = None,
        enemies: Optional[Sequence[Character]] = None,
        items: Optional[Sequence[Item]] = None,
        rng: Optional[Any] = None,
    ) -> "GameState":
        """
        Create a populated board and place the player in the top-left cell.

        Args:
            player: Player character
            width: Board columns (settings default when None)
            height: Board rows (settings default when None)
            enemies: Enemies to place (default line-up when None)
            items: Items to place (default loot when None)
            rng: Optional random source for placement

        Returns:
            New game state
        """
        from gridquest.models.catalog import default_enemies, default_items

        settings = GameSettings()
        width = settings.board_width if width is None else width
        height = settings.board_height if height is None else height

        enemy_pool = list(enemies) if enemies is not None else default_enemies()
        item_pool = list(items) if items is not None else default_items()

        board = Board(width=width, height=height)
        board.populate(enemy_pool, item_pool, rng=rng)
        board.at(0, 0).player = player

        logger.info(f"New game for {player.name} ({player.race.value}) on a {height}x{width} board")
        return cls(board=board, player=player, enemies=enemy_pool)

    @property
    def current_cell(self) -> Cell:
        """Cell the player is standing on."""
        return self.board.at(self.player_row, self.player_col)
