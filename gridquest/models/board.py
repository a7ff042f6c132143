"""Board grid and cell models."""

import logging
import random
import time
from typing import Any, Iterator, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, model_validator

from gridquest.models.character import Character
from gridquest.models.items import Item

logger = logging.getLogger(__name__.split(".")[-1])


class BoardCapacityError(ValueError):
    """Raised when a board has fewer cells than things to place on it."""


class Cell(BaseModel):
    """One board location.

    Holds references only; the characters and items themselves belong to the
    game's pools or to whoever picked them up.
    """

    model_config = ConfigDict(validate_assignment=True)

    enemy: Optional[Character] = Field(default=None, description="Enemy standing here")
    item: Optional[Item] = Field(default=None, description="Item lying here")
    player: Optional[Character] = Field(default=None, description="Player standing here")

    def is_empty(self) -> bool:
        return self.enemy is None and self.item is None and self.player is None


class Board(BaseModel):
    """Fixed-size grid of cells, ``height`` rows by ``width`` columns."""

    width: int = Field(ge=1, description="Number of columns")
    height: int = Field(ge=1, description="Number of rows")
    cells: list[list[Cell]] = Field(default_factory=list, description="Cells indexed [row][column]")

    @model_validator(mode="after")
    def generate_cells(self) -> "Board":
        """Create every cell once, unless cells were supplied."""
        if not self.cells:
            self.cells = [[Cell() for _ in range(self.width)] for _ in range(self.height)]
        elif len(self.cells) != self.height or any(len(row) != self.width for row in self.cells):
            raise ValueError(f"Cells do not match board size {self.height}x{self.width}")
        return self

    @property
    def capacity(self) -> int:
        return self.width * self.height

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def at(self, row: int, col: int) -> Cell:
        """
        Get the cell at (row, col).

        Raises:
            IndexError: If the coordinates are outside the board
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.height}x{self.width} board")
        return self.cells[row][col]

    def iter_cells(self) -> Iterator[tuple[int, int, Cell]]:
        """Yield (row, col, cell) in row-major order."""
        for row_index, row in enumerate(self.cells):
            for col_index, cell in enumerate(row):
                yield row_index, col_index, cell

    def enemy_positions(self) -> list[tuple[int, int]]:
        return [(r, c) for r, c, cell in self.iter_cells() if cell.enemy is not None]

    def item_positions(self) -> list[tuple[int, int]]:
        return [(r, c) for r, c, cell in self.iter_cells() if cell.item is not None]

    def iter_enemies(self) -> Iterator[Character]:
        """Yield every enemy still on the board."""
        for _, _, cell in self.iter_cells():
            if cell.enemy is not None:
                yield cell.enemy

    def has_enemies(self) -> bool:
        return any(True for _ in self.iter_enemies())

    def find_player(self) -> Optional[tuple[int, int]]:
        """Position of the player, or None when the player is off the board."""
        return next(((r, c) for r, c, cell in self.iter_cells() if cell.player is not None), None)

    def populate(
        self,
        enemies: Sequence[Character],
        items: Sequence[Item],
        rng: Optional[Any] = None,
    ) -> None:
        """
        Randomly place enemies, then items, on distinct cells.

        Each enemy goes on a cell without an enemy; each item goes on a cell
        without an enemy or an item. Enemies are placed first, so items avoid
        enemy cells but enemies never avoid item cells already on the board.

        Args:
            enemies: Enemies to place, in order
            items: Items to place, in order
            rng: Optional random source; a generator seeded from the clock
                is created when omitted

        Raises:
            BoardCapacityError: If the board has fewer cells than
                enemies + items
        """
        from gridquest.engine.dice import DiceRoller

        occupied = sum(1 for _, _, cell in self.iter_cells() if cell.enemy is not None or cell.item is not None)
        free = self.capacity - occupied
        if len(enemies) + len(items) > free:
            raise BoardCapacityError(
                f"Cannot place {len(enemies)} enemies and {len(items)} items on "
                f"{free} free cells"
            )

        if rng is None:
            rng = random.Random(time.time_ns())

        for enemy in enemies:
            row, col = DiceRoller.roll_cell(self.height, self.width, rng)
            while self.cells[row][col].enemy is not None:
                row, col = DiceRoller.roll_cell(self.height, self.width, rng)
            self.cells[row][col].enemy = enemy
            logger.debug(f"Placed enemy {enemy.name} at ({row}, {col})")

        for item in items:
            row, col = DiceRoller.roll_cell(self.height, self.width, rng)
            while self.cells[row][col].enemy is not None or self.cells[row][col].item is not None:
                row, col = DiceRoller.roll_cell(self.height, self.width, rng)
            self.cells[row][col].item = item
            logger.debug(f"Placed item {item.name} at ({row}, {col})")

        logger.info(f"Populated {self.height}x{self.width} board with {len(enemies)} enemies and {len(items)} items")
