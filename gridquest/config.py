"""Central configuration defaults and constants for GridQuest."""

import os

from pydantic import BaseModel, Field

# Board Defaults
DEFAULT_BOARD_WIDTH = int(os.getenv("GRIDQUEST_BOARD_WIDTH", "12"))
DEFAULT_BOARD_HEIGHT = int(os.getenv("GRIDQUEST_BOARD_HEIGHT", "12"))

# Turn Cycle Defaults
DEFAULT_DAY_NIGHT_PERIOD = int(os.getenv("GRIDQUEST_DAY_NIGHT_PERIOD", "5"))  # Commands per day (and per night)
DEFAULT_GOLD_PER_KILL = int(os.getenv("GRIDQUEST_GOLD_PER_KILL", "20"))

# Race Behaviour Tuning
DEFAULT_HOBBIT_MAX_DEFENCE_LOSS = int(os.getenv("GRIDQUEST_HOBBIT_MAX_DEFENCE_LOSS", "5"))  # Upper bound of the [0, N] roll
DEFAULT_ORC_DAY_DEFENCE_DIVISOR = int(os.getenv("GRIDQUEST_ORC_DAY_DEFENCE_DIVISOR", "4"))  # Quarter damage while defending by day

# Logging
DEFAULT_LOG_LEVEL = os.getenv("GRIDQUEST_LOG_LEVEL", "INFO").upper()
DEFAULT_LOG_FORMAT = os.getenv("GRIDQUEST_LOG_FORMAT", "[%(name)-16s - %(levelname)5s] %(message)s")


class GameSettings(BaseModel):
    """Validated view over the environment defaults."""

    board_width: int = Field(default=DEFAULT_BOARD_WIDTH, ge=1, description="Board columns")
    board_height: int = Field(default=DEFAULT_BOARD_HEIGHT, ge=1, description="Board rows")
    day_night_period: int = Field(
        default=DEFAULT_DAY_NIGHT_PERIOD, ge=1, description="Commands before day and night swap"
    )
    gold_per_kill: int = Field(default=DEFAULT_GOLD_PER_KILL, ge=0, description="Gold awarded per defeated enemy")
