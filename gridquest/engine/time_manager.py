"""Day and night management."""

import logging
from typing import Iterable

from gridquest.config import DEFAULT_DAY_NIGHT_PERIOD
from gridquest.models.character import Character, Orc
from gridquest.models.state import GameState

logger = logging.getLogger(__name__.split(".")[-1])


class TimeManager:
    """Manages the day/night cycle and its effect on Orcs."""

    @staticmethod
    def is_night_at(command_count: int, period: int = DEFAULT_DAY_NIGHT_PERIOD) -> bool:
        """
        Time of day after a number of commands.

        Day covers the first ``period`` commands of every ``2 * period``,
        night the rest.

        Args:
            command_count: Commands processed so far
            period: Commands per day (and per night)

        Returns:
            True at night
        """
        if period < 1:
            raise ValueError("Day/night period must be at least 1")
        return command_count % (2 * period) >= period

    @staticmethod
    def apply_time_of_day(characters: Iterable[Character], is_night: bool) -> int:
        """
        Apply a time of day to every Orc among the characters.

        Args:
            characters: Characters to update (non-Orcs are skipped)
            is_night: True for night

        Returns:
            Number of Orcs updated
        """
        updated = 0
        for character in characters:
            if isinstance(character, Orc):
                character.set_time_of_day(is_night)
                updated += 1
        return updated

    @staticmethod
    def advance(state: GameState, period: int = DEFAULT_DAY_NIGHT_PERIOD) -> bool:
        """
        Update the state's time of day after a command.

        On a change, every Orc on the board and the player (if an Orc)
        switches profile.

        Args:
            state: Game state to update
            period: Commands per day (and per night)

        Returns:
            Whether the time of day changed
        """
        is_night = TimeManager.is_night_at(state.command_count, period)
        if is_night == state.is_night:
            return False

        state.is_night = is_night
        updated = TimeManager.apply_time_of_day(state.board.iter_enemies(), is_night)
        updated += TimeManager.apply_time_of_day([state.player], is_night)
        logger.info(f"It is now {'night' if is_night else 'daytime'} ({updated} orcs affected)")
        return True
