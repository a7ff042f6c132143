"""Tests for the Orc day/night profile and TimeManager."""

import pytest

from gridquest.engine.time_manager import TimeManager
from gridquest.models import catalog
from gridquest.models.board import Board
from gridquest.models.character import Human, Orc
from gridquest.models.state import GameState
from gridquest.models.stats import ORC_DAY_STATS, ORC_NIGHT_STATS


def _profile(orc):
    base = orc.base
    return base.attack, base.attack_chance, base.defence, base.defence_chance


class TestOrcTimeOfDay:
    """Test suite for Orc.set_time_of_day."""

    def test_starts_in_daylight(self, orc):
        """Test a new orc uses the day profile."""
        assert orc.is_night is False
        assert _profile(orc) == (25, 0.25, 10, 0.25)

    def test_night_profile(self, orc):
        """Test the night profile values."""
        orc.set_time_of_day(True)
        assert orc.is_night is True
        assert _profile(orc) == (45, 1.0, 25, 0.5)
        assert orc.base == ORC_NIGHT_STATS

    def test_round_trip_restores_day(self, orc):
        """Test night then day restores the day tuple exactly, with equipment on."""
        orc.pick_up(catalog.sword())
        orc.pick_up(catalog.large_shield())
        orc.set_time_of_day(True)
        orc.set_time_of_day(False)
        assert orc.base == ORC_DAY_STATS
        assert orc.total_attack() == 25 + 10 - 5

    def test_leaves_health_and_equipment(self, orc):
        """Test switching does not touch equipment or current health."""
        sword = catalog.sword()
        orc.pick_up(sword)
        orc.current_health = 17
        orc.set_time_of_day(True)
        assert orc.current_health == 17
        assert orc.weapon is sword
        assert orc.base.health == 50 and orc.base.strength == 130


class TestTimeManager:
    """Test suite for TimeManager."""

    @pytest.mark.parametrize(
        "count, expected",
        [(0, False), (4, False), (5, True), (9, True), (10, False), (15, True)],
    )
    def test_is_night_at(self, count, expected):
        """Test five commands of day, then five of night."""
        assert TimeManager.is_night_at(count) is expected

    def test_is_night_at_custom_period(self):
        """Test a custom period length."""
        assert TimeManager.is_night_at(2, period=2) is True
        assert TimeManager.is_night_at(4, period=2) is False

    def test_invalid_period(self):
        """Test a zero period is rejected."""
        with pytest.raises(ValueError):
            TimeManager.is_night_at(3, period=0)

    def test_apply_time_of_day_only_touches_orcs(self):
        """Test non-orcs are skipped."""
        orcs = [Orc(name="A"), Orc(name="B")]
        human = Human(name="H")
        assert TimeManager.apply_time_of_day(orcs + [human], True) == 2
        assert all(o.is_night for o in orcs)
        assert human.base.attack == 30

    def test_advance_flips_board_orcs(self):
        """Test advance switches every orc on the board when night falls."""
        board = Board(width=2, height=2)
        orc = Orc(name="Azog")
        board.at(1, 1).enemy = orc
        player = Human(name="P")
        state = GameState(board=board, player=player, command_count=4)

        assert TimeManager.advance(state) is False
        state.command_count = 5
        assert TimeManager.advance(state) is True
        assert state.is_night is True
        assert orc.is_night is True
        assert TimeManager.advance(state) is False

        state.command_count = 10
        assert TimeManager.advance(state) is True
        assert orc.base == ORC_DAY_STATS

    def test_advance_includes_orc_player(self):
        """Test an orc player follows the cycle too."""
        player = Orc(name="Grom")
        state = GameState(board=Board(width=1, height=1), player=player, command_count=5)
        TimeManager.advance(state)
        assert player.is_night is True


class TestOrcConstruction:
    """Test suite for the orc profile chosen at construction."""

    def test_night_flag_selects_night_profile(self):
        """Test an orc created at night uses the night stats."""
        orc = Orc(name="Grom", is_night=True)
        assert orc.base == ORC_NIGHT_STATS
        assert _profile(orc) == (45, 1.0, 25, 0.5)
        assert orc.current_health == 50

    def test_day_flag_overrides_supplied_profile(self):
        """Test the flag wins over a mismatched base profile."""
        orc = Orc(name="Grom", is_night=False, base=ORC_NIGHT_STATS)
        assert orc.base == ORC_DAY_STATS

    def test_night_orc_fights_with_night_profile(self, human):
        """Test a night orc heals on defence and attacks with the night stats."""
        orc = Orc(name="Grom", is_night=True)
        orc.current_health = 30
        assert orc.on_successful_defence(human) == 1
        assert orc.total_attack() == 45
