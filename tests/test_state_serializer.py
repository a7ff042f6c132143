"""Tests for StateSerializer views."""

from gridquest.engine.state_serializer import StateSerializer
from gridquest.models import catalog
from gridquest.models.board import Board
from gridquest.models.character import Human, Orc
from gridquest.models.state import GameState


class TestStateSerializer:
    """Test suite for StateSerializer."""

    def test_character_stats_use_totals(self, human):
        """Test stats reflect equipment."""
        human.pick_up(catalog.sword())
        human.pick_up(catalog.ring_of_life())
        stats = StateSerializer.character_stats(human)

        assert stats["name"] == "Bob"
        assert stats["race"] == "Human"
        assert stats["attack"] == 40
        assert stats["health"] == 60
        assert stats["max_health"] == 70
        assert stats["weight"] == 11
        assert "is_night" not in stats

    def test_orc_stats_include_time_of_day(self, orc):
        """Test orcs report whether they are in their night profile."""
        orc.set_time_of_day(True)
        assert StateSerializer.character_stats(orc)["is_night"] is True

    def test_equipment(self, dwarf):
        """Test empty slots are None and rings are listed in order."""
        dwarf.pick_up(catalog.plate_armour())
        dwarf.pick_up(catalog.ring_of_strength())
        dwarf.pick_up(catalog.ring_of_life())

        equipment = StateSerializer.equipment(dwarf)

        assert equipment["weapon"] is None
        assert equipment["shield"] is None
        assert equipment["armour"] == {
            "name": "Plate Armour",
            "weight": 40,
            "kind": "armour",
            "defence_bonus": 10,
            "attack_penalty": 5,
        }
        assert [ring["name"] for ring in equipment["rings"]] == ["Ring of Strength", "Ring of Life"]

    def test_cell_contents(self):
        """Test a cell with an enemy and an item."""
        board = Board(width=1, height=1)
        cell = board.at(0, 0)
        cell.enemy = Orc(name="Azog")
        cell.item = catalog.dagger()

        contents = StateSerializer.cell_contents(cell)

        assert contents["enemy"]["name"] == "Azog"
        assert contents["item"]["kind"] == "weapon"
        assert contents["player"] is None
        assert contents["is_empty"] is False

    def test_board_symbols_precedence(self):
        """Test the player hides enemies and enemies hide items."""
        board = Board(width=4, height=2)
        player = Human(name="P")
        board.at(0, 0).player = player
        board.at(0, 0).enemy = Orc(name="Hidden")
        board.at(0, 1).enemy = Orc(name="Azog")
        board.at(0, 1).item = catalog.sword()
        board.at(0, 2).item = catalog.dagger()

        assert StateSerializer.board_symbols(board) == ["#*+ ", "    "]

    def test_summary(self, small_state):
        """Test the status values."""
        small_state.board.at(2, 1).enemy = Human(name="Hal")
        small_state.gold = 20

        summary = StateSerializer.summary(small_state)

        assert summary["location"] == (0, 0)
        assert summary["player"]["name"] == "Bob"
        assert summary["gold"] == 20
        assert summary["enemies_left"] == 1
        assert summary["is_night"] is False
        assert summary["is_over"] is False

    def test_new_game_summary(self, seeded_rng):
        """Test a freshly created default game."""
        state = GameState.new(Human(name="Hero"), rng=seeded_rng)
        summary = StateSerializer.summary(state)

        assert summary["enemies_left"] == 5
        assert summary["command_count"] == 0
        assert StateSerializer.board_symbols(state.board)[0][0] == "#"
