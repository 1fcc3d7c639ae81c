"""Tests for action parsing and scripted action sources."""

import pytest

from core.game import Action, scripted
from core.player import Player


class TestActionParse:
    """Tests for Action.parse."""

    @pytest.mark.parametrize("raw", ["s", "S", "stand", "Stand", " stick \n", Action.STAND])
    def test_stand_inputs(self, raw):
        assert Action.parse(raw) == Action.STAND

    @pytest.mark.parametrize("raw", ["h", "t", "hit", "HIT", "twist", "t\n", Action.HIT])
    def test_hit_inputs(self, raw):
        assert Action.parse(raw) == Action.HIT

    @pytest.mark.parametrize("raw", ["", "x", "double", "st", None, 1])
    def test_unrecognised_inputs(self, raw):
        assert Action.parse(raw) is None

    def test_str(self):
        assert str(Action.HIT) == "Hit"


class TestScripted:
    """Tests for the scripted action source."""

    def test_replays_in_order(self):
        source = scripted("h", Action.STAND)
        player = Player("Ann")
        assert source(player) == "h"
        assert source(player) == Action.STAND

    def test_runs_out(self):
        source = scripted()
        with pytest.raises(RuntimeError):
            source(Player("Ann"))

    def test_drives_a_round(self, unresolved_game):
        ann = unresolved_game.add_player("Ann")
        unresolved_game.round(scripted("stand"))
        assert len(ann.hand) == 2
