"""
Tests for the players package.
"""

import os
import random
import sys

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import GameState, Heading, NORTH, EAST, SOUTH, WEST, VALID_HEADINGS  # noqa: E402
from players import (  # noqa: E402
    Player,
    RandomPlayer,
    ScriptedPlayer,
    get_player_class,
    list_players,
)


def make_state(snake_body, heading=None, grid_size=10, food=(7, 7)):
    return GameState(
        tick=0,
        grid_size=grid_size,
        snake_body=snake_body,
        heading=heading,
        score=len(snake_body) - 1,
        food=food,
    )


class TestPlayerBase:
    """Tests for the Player interface."""

    def test_get_heading_not_implemented(self):
        """The base class leaves get_heading() to subclasses."""
        with pytest.raises(NotImplementedError):
            Player().get_heading(make_state([(5, 5)]))


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_random_player_returns_valid_heading(self):
        """RandomPlayer.get_heading() returns a Heading."""
        player = RandomPlayer(rng=random.Random(0))
        heading = player.get_heading(make_state([(5, 5)]))
        assert heading in VALID_HEADINGS

    def test_random_player_avoids_walls_when_possible(self):
        """In the top-left corner only EAST and SOUTH are safe."""
        player = RandomPlayer(rng=random.Random(1))
        state = make_state([(0, 0)])

        for _ in range(20):
            heading = player.get_heading(state)
            assert heading in {EAST, SOUTH}, f"Expected EAST or SOUTH, got {heading}"

    def test_random_player_avoids_self_collision(self):
        """RandomPlayer never turns into its own body."""
        player = RandomPlayer(rng=random.Random(2))
        state = make_state([(3, 5), (4, 5), (5, 5)], heading=EAST)

        for _ in range(20):
            assert player.get_heading(state) != WEST

    def test_random_player_counts_tail_as_body(self):
        """The tail still blocks the cell during the collision check."""
        player = RandomPlayer(rng=random.Random(3))
        # Head at (1, 2) heading WEST, tail at (1, 1) right above it
        state = make_state([(1, 1), (2, 1), (2, 2), (1, 2)], heading=WEST)

        for _ in range(20):
            assert player.get_heading(state) in {SOUTH, WEST}

    def test_random_player_trapped_still_answers(self):
        """With no safe option the player still returns some heading."""
        player = RandomPlayer(rng=random.Random(4))
        # 2x2 board, head at (0, 1) boxed in by walls and body
        state = make_state([(0, 0), (1, 0), (1, 1), (0, 1)], heading=WEST, grid_size=2, food=(0, 0))
        assert player.get_heading(state) in VALID_HEADINGS


class TestScriptedPlayer:
    """Tests for the ScriptedPlayer class."""

    def test_replays_headings_in_order(self):
        """Headings come back in order, then None."""
        player = ScriptedPlayer([NORTH, EAST])
        state = make_state([(5, 5)])
        assert player.get_heading(state) == NORTH
        assert player.get_heading(state) == EAST
        assert player.get_heading(state) is None
        assert player.get_heading(state) is None

    def test_from_string(self):
        """from_string() parses N/E/S/W, case and spaces ignored."""
        player = ScriptedPlayer.from_string("n e SW")
        assert player.headings == [Heading.NORTH, Heading.EAST, Heading.SOUTH, Heading.WEST]

    def test_from_string_rejects_unknown_letters(self):
        """Anything but N/E/S/W is an error."""
        with pytest.raises(ValueError):
            ScriptedPlayer.from_string("NEX")


class TestRegistry:
    """Tests for the player registry."""

    def test_lookup(self):
        """Registered names map to player classes, case-insensitively."""
        assert get_player_class("random") is RandomPlayer
        assert get_player_class("Scripted") is ScriptedPlayer

    def test_unknown_player_raises(self):
        """Unknown names raise ValueError listing what is available."""
        with pytest.raises(ValueError, match="random"):
            get_player_class("genius")

    def test_list_players(self):
        """list_players() names every registered player."""
        assert set(list_players()) == {"random", "scripted"}
