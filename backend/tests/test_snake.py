"""
Tests for domain/snake.py - the Snake entity.
"""

import os
import sys
from collections import deque

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import Snake, Heading, HeadingNotSetError, NORTH, EAST, SOUTH, WEST  # noqa: E402


class TestSnakeInitialization:
    """Tests for constructing a Snake."""

    def test_snake_starts_with_single_segment(self):
        """Snake starts with one segment at the start cell."""
        snake = Snake((5, 5))
        assert snake.body == ((5, 5),)
        assert snake.head == (5, 5)
        assert snake.length == 1
        assert len(snake) == 1

    def test_snake_heading_unset(self):
        """Heading is None until the host sets one."""
        snake = Snake((5, 5))
        assert snake.heading is None

    def test_snake_score_starts_at_zero(self):
        """The starting segment doesn't count as eaten food."""
        snake = Snake((0, 0))
        assert snake.score == 0

    def test_snake_body_is_read_only_view(self):
        """body returns a tuple copy, not the internal deque."""
        snake = Snake((1, 1))
        assert isinstance(snake.body, tuple)
        assert not isinstance(snake.body, deque)


class TestNextHeadLocation:
    """Tests for Snake.get_next_head_location()."""

    @pytest.mark.parametrize("heading,expected", [
        (NORTH, (5, 4)),
        (EAST, (6, 5)),
        (SOUTH, (5, 6)),
        (WEST, (4, 5)),
    ])
    def test_offsets_by_heading(self, heading, expected):
        """Next head is one cell away in the heading's direction."""
        snake = Snake((5, 5))
        snake.set_heading(heading)
        assert snake.get_next_head_location() == expected

    def test_does_not_mutate(self):
        """Asking for the next cell doesn't move the snake."""
        snake = Snake((5, 5))
        snake.set_heading(EAST)
        snake.get_next_head_location()
        assert snake.body == ((5, 5),)

    def test_goes_negative_off_the_top_edge(self):
        """Moving north from y=0 yields y=-1 rather than wrapping."""
        snake = Snake((3, 0))
        snake.set_heading(NORTH)
        assert snake.get_next_head_location() == (3, -1)

    def test_raises_without_heading(self):
        """A snake without a heading can't predict its next cell."""
        snake = Snake((5, 5))
        with pytest.raises(HeadingNotSetError):
            snake.get_next_head_location()


class TestSnakeMove:
    """Tests for Snake.move()."""

    def test_move_without_growth_keeps_length(self):
        """A plain move slides the single segment."""
        snake = Snake((2, 2))
        snake.set_heading(EAST)
        snake.move()
        assert snake.body == ((3, 2),)
        assert snake.head == (3, 2)

    def test_move_with_growth_appends_head(self):
        """Growing keeps the oldest segment and appends the new head."""
        snake = Snake((2, 2))
        snake.set_heading(EAST)
        snake.move(grew=True)
        assert snake.body == ((2, 2), (3, 2))
        assert snake.head == (3, 2)
        assert snake.score == 1

    def test_body_slides_toward_head(self):
        """Each segment takes the previous position of the one ahead of it."""
        snake = Snake((2, 2))
        snake.set_heading(EAST)
        snake.move(grew=True)
        snake.move(grew=True)
        snake.set_heading(SOUTH)

        before = snake.body
        next_head = snake.get_next_head_location()
        snake.move()
        after = snake.body

        assert len(after) == len(before)
        assert after[:-1] == before[1:]
        assert after[-1] == next_head

    def test_head_is_always_last_segment(self):
        """head always equals the last body element."""
        snake = Snake((0, 0))
        for heading, grew in [(EAST, True), (SOUTH, False), (SOUTH, True), (WEST, False)]:
            snake.set_heading(heading)
            snake.move(grew)
            assert snake.head == snake.body[-1]


class TestSnakeOccupancy:
    """Tests for Snake.occupies() and set_heading()."""

    def test_occupies_body_cells(self):
        """occupies() is true for every segment and false elsewhere."""
        snake = Snake((1, 1))
        snake.set_heading(EAST)
        snake.move(grew=True)
        assert snake.occupies((1, 1))
        assert snake.occupies((2, 1))
        assert not snake.occupies((3, 1))

    def test_set_heading_is_unconditional(self):
        """The snake itself accepts a reversal; legality is the board's job."""
        snake = Snake((1, 1))
        snake.set_heading(EAST)
        snake.move(grew=True)
        snake.set_heading(WEST)
        assert snake.heading == Heading.WEST
