"""
Replay Renderer for Snake game sessions

Draws GameState snapshots with PIL (Pillow) and bundles them into an
animated GIF:
- Board with grid lines
- Snake body, and head with eyes facing its heading
- Food
- Score and tick counter
"""

import logging
import os
from typing import List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.constants import Heading
from domain.game_state import GameState

logger = logging.getLogger(__name__)

# Replay settings
DEFAULT_FPS = 10  # one frame per default 100ms tick
CELL_SIZE = 24  # Size of each grid cell in pixels
MARGIN = 20
HUD_HEIGHT = 40


class ColorScheme:
    """Color configuration"""

    BACKGROUND = "#000000"
    GRID_LINE = "#808080"
    SNAKE = "#FF0000"
    FOOD = "#00FF00"
    SCORE_TEXT = "#FFFFFF"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def darken_color(hex_color: str, amount: float = 0.3) -> Tuple[int, int, int]:
    """Darken a hex color by a given amount"""
    r, g, b = hex_to_rgb(hex_color)
    r = max(0, int(r * (1 - amount)))
    g = max(0, int(g * (1 - amount)))
    b = max(0, int(b * (1 - amount)))
    return (r, g, b)


class ReplayRenderer:
    """Render GameState snapshots as images and animated GIFs"""

    def __init__(self, cell_size: int = CELL_SIZE, fps: int = DEFAULT_FPS):
        if cell_size < 4:
            raise ValueError(f"Cell size must be at least 4 pixels, got {cell_size}.")
        if fps < 1:
            raise ValueError(f"FPS must be at least 1, got {fps}.")
        self.cell_size = cell_size
        self.fps = fps
        self.font = ImageFont.load_default()

    def frame_size(self, grid_size: int) -> Tuple[int, int]:
        board_pixels = grid_size * self.cell_size
        return (board_pixels + 2 * MARGIN, board_pixels + 2 * MARGIN + HUD_HEIGHT)

    def cell_origin(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        """Top-left pixel of a grid cell."""
        x, y = cell
        return (MARGIN + x * self.cell_size, HUD_HEIGHT + MARGIN + y * self.cell_size)

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', self.frame_size(state.grid_size), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        self._draw_grid(draw, state.grid_size)

        if state.food is not None:
            self._draw_cell(draw, state.food, hex_to_rgb(ColorScheme.FOOD), padding=4)

        for cell in state.snake_body[:-1]:
            self._draw_cell(draw, cell, hex_to_rgb(ColorScheme.SNAKE))
        self._draw_head(draw, state.head, state.heading)

        hud_text = f"Score: {state.score}    Tick: {state.tick}"
        draw.text((MARGIN, MARGIN // 2), hud_text, fill=hex_to_rgb(ColorScheme.SCORE_TEXT), font=self.font)

        return img

    def _draw_grid(self, draw: ImageDraw.ImageDraw, grid_size: int):
        left, top = self.cell_origin((0, 0))
        length = grid_size * self.cell_size
        color = hex_to_rgb(ColorScheme.GRID_LINE)

        for i in range(grid_size + 1):
            offset = i * self.cell_size
            # columns
            draw.line([left + offset, top, left + offset, top + length], fill=color, width=1)
            # rows
            draw.line([left, top + offset, left + length, top + offset], fill=color, width=1)

    def _draw_cell(
        self,
        draw: ImageDraw.ImageDraw,
        cell: Tuple[int, int],
        color: Tuple[int, int, int],
        padding: int = 2
    ):
        """Draw a single cell (for snake body or food)"""
        x, y = self.cell_origin(cell)
        size = self.cell_size
        draw.rectangle(
            [x + padding, y + padding, x + size - padding, y + size - padding],
            fill=color
        )

    def _draw_head(self, draw: ImageDraw.ImageDraw, cell: Tuple[int, int], heading: Optional[Heading]):
        self._draw_cell(draw, cell, darken_color(ColorScheme.SNAKE, 0.3), padding=1)

        x, y = self.cell_origin(cell)
        size = self.cell_size
        eye = max(2, size // 5)

        # Eyes sit on the side the snake is facing; straight ahead when idle
        if heading in (Heading.EAST, Heading.WEST):
            eye_x = x + 3 * size // 4 - eye if heading == Heading.EAST else x + size // 4
            eyes = [(eye_x, y + size // 4), (eye_x, y + 3 * size // 4 - eye)]
        else:
            eye_y = y + 3 * size // 4 - eye if heading == Heading.SOUTH else y + size // 4
            eyes = [(x + size // 4, eye_y), (x + 3 * size // 4 - eye, eye_y)]

        for ex, ey in eyes:
            draw.ellipse([ex, ey, ex + eye, ey + eye], fill=(255, 255, 255))

    def generate_gif(self, states: Sequence[GameState], output_path: str) -> str:
        """
        Render every state and save them as an animated GIF.

        Args:
            states: Snapshots in playback order
            output_path: Where to write the GIF

        Returns:
            Path to the generated file
        """
        if not states:
            raise ValueError("Cannot render a replay without any states.")

        logger.info(f"Rendering {len(states)} frames")
        frames: List[Image.Image] = []
        for i, state in enumerate(states):
            if i % 50 == 0:
                logger.debug(f"Rendering frame {i + 1}/{len(states)}")
            frames.append(self.render_frame(state))

        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        frames[0].save(
            output_path,
            save_all=True,
            append_images=frames[1:],
            duration=int(1000 / self.fps),
            loop=0
        )

        logger.info(f"Replay saved to {output_path}")
        return output_path
