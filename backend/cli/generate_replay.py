#!/usr/bin/env python3
"""
CLI tool to play an unattended Snake game and save it as an animated GIF

Usage:
    python generate_replay.py
    python generate_replay.py --player scripted --moves NNEESSWW

Examples:
    # Random player on the default board, saved under SNAKE_REPLAY_DIR
    python generate_replay.py --seed 7

    # Custom output path and board
    python generate_replay.py --grid-size 12 --output ./my_replay.gif

    # Custom replay settings
    python generate_replay.py --fps 5 --cell-size 32
"""

import os
import sys
import argparse
import logging

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import config  # noqa: E402
from main import build_player, run_simulation  # noqa: E402
from players import list_players  # noqa: E402
from services.replay_renderer import ReplayRenderer, DEFAULT_FPS, CELL_SIZE  # noqa: E402
from dotenv import load_dotenv  # noqa: E402

logger = logging.getLogger(__name__)


def default_output_path(seed) -> str:
    """Build the default GIF path inside the replay directory"""
    name = f"snake_replay_{seed}.gif" if seed is not None else "snake_replay.gif"
    return os.path.join(config.get_replay_dir(), name)


def main(argv=None) -> int:
    # Load environment variables
    load_dotenv()

    parser = argparse.ArgumentParser(
        description='Play an unattended Snake game and save it as an animated GIF',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    # Game options
    parser.add_argument(
        '--player',
        type=str,
        default='random',
        choices=list_players(),
        help='Player strategy (default: random)'
    )
    parser.add_argument(
        '--moves',
        type=str,
        default=None,
        help="Headings for the scripted player, e.g. 'NNEESW'"
    )
    parser.add_argument(
        '--grid-size',
        type=int,
        default=config.get_grid_size(),
        help='Edge length of the board (env SNAKE_GRID_SIZE)'
    )
    parser.add_argument(
        '--max-ticks',
        type=int,
        default=config.get_max_ticks(),
        help='Stop after this many ticks (env SNAKE_MAX_TICKS)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Seed for food placement and the random player'
    )

    # Output options
    parser.add_argument(
        '--output', '-o',
        type=str,
        help='Output GIF file path (default: SNAKE_REPLAY_DIR/snake_replay_<seed>.gif)'
    )

    # Replay settings
    parser.add_argument(
        '--fps',
        type=int,
        default=DEFAULT_FPS,
        help=f'Frames per second (default: {DEFAULT_FPS})'
    )
    parser.add_argument(
        '--cell-size',
        type=int,
        default=CELL_SIZE,
        help=f'Cell size in pixels (default: {CELL_SIZE})'
    )

    args = parser.parse_args(argv)
    config.configure_logging()

    try:
        player = build_player(args.player, moves=args.moves, seed=args.seed)
        result = run_simulation(
            player,
            grid_size=args.grid_size,
            max_ticks=args.max_ticks,
            seed=args.seed
        )
        logger.info(f"Game finished: score {result['final_score']} after {result['ticks']} ticks")

        renderer = ReplayRenderer(cell_size=args.cell_size, fps=args.fps)
        output_path = args.output or default_output_path(args.seed)
        gif_path = renderer.generate_gif(result["history"], output_path)

        logger.info(f"[OK] Replay generated successfully: {gif_path}")
        return 0

    except KeyboardInterrupt:
        logger.info("\nCancelled by user")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
