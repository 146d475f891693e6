"""
Text host for the Snake engine.

The host owns everything the engine doesn't: the pause and game-over
presentation state, key bindings, pacing between ticks and printing the
board. It can be played line by line in a terminal or left to run with a
player strategy.
"""

import argparse
import logging
import random
import sys
import time
from typing import Any, Callable, Dict, List, Optional

from dotenv import load_dotenv

import config
from domain import Board, BoardFullError, GameState, Heading
from players import Player, ScriptedPlayer, get_player_class, list_players

logger = logging.getLogger(__name__)

# Key bindings
KEY_BINDINGS: Dict[str, Heading] = {
    'w': Heading.NORTH,
    'a': Heading.WEST,
    's': Heading.SOUTH,
    'd': Heading.EAST,
}
PAUSE_KEY = 'p'
RESET_KEY = 'r'
QUIT_KEYS = {'q', 'escape', 'esc'}

HELP_TEXT = "w/a/s/d move, p pause, r reset, q quit, empty line waits one tick"


class GameSession:
    """
    Presentation state around a Board.

    A session starts paused and any movement key resumes it. When the board
    reports a collision the session records the score, resets the board and
    pauses again until the next movement key.
    """

    def __init__(self, board: Board):
        self.board = board
        self.is_paused = True
        self.tick_count = 0
        self.games_played = 0
        self.last_score: Optional[int] = None
        self.best_score = 0

    def handle_key(self, key: str) -> bool:
        """
        Apply one key press. Returns False when the key asks to quit.
        """
        key = key.strip().lower()
        if key in QUIT_KEYS:
            return False

        if key in KEY_BINDINGS:
            self.board.set_direction(KEY_BINDINGS[key])
            self.is_paused = False
        elif key == PAUSE_KEY:
            self.is_paused = True
        elif key == RESET_KEY:
            self.restart()
        else:
            logger.debug("Ignoring unbound key %r", key)
        return True

    def restart(self) -> None:
        self.board.reset()
        self.tick_count = 0
        self.is_paused = True

    def tick(self) -> bool:
        """
        Run one update unless paused. Returns False when the game ended on
        this tick.
        """
        if self.is_paused:
            return True

        try:
            alive = self.board.update()
        except BoardFullError:
            self.tick_count += 1
            logger.info("Board cleared with score %d", self.board.score)
            alive = False
        else:
            self.tick_count += 1

        if not alive:
            self._finish_game()
        return alive

    def _finish_game(self) -> None:
        self.last_score = self.board.score
        self.best_score = max(self.best_score, self.last_score)
        self.games_played += 1
        logger.info(
            "Game over after %d ticks. Score: %d (best %d)",
            self.tick_count, self.last_score, self.best_score
        )
        self.restart()

    def get_state(self) -> GameState:
        return self.board.get_state(self.tick_count)

    def status_line(self) -> str:
        status = "paused" if self.is_paused else "running"
        line = f"Score: {self.board.score} | Tick: {self.tick_count} | {status}"
        if self.last_score is not None:
            line += f" | Last: {self.last_score} | Best: {self.best_score}"
        return line


def play_interactive(
    session: GameSession,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = print
) -> GameSession:
    """
    Line-based play loop. Every line may hold several keys separated by
    spaces; the keys are applied in order and then one tick runs.
    """
    write(HELP_TEXT)
    while True:
        write(session.get_state().print_board())
        write(session.status_line())
        try:
            line = read_line("> ")
        except EOFError:
            break

        keys = line.split()
        if not all(session.handle_key(key) for key in keys):
            break
        session.tick()

    return session


def run_simulation(
    player: Player,
    grid_size: int,
    max_ticks: int,
    seed: Optional[int] = None,
    tick_delay: float = 0.0,
    show_board: bool = False
) -> Dict[str, Any]:
    """
    Runs a single unattended game with the given player.

    Args:
        player: Strategy asked for a heading before every tick.
        grid_size: Edge length of the board.
        max_ticks: Upper limit on ticks before the run stops.
        seed: Optional seed for food placement.
        tick_delay: Seconds to sleep between ticks.
        show_board: Print the board after every tick.

    Returns:
        A dictionary summarizing the run (ticks, final_score, game_over,
        board_cleared, history of GameState snapshots).
    """
    board = Board(grid_size=grid_size, rng=random.Random(seed))
    history: List[GameState] = [board.get_state(0)]
    game_over = False
    board_cleared = False
    ticks = 0

    while ticks < max_ticks:
        heading = player.get_heading(board.get_state(ticks))
        if heading is not None:
            board.set_direction(heading)

        try:
            alive = board.update()
        except BoardFullError:
            # The snake has just eaten its way over the last free cell.
            ticks += 1
            board_cleared = True
            history.append(board.get_state(ticks))
            logger.info("Board cleared after %d ticks", ticks)
            break

        if not alive:
            game_over = True
            logger.info("Game over after %d ticks. Score: %d", ticks, board.score)
            break

        ticks += 1
        state = board.get_state(ticks)
        history.append(state)
        if show_board:
            print(state.print_board())
            print(f"Score: {state.score} | Tick: {ticks}")
        if tick_delay > 0:
            time.sleep(tick_delay)

    return {
        "ticks": ticks,
        "final_score": board.score,
        "game_over": game_over,
        "board_cleared": board_cleared,
        "history": history,
    }


def build_player(name: str, moves: Optional[str] = None, seed: Optional[int] = None) -> Player:
    player_class = get_player_class(name)
    if player_class is ScriptedPlayer:
        return ScriptedPlayer.from_string(moves or "")
    return player_class(rng=random.Random(seed))


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Play Snake in the terminal, or let a player strategy run a game."
    )
    parser.add_argument("--grid-size", type=int, default=config.get_grid_size(),
                        help="Edge length of the square board (env SNAKE_GRID_SIZE)")
    parser.add_argument("--player", type=str, default=None, choices=list_players(),
                        help="Run unattended with this player instead of reading keys")
    parser.add_argument("--moves", type=str, default=None,
                        help="Headings for the scripted player, e.g. 'NNEESW'")
    parser.add_argument("--max-ticks", type=int, default=config.get_max_ticks(),
                        help="Stop an unattended run after this many ticks (env SNAKE_MAX_TICKS)")
    parser.add_argument("--delay", type=float, default=config.get_tick_delay(),
                        help="Seconds between unattended ticks (env SNAKE_TICK_DELAY)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--quiet", action="store_true",
                        help="Don't print the board during unattended runs")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (env SNAKE_LOG_LEVEL)")
    args = parser.parse_args(argv)

    config.configure_logging(args.log_level)

    try:
        if args.player is None:
            board = Board(grid_size=args.grid_size, rng=random.Random(args.seed))
            session = play_interactive(GameSession(board))
            print(f"\nGames played: {session.games_played}, best score: {session.best_score}")
            return 0

        player = build_player(args.player, moves=args.moves, seed=args.seed)
        result = run_simulation(
            player,
            grid_size=args.grid_size,
            max_ticks=args.max_ticks,
            seed=args.seed,
            tick_delay=args.delay,
            show_board=not args.quiet
        )
        print(f"\nFinal score: {result['final_score']} after {result['ticks']} ticks")
        return 0

    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
