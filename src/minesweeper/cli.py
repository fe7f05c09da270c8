"""
Terminal front end.

Usage:
    minesweeper play [--difficulty {easy,medium,hard}] [--seed N]
    minesweeper play --width W --height H --mines M
    minesweeper presets
"""
import argparse
import logging
import sys
from dataclasses import replace
from typing import Callable, List, Optional, Sequence, Tuple

from .config import PRESETS, GameConfig, preset
from .errors import MinesweeperError
from .game import Game
from .render import render_ansi, render_status

HELP_TEXT = """\
Commands:
  r X Y      reveal the cell in column X, row Y
  f X Y      flag or unflag a cell
  c X Y      chord: reveal around a satisfied number
  n [LEVEL]  new game (optionally easy, medium or hard)
  h          show this help
  q          quit"""

ACTIONS = {
    "r": "reveal",
    "reveal": "reveal",
    "f": "flag",
    "flag": "flag",
    "c": "chord",
    "chord": "chord",
}


class CommandError(MinesweeperError):
    """Raised for shell input that cannot be parsed."""


def parse_position(args: List[str]) -> Tuple[int, int]:
    if len(args) != 2:
        raise CommandError("Expected two coordinates: X Y")
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        raise CommandError(f"Coordinates must be integers, got {' '.join(args)}") from None


# ============================================================================
# Interactive Shell
# ============================================================================

class GameShell:
    """
    Line-oriented presentation layer for a :class:`Game`.

    Each input line is one command. Bad input is reported and the shell
    keeps going; only ``q`` (or end of input) stops it.
    """

    def __init__(self, game: Game, output: Callable[[str], None] = print) -> None:
        self.game = game
        self.output = output

    def show(self) -> None:
        game = self.game
        self.output(render_ansi(game.board, reveal_mines=game.is_finished, axes=True))
        self.output(render_status(game))

    def handle(self, line: str) -> bool:
        """
        Execute one command line.

        Returns:
            False when the shell should exit.
        """
        words = line.split()
        if not words:
            return True
        command, args = words[0].lower(), words[1:]

        if command in ("q", "quit", "exit"):
            return False
        if command in ("h", "help", "?"):
            self.output(HELP_TEXT)
            return True

        try:
            if command in ("n", "new"):
                self._new_game(args)
            elif command in ACTIONS:
                self._act(ACTIONS[command], *parse_position(args))
            else:
                raise CommandError(f"Unknown command {command!r} (h for help)")
        except MinesweeperError as error:
            self.output(f"Error: {error}")
            return True

        self.show()
        if self.game.is_finished:
            self.output("Type n to play again or q to quit.")
        return True

    def _new_game(self, args: List[str]) -> None:
        if len(args) > 1:
            raise CommandError("Usage: n [easy|medium|hard]")
        config = None
        if args:
            current = self.game.config
            config = replace(
                preset(args[0]),
                safe_first_move=current.safe_first_move,
                seed=current.seed,
            )
        self.game.new_game(config)

    def _act(self, action: str, x: int, y: int) -> None:
        if action == "reveal":
            self.game.on_reveal(x, y)
        elif action == "flag":
            self.game.on_toggle_flag(x, y)
        else:
            self.game.on_chord(x, y)

    def run(self, input_fn: Callable[[str], str] = input) -> None:
        """Read and execute commands until quit or end of input."""
        self.output(HELP_TEXT)
        self.show()
        while True:
            try:
                line = input_fn("> ")
            except (EOFError, KeyboardInterrupt):
                self.output("")
                return
            if not self.handle(line):
                return


# ============================================================================
# Commands
# ============================================================================

def build_config(args: argparse.Namespace) -> GameConfig:
    """Turn ``play`` arguments into a GameConfig."""
    custom = (args.width, args.height, args.mines)
    if any(value is not None for value in custom):
        if any(value is None for value in custom):
            raise CommandError("--width, --height and --mines must be given together")
        if args.difficulty is not None:
            raise CommandError("--difficulty cannot be combined with a custom size")
        base = GameConfig(args.width, args.height, args.mines)
    else:
        base = preset(args.difficulty or "easy")
    return replace(base, safe_first_move=not args.unsafe_first_move, seed=args.seed)


def play(args: argparse.Namespace) -> int:
    """Play an interactive game in the terminal."""
    try:
        config = build_config(args)
    except MinesweeperError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 2

    GameShell(Game(config)).run()
    return 0


def presets(args: argparse.Namespace) -> int:
    """Print the difficulty presets."""
    print(f"{'Level':<10} {'Width':>6} {'Height':>7} {'Mines':>6}")
    print("-" * 32)
    for name, config in PRESETS.items():
        print(f"{name:<10} {config.width:>6} {config.height:>7} {config.mine_count:>6}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minesweeper", description="Play Minesweeper in the terminal"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--difficulty",
        choices=sorted(PRESETS),
        help="Preset board size (default: easy)",
    )
    play_parser.add_argument("--width", type=int, help="Custom board width")
    play_parser.add_argument("--height", type=int, help="Custom board height")
    play_parser.add_argument("--mines", type=int, help="Custom mine count")
    play_parser.add_argument("--seed", type=int, help="Seed for mine placement")
    play_parser.add_argument(
        "--unsafe-first-move",
        action="store_true",
        help="Allow the first reveal to hit a mine",
    )

    subparsers.add_parser("presets", help="List difficulty presets")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        return play(args)
    if args.command == "presets":
        return presets(args)
    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
