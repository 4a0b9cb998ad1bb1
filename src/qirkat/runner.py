"""CLI runner for Qirkat.

Usage examples:
- AI vs AI: ``python -m qirkat.runner --white ai --black ai --verbose``
- Human as White: ``python -m qirkat.runner --white human --depth 3``
- Custom position: ``python -m qirkat.runner --setup "------w----bbb-----------" --turn white``
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from .agents import AlphaBetaAgent, SearchConfig
from .game_controller import GameController
from .types import PieceColor

_log = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _build_agent(kind: str, depth: int) -> Optional[AlphaBetaAgent]:
    if kind == "human":
        return None
    if kind == "ai":
        return AlphaBetaAgent(SearchConfig(depth=depth))
    raise ValueError(f"Unknown player kind '{kind}'")


def _undo_for_human(controller: GameController) -> bool:
    """Take back turns until a human is on move again; False if there was nothing to undo."""

    if not controller.undo():
        return False
    # Against an agent, also take back the move that agent replied with.
    while controller.current_agent() is not None and controller.undo():
        pass
    return True


def _read_human_turn(controller: GameController, stdin: TextIO, stdout: TextIO) -> Optional[str]:
    """Prompt until the human plays a legal move or undoes.

    Returns ``"move"`` or ``"undo"``, or ``None`` on end of input or ``quit``.
    """

    player = controller.board.turn
    while True:
        stdout.write(f"{player}: ")
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        command = line.strip()
        if not command:
            continue
        if command == "quit":
            return None
        if command == "board":
            print(controller.board.render(legend=True), file=stdout)
            continue
        if command == "undo":
            if not _undo_for_human(controller):
                print("Nothing to undo.", file=stdout)
                continue
            return "undo"
        try:
            move = controller.apply_text_move(command)
        except ValueError as exc:
            print(f"Error: {exc}", file=stdout)
            continue
        print(f"{player} moves {move}.", file=stdout)
        return "move"


def play_game(
    controller: GameController,
    stdin: TextIO,
    stdout: TextIO,
    max_turns: Optional[int] = None,
    show_board: bool = False,
) -> Optional[PieceColor]:
    """Play until the game ends; returns the winner, or ``None`` if play stopped early."""

    turns = 0
    while not controller.is_over():
        if max_turns is not None and turns >= max_turns:
            print(f"Stopped after {turns} turns.", file=stdout)
            return None
        if controller.current_agent() is None:
            outcome = _read_human_turn(controller, stdin, stdout)
            if outcome is None:
                return None
            if outcome == "undo":
                continue
        else:
            player = controller.board.turn
            move = controller.step_ai()
            if move is None:
                break
            print(f"{player} moves {move}.", file=stdout)
        turns += 1
        if show_board:
            print(controller.board.render(legend=True), file=stdout)
            print(file=stdout)

    victor = controller.winner()
    if victor is not None:
        print(f"{victor} wins.", file=stdout)
    return victor


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Qirkat runner")
    parser.add_argument("--white", choices=["ai", "human"], default="human")
    parser.add_argument("--black", choices=["ai", "human"], default="ai")
    parser.add_argument("--depth", type=int, default=SearchConfig().depth, help="Search depth in plies")
    parser.add_argument("--setup", type=str, default=None, help="25 characters of w/b/- from a1 to e5")
    parser.add_argument("--turn", choices=["white", "black"], default="white", help="Side to move with --setup")
    parser.add_argument("--max-turns", type=int, default=None)
    parser.add_argument("--verbose", action="store_true", help="Print the board after every turn")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default="WARNING")
    return parser.parse_args(argv)


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = parse_args(argv)
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    logging.basicConfig(level=args.log_level)

    try:
        white = _build_agent(args.white, args.depth)
        black = _build_agent(args.black, args.depth)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=stdout)
        return 1

    controller = GameController(white_agent=white, black_agent=black)
    if args.setup is not None:
        try:
            controller.set_position(args.setup, PieceColor[args.turn.upper()])
        except ValueError as exc:
            print(f"Invalid setup: {exc}", file=stdout)
            return 1

    _log.info("Starting game: white=%s black=%s depth=%d", args.white, args.black, args.depth)
    play_game(
        controller,
        stdin=stdin,
        stdout=stdout,
        max_turns=args.max_turns,
        show_board=args.verbose,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
