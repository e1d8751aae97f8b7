"""
Pebbles CLI - Command-line interface for the engine.

Usage:
    pebbles init [--pebbles N] [--max-per-turn M] [--difficulty easy|hard]
    pebbles turn <N>               Take N pebbles
    pebbles give-up                Concede the game
    pebbles restart [...]          Start over with new settings
    pebbles state                  Print the current snapshot
    pebbles play [...]             Interactive game in the terminal

Every command except play loads the snapshot from --state-file, applies
one message, and writes the snapshot back only if it succeeded.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys

from pydantic import ValidationError

from .api.schemas import (
    ActionResponse,
    CreateRequest,
    DifficultyLevel,
    ErrorResponse,
    EventKind,
    GameStateResponse,
    GiveUpAction,
    RestartAction,
    TurnAction,
)
from .api.service import GameService
from .config import Settings, configure_logging
from .engine_core.random_source import SystemRandomSource
from .engine_core.errors import PebblesError
from .engine_core.state import GameState
from .session import GameEngine, SnapshotStore

logger = logging.getLogger(__name__)


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Pebbles - subtraction game against the computer",
        prog="pebbles",
    )
    parser.add_argument(
        "--state-file", default=settings.state_file, help="Snapshot file path"
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    def add_settings_args(sub: argparse.ArgumentParser):
        sub.add_argument(
            "--pebbles", type=int, default=settings.default_pebbles_count,
            help="Pile size",
        )
        sub.add_argument(
            "--max-per-turn", type=int, default=settings.default_max_pebbles_per_turn,
            help="Most pebbles removable in one turn",
        )
        sub.add_argument(
            "--difficulty", choices=[d.value for d in DifficultyLevel],
            default=settings.default_difficulty.value, help="Computer difficulty",
        )

    add_settings_args(subparsers.add_parser("init", help="Create a new game"))

    turn_parser = subparsers.add_parser("turn", help="Take pebbles")
    turn_parser.add_argument("pebbles_taken", type=int, help="Number of pebbles")

    subparsers.add_parser("give-up", help="Concede the game")
    add_settings_args(subparsers.add_parser("restart", help="Start over"))
    subparsers.add_parser("state", help="Show the current game")
    add_settings_args(subparsers.add_parser("play", help="Play interactively"))

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    settings = Settings.from_env()
    parser = build_parser(settings)
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper())

    if args.command is None:
        parser.print_help()
        return 1
    if args.command == "play":
        return cmd_play(args)

    store = SnapshotStore(args.state_file)
    try:
        snapshot = store.load()
    except (ValueError, PebblesError) as e:
        print(f"Error: cannot read {args.state_file}: {e}")
        return 1

    rng = session_rng(args.seed, snapshot)
    service = GameService(engine=GameEngine(rng=rng, state=snapshot))

    if args.command == "state":
        return print_state(service.query())

    logger.debug("Running %s against %s", args.command, args.state_file)
    try:
        if args.command == "init":
            response = service.create(create_request(args))
        elif args.command == "turn":
            response = service.handle(TurnAction(pebbles_taken=args.pebbles_taken))
        elif args.command == "give-up":
            response = service.handle(GiveUpAction())
        else:
            response = service.handle(restart_action(args))
    except ValidationError as e:
        print(f"Error [VALIDATION_ERROR]: {e.errors()[0]['msg']}")
        return 1

    if response.success:
        store.save(service.engine.state())
    return print_response(response)


def session_rng(seed: int | None, snapshot: GameState | None) -> SystemRandomSource:
    """
    Random source for one command.

    A seeded run mixes the stored snapshot into the seed, so each command
    in a seeded sequence draws differently while the sequence as a whole
    stays reproducible.
    """
    if seed is None or snapshot is None:
        return SystemRandomSource(seed=seed)
    return SystemRandomSource(seed=f"{seed}:{json.dumps(snapshot.to_dict(), sort_keys=True)}")


def create_request(args) -> CreateRequest:
    return CreateRequest(
        pebbles_count=args.pebbles,
        max_pebbles_per_turn=args.max_per_turn,
        difficulty=args.difficulty,
    )


def restart_action(args) -> RestartAction:
    return RestartAction(
        difficulty=args.difficulty,
        pebbles_count=args.pebbles,
        max_pebbles_per_turn=args.max_per_turn,
    )


def print_response(response: ActionResponse) -> int:
    if not response.success:
        print(f"Error [{response.error_code.value}]: {response.error}")
        return 1
    for event in response.events:
        if event.event is EventKind.COUNTER_TURN:
            print(f"Program took {event.pebbles_taken}")
        else:
            print(f"{event.winner.value.capitalize()} won!")
    if response.state:
        print_state(response.state)
    return 0


def print_state(state: GameStateResponse | ErrorResponse) -> int:
    if isinstance(state, ErrorResponse):
        print(f"Error [{state.error_code.value}]: {state.error}")
        return 1
    print(
        f"Pebbles: {state.pebbles_remaining}/{state.pebbles_count} "
        f"(max {state.max_pebbles_per_turn} per turn, {state.difficulty.value})"
    )
    print(f"First player: {state.first_player.value}")
    if state.winner:
        print(f"Winner: {state.winner.value}")
    return 0


def prompt(text: str) -> str | None:
    """Read one line, or None at end of input."""
    try:
        return input(text).strip().lower()
    except EOFError:
        print()
        return None


def cmd_play(args) -> int:
    """Interactive game loop."""
    service = GameService(engine=GameEngine(rng=SystemRandomSource(seed=args.seed)))
    try:
        response = service.create(create_request(args))
    except ValidationError as e:
        print(f"Error [VALIDATION_ERROR]: {e.errors()[0]['msg']}")
        return 1
    if print_response(response):
        return 1

    print("\nEnter a number to take pebbles, 'q' to give up, 'r' to restart, 's' for state.")
    while True:
        state = service.query()
        if state.winner:
            if prompt("Play again? [y/N] ") != "y":
                return 0
            print_response(service.handle(restart_action(args)))
            continue

        line = prompt(f"[{state.pebbles_remaining} left] > ")
        if line is None:
            return 0

        if line == "q":
            print_response(service.handle(GiveUpAction()))
        elif line == "r":
            print_response(service.handle(restart_action(args)))
        elif line == "s":
            print_state(state)
        elif line.isdecimal():
            try:
                turn = TurnAction(pebbles_taken=int(line))
            except ValidationError:
                print(f"At most {state.max_pebbles_per_turn} pebbles per turn.")
                continue
            print_response(service.handle(turn))
        else:
            print("Enter a number, 'q', 'r' or 's'.")


if __name__ == "__main__":
    sys.exit(main())
