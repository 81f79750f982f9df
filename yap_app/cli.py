"""Command-line entry point: ``yap <command>``."""

import argparse
import sys
from pathlib import Path
from typing import Any, Optional

from . import __version__
from .config.loader import ConfigLoader
from .errors import DataQualityError, SystemFailureError
from .logging.config import configure_logging, get_logger
from .persistence.codec import encode_record
from .persistence.state_store import StateFileStore
from .state import machine
from .state.models import LoadedTimer
from .state.runtime import Command, TimerRuntime
from .utils.time import now_ms

EXIT_OK = 0
EXIT_IN_POMODORO = 1
EXIT_FAILURE = 2

IN_POMODORO_MESSAGE = "in pomodoro"

COMMAND_HELP = {
    "start": "start the pomodoro session; only works on a fresh session or after `reset`",
    "stop": "stop the running timer; phase and session counter are kept",
    "reset": "reset the session: clear the timer and set the session counter back to 1",
    "next": "go to the next interval; a running pomodoro can't be skipped, a break can",
    "state": "print '<PHASE> <time left>' or 'WAITING_FOR_<PHASE> <next interval>'; "
             "breaks are wrapped in coffee cups",
    "outside-pomodoro": "print nothing and exit 0 outside a pomodoro; "
                        "exit 1 with 'in pomodoro' during one",
}

logger = get_logger("yap.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yap",
        description="Yet another pomodoro timer, driven one command at a time."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-f", "--file", help="state file to use (default: ~/.yap)")
    parser.add_argument("-c", "--config", help="YAML configuration file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="diagnostic log level (logs go to stderr)"
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="print the loaded timer state to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True
    for name, help_text in COMMAND_HELP.items():
        subparsers.add_parser(name, help=help_text, description=help_text)

    return parser


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.file:
        overrides["storage"] = {"path": args.file}
    if args.log_level:
        overrides["logging"] = {"level": args.log_level}
    return overrides


def _print_debug(timer: LoadedTimer) -> None:
    status = timer.status
    print(
        f"{encode_record(timer.state)} not_started={status.not_started} "
        f"in_progress={status.in_progress} finished={status.finished} "
        f"rolled_over={timer.rolled_over}",
        file=sys.stderr
    )


def run(args: argparse.Namespace, now: int) -> int:
    """Execute the parsed command against the configured state file."""
    loader = ConfigLoader.create(Path(args.config) if args.config else None)
    config = loader.load(_overrides(args))

    configure_logging(
        level=config.logging.level,
        format_json=config.logging.format_json
    )

    store = StateFileStore(config.storage.path)
    runtime = TimerRuntime(store, params=config.timer, lock=config.storage.lock)

    if args.command == "state":
        timer = runtime.inspect(now)
        print(machine.describe(timer, now))
    elif args.command == "outside-pomodoro":
        timer = runtime.inspect(now)
        if machine.is_in_active_work_phase(timer):
            if args.debug:
                _print_debug(timer)
            print(IN_POMODORO_MESSAGE, file=sys.stderr)
            return EXIT_IN_POMODORO
    else:
        result = runtime.execute(Command(args.command), now)
        if not result.accepted:
            print(result.message)
        timer = result.timer

    if args.debug:
        _print_debug(timer)

    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    # Sampled once so every step of this invocation agrees on the time
    now = now_ms()

    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        return run(args, now)
    except (SystemFailureError, DataQualityError) as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"yap: {e}", file=sys.stderr)
        return EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
