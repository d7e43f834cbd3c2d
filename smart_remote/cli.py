"""Command-line interface for smart-remote."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import constants
from .config import RemoteConfig, load_config
from .demo import (
    apply_bindings,
    build_home,
    default_bindings,
    run_beverage_demo,
    run_chat_demo,
    run_command_demo,
)
from .dispatcher import Dispatcher
from .logging import configure_logging

LOGGER = logging.getLogger(__name__)

DEMO_CHOICES = ("commands", "beverage", "chat")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=constants.APP_NAME,
        description="Programmable home remote with undo history",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=constants.DEFAULT_CONFIG_PATH,
        help=f"Path to configuration file (default: {constants.DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured log level (e.g. DEBUG)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Run the demonstration programs")
    demo_parser.add_argument(
        "--only",
        choices=DEMO_CHOICES,
        default=None,
        help="Run a single demonstration instead of all of them",
    )
    demo_parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Never prompt; answer 'no' to every question",
    )

    run_parser = subparsers.add_parser(
        "run", help="Press configured slots in order, then undo"
    )
    run_parser.add_argument("slots", nargs="*", help="Slot keys to execute")
    run_parser.add_argument(
        "--undo", type=int, default=0, metavar="N", help="Undo N commands afterwards"
    )

    subparsers.add_parser(
        "show-config", help="Print the resolved configuration and exit"
    )

    return parser


def _slot_key(value: str):
    try:
        return int(value)
    except ValueError:
        return value.lower()


def _never(_prompt: str) -> str:
    return "n"


def _run_demo(config: RemoteConfig, only: Optional[str], interactive: bool) -> int:
    ask = None if interactive else _never

    if only in (None, "commands"):
        LOGGER.info("=== Command pattern (smart home) ===")
        run_command_demo(
            build_home(config.devices),
            capacity=constants.DEMO_HISTORY_CAPACITY,
            ask=ask,
            interactive=interactive,
        )

    if only in (None, "beverage"):
        LOGGER.info("=== Template method (beverage) ===")
        run_beverage_demo(ask=ask)

    if only in (None, "chat"):
        LOGGER.info("=== Mediator (chat) ===")
        run_chat_demo()

    return 0


def _run_slots(config: RemoteConfig, slots: list[str], undo_count: int) -> int:
    home = build_home(config.devices)
    dispatcher = Dispatcher(capacity=config.dispatcher.history_capacity)

    if config.slots:
        apply_bindings(dispatcher, home, config.slots)
    else:
        for slot, command in default_bindings(home):
            dispatcher.assign(slot, command)

    exit_code = 0
    for value in slots:
        result = dispatcher.execute_slot(_slot_key(value))
        if not result.ok:
            exit_code = 1

    for _ in range(max(0, undo_count)):
        dispatcher.undo()

    dispatcher.show_history()
    return exit_code


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config)
    configure_logging(
        args.log_level or config.logging.level,
        log_path=config.logging.path,
        verbose_devices=config.logging.verbose_devices,
    )

    if args.command == "demo":
        return _run_demo(config, args.only, not args.no_interactive)

    if args.command == "run":
        return _run_slots(config, args.slots, args.undo)

    if args.command == "show-config":
        print(f"Configuration loaded from {config.path!s}\n")
        for section in config.raw.sections():
            print(f"[{section}]")
            for key, value in config.raw[section].items():
                print(f"{key} = {value}")
            print()
        return 0

    LOGGER.error("Unknown command: %s", args.command)
    return 1


if __name__ == "__main__":
    sys.exit(main())
