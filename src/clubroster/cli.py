"""Command-line entry point for the roster and membership programs."""

from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional, Sequence

from clubroster.config_loader import AppConfig
from clubroster.console import Console
from clubroster.membership import MembershipApp, MembershipStore
from clubroster.persistence import MemberFile
from clubroster.roster import RosterApp, RosterStore


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage a football roster or a club membership list")
    parser.add_argument("--config", type=Path, default=None, help="Load settings from a JSON profile")
    parser.add_argument(
        "--save-config",
        type=Path,
        default=None,
        help="Save the resolved settings as a JSON profile",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (overrides config and environment)",
    )
    subparsers = parser.add_subparsers(dest="program", required=True)
    subparsers.add_parser("roster", help="Run the football roster manager")
    members = subparsers.add_parser("members", help="Run the club membership manager")
    members.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="Member file to load at startup and save on exit",
    )
    return parser.parse_args(argv)


def resolve_config(args: argparse.Namespace) -> AppConfig:
    config = AppConfig.load(args.config) if args.config else AppConfig()
    config = config.with_env()
    overrides = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    if getattr(args, "data_file", None):
        overrides["members_file"] = args.data_file
    if overrides:
        config = replace(config, **overrides)
    return config


def main(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = _parse_args(argv)
    config = resolve_config(args)
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    console = console or Console()

    if args.save_config:
        config.save(args.save_config)
        console.say(f"Saved configuration to {args.save_config}")

    if args.program == "roster":
        RosterApp(RosterStore(), console).run()
    else:
        store = MembershipStore(min_join_year=config.min_join_year)
        MembershipApp(store, MemberFile(config.members_file), console).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
