#!/usr/bin/env python3
"""FastRules CLI."""

import argparse
import sys
from typing import Optional, Sequence

from fast_rules.utils.env_utils import configure_env
from fast_rules.utils.logging import setup_logging

from .rules_command import RulesCommand
from .validate_command import ValidateCommand
from .version_command import VersionCommand


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="FastRules CLI - validate records against rules declared in field metadata",
        prog="fast-rules"
    )
    parser.add_argument("--env-file", default=None, help="Dotenv file to load before running")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    commands = [
        ValidateCommand(),
        RulesCommand(),
        VersionCommand(),
    ]

    command_map = {}
    for command in commands:
        cmd_parser = subparsers.add_parser(command.name, help=command.help)
        command.configure_parser(cmd_parser)
        command_map[command.name] = command

    args = parser.parse_args(argv)

    configure_env(args.env_file)
    setup_logging()

    if args.command in command_map:
        return command_map[args.command].execute(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
