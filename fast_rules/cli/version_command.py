"""Show version information."""

import argparse
from importlib import metadata as importlib_metadata

import fast_rules

from .command_base import CommandBase


class VersionCommand(CommandBase):
    """Command to show version information."""

    @property
    def name(self) -> str:
        return "version"

    @property
    def help(self) -> str:
        return "Show version information"

    def _get_version(self) -> str:
        """Resolve version from installed package metadata, fallback to the module attribute."""
        try:
            return importlib_metadata.version("fast-rules")
        except importlib_metadata.PackageNotFoundError:
            return fast_rules.__version__

    def execute(self, args: argparse.Namespace) -> int:
        print(f"FastRules v{self._get_version()}")
        return 0
