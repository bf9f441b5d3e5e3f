"""Base command for built-in FastRules CLI operations."""

import argparse
from abc import ABC, abstractmethod


class CommandBase(ABC):
    """Base class for all built-in CLI commands."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name."""
        pass

    @property
    @abstractmethod
    def help(self) -> str:
        """Command help text."""
        pass

    def configure_parser(self, parser: argparse.ArgumentParser) -> None:
        """Configure command-specific arguments. Override if needed."""
        pass

    @abstractmethod
    def execute(self, args: argparse.Namespace) -> int:
        """Execute the command and return the process exit code."""
        pass
