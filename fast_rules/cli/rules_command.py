"""List the rules that can be declared in field metadata."""

import argparse

from fast_rules.core.registry import available_rules

from .command_base import CommandBase


class RulesCommand(CommandBase):

    @property
    def name(self) -> str:
        return "rules"

    @property
    def help(self) -> str:
        return "List available validation rules"

    def execute(self, args: argparse.Namespace) -> int:
        for rule_name in available_rules():
            print(rule_name)
        return 0
