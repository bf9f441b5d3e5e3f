from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fast_rules.config import RULE_ARG_SEPARATOR, RULE_NAME_SEPARATOR
from fast_rules.exceptions import InvalidRuleSyntaxException


@dataclass(frozen=True)
class RuleSpec:
    """A parsed `<rule-name>:[<arg>{,<arg>}]` declaration."""

    rule_name: str
    raw_args: tuple[str, ...] = ()


def parse_rule_spec(spec: Any) -> RuleSpec:
    """
    Split a rule declaration into its name and raw arguments.

    The name is everything before the first separator; the rest is the
    argument list, split on commas without trimming. An empty argument
    list is allowed, a missing separator is not.

        parse_rule_spec("non-empty:10")   -> RuleSpec("non-empty", ("10",))
        parse_rule_spec("non-empty:")     -> RuleSpec("non-empty", ())
        parse_rule_spec("non-empty")      -> InvalidRuleSyntaxException
    """
    if not isinstance(spec, str):
        raise InvalidRuleSyntaxException()

    rule_name, separator, unsplit_args = spec.partition(RULE_NAME_SEPARATOR)
    if not separator or not rule_name:
        raise InvalidRuleSyntaxException()

    if unsplit_args == "":
        return RuleSpec(rule_name, ())

    return RuleSpec(rule_name, tuple(unsplit_args.split(RULE_ARG_SEPARATOR)))
