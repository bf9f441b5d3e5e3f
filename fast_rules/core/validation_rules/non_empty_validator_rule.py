from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, ClassVar, Sequence

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.exceptions import InvalidRuleSyntaxException, RuleViolationException

_BASE10_INT = re.compile(r"[+-]?[0-9]+")


def parse_int_arg(raw_args: Sequence[str]) -> int:
    """Parse the single base-10 integer argument of a one-argument rule."""
    if len(raw_args) != 1:
        raise InvalidRuleSyntaxException()

    # int() would also accept surrounding whitespace and digit separators
    if _BASE10_INT.fullmatch(raw_args[0]) is None:
        raise InvalidRuleSyntaxException()

    return int(raw_args[0])


@dataclass(frozen=True)
class NonEmptyValidatorRule(ValidatorRule):
    """Text must hold between 1 and `maximum` characters (code points)."""

    name: ClassVar[str] = "non-empty"

    maximum: int

    @classmethod
    def from_args(cls, raw_args: Sequence[str]) -> "NonEmptyValidatorRule":
        maximum = parse_int_arg(raw_args)
        if maximum < 1:
            raise InvalidRuleSyntaxException()
        return cls(maximum=maximum)

    def validate(self, *, value: Any, loc: Sequence[str]) -> None:
        if not isinstance(value, str):
            raise InvalidRuleSyntaxException(loc=tuple(loc))

        chars = len(value)
        if chars == 0 or chars > self.maximum:
            raise RuleViolationException(self.name, loc=tuple(loc))
