from __future__ import annotations

import functools
from types import MappingProxyType
from typing import Any, Mapping, Type

from fast_rules.contracts.validator_rule import ValidatorRule
from fast_rules.core.parser import RuleSpec, parse_rule_spec
from fast_rules.core.validation_rules import NonEmptyValidatorRule
from fast_rules.exceptions import InvalidRuleSyntaxException

# Closed set of rules. A new rule is a ValidatorRule subclass plus one entry here.
RULES: Mapping[str, Type[ValidatorRule]] = MappingProxyType({
    rule.name: rule
    for rule in (
        NonEmptyValidatorRule,
    )
})


def available_rules() -> list[str]:
    return sorted(RULES)


def resolve_rule(rule_spec: RuleSpec) -> ValidatorRule:
    """Look up the rule by name and build it from the declaration's arguments."""
    rule_class = RULES.get(rule_spec.rule_name)
    if rule_class is None:
        raise InvalidRuleSyntaxException()

    return rule_class.from_args(rule_spec.raw_args)


def compile_rule(spec: Any) -> ValidatorRule:
    """
    Parse and resolve a rule declaration.

    Results are memoised per declaration string; failures are not cached and
    raise `InvalidRuleSyntaxException` on every call.
    """
    if not isinstance(spec, str):
        raise InvalidRuleSyntaxException()

    return _compile_rule(spec)


@functools.lru_cache(maxsize=1024)
def _compile_rule(spec: str) -> ValidatorRule:
    return resolve_rule(parse_rule_spec(spec))
