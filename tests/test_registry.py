import pytest

from fast_rules.core.parser import RuleSpec
from fast_rules.core.registry import RULES, available_rules, compile_rule, resolve_rule
from fast_rules.core.validation_rules import NonEmptyValidatorRule
from fast_rules.exceptions import InvalidRuleSyntaxException


def test_registry_holds_non_empty_rule():
    assert RULES["non-empty"] is NonEmptyValidatorRule
    assert available_rules() == ["non-empty"]


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        RULES["other"] = NonEmptyValidatorRule


def test_resolve_unknown_rule():
    with pytest.raises(InvalidRuleSyntaxException):
        resolve_rule(RuleSpec("required", ()))


def test_compile_rule():
    rule = compile_rule("non-empty:5")
    assert isinstance(rule, NonEmptyValidatorRule)
    assert rule.maximum == 5


def test_compile_rule_is_memoised():
    assert compile_rule("non-empty:7") is compile_rule("non-empty:7")


@pytest.mark.parametrize("spec", ["non-empty", "non-empty:", "non-empty:0", "unknown:1", "", ["non-empty:1"]])
def test_compile_rule_rejects_bad_specs(spec):
    with pytest.raises(InvalidRuleSyntaxException):
        compile_rule(spec)


def test_compile_failures_are_raised_every_time():
    for _ in range(2):
        with pytest.raises(InvalidRuleSyntaxException):
            compile_rule("non-empty:abc")
