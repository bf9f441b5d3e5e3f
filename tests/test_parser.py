import pytest

from fast_rules.core.parser import RuleSpec, parse_rule_spec
from fast_rules.exceptions import InvalidRuleSyntaxException


def test_parse_single_argument():
    assert parse_rule_spec("non-empty:10") == RuleSpec("non-empty", ("10",))


def test_parse_empty_argument_list():
    spec = parse_rule_spec("non-empty:")
    assert spec.rule_name == "non-empty"
    assert spec.raw_args == ()


def test_parse_splits_on_commas_without_trimming():
    spec = parse_rule_spec("range:1, 2,,3")
    assert spec.raw_args == ("1", " 2", "", "3")


def test_parse_splits_name_on_first_separator_only():
    spec = parse_rule_spec("pattern:a:b,c")
    assert spec.rule_name == "pattern"
    assert spec.raw_args == ("a:b", "c")


@pytest.mark.parametrize("spec", ["non-empty", "", ":10", None, 10])
def test_parse_rejects_malformed_spec(spec):
    with pytest.raises(InvalidRuleSyntaxException):
        parse_rule_spec(spec)
