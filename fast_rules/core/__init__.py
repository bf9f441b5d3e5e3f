"""Rule parsing, resolution and record validation."""

from .fields import FieldDescriptor, is_record, iter_fields
from .parser import RuleSpec, parse_rule_spec
from .registry import RULES, available_rules, compile_rule, resolve_rule
from .schema import Schema
from .validation import check, collect_errors, tagged, validate
from .validation_rules import NonEmptyValidatorRule

__all__ = [
    "FieldDescriptor",
    "is_record",
    "iter_fields",
    "RuleSpec",
    "parse_rule_spec",
    "RULES",
    "available_rules",
    "compile_rule",
    "resolve_rule",
    "Schema",
    "check",
    "collect_errors",
    "tagged",
    "validate",
    "NonEmptyValidatorRule",
]
