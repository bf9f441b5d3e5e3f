"""Exceptions raised by fast_rules."""

from .validation_exceptions import (
    NotARecordException,
    ValidationRuleException,
    InvalidRuleSyntaxException,
    UnexportedFieldTaggedException,
    RuleViolationException,
    ValidationErrors,
)


__all__ = [
    "NotARecordException",
    "ValidationRuleException",
    "InvalidRuleSyntaxException",
    "UnexportedFieldTaggedException",
    "RuleViolationException",
    "ValidationErrors",
]
