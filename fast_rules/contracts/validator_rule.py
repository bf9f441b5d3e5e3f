from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Sequence


class ValidatorRule(ABC):
    """
    Contract for rules referenced by name in field metadata.

    A rule is built once from the textual arguments of its declaration and
    then applied to field values. Instances must be immutable: compiled rules
    are cached and shared between calls.
    """

    name: ClassVar[str]

    @classmethod
    @abstractmethod
    def from_args(cls, raw_args: Sequence[str]) -> "ValidatorRule":
        """
        Build the rule from its raw declaration arguments.

        Args:
            raw_args: Arguments exactly as they appear in the declaration.

        Raises:
            InvalidRuleSyntaxException: If the arity or any argument is invalid.
        """
        raise NotImplementedError

    @abstractmethod
    def validate(self, *, value: Any, loc: Sequence[str]) -> None:
        """
        Validate a field value.

        Args:
            value: The current value of the field.
            loc: Path components from the record to the value.

        Raises:
            InvalidRuleSyntaxException: If the rule does not apply to the value's type.
            RuleViolationException: If the value fails the check.
        """
        raise NotImplementedError
