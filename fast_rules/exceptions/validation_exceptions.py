from __future__ import annotations

from typing import Iterator, Sequence, Type

from fast_rules.utils.serialisation import get_exception_error_type


class NotARecordException(TypeError):
    def __init__(self, value_type: type | None = None):
        super().__init__("wrong argument given, should be a record")
        self.value_type = value_type


class ValidationRuleException(ValueError):
    """
    Failure recorded for a single field.

    Subclasses mark the kind of failure. `loc` holds the field name so callers
    can tell which field produced it, while `str()` stays the bare message.
    """

    default_message = "validation failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        loc: tuple[str, ...] | None = None,
        error_type: str | None = None,
    ):
        self.message = message or self.default_message
        super().__init__(self.message)
        self.loc = loc or tuple()
        self.error_type = error_type or get_exception_error_type(self)

    def at(self, *loc: str) -> "ValidationRuleException":
        self.loc = tuple(loc)
        return self

    def to_dict(self) -> dict:
        return {
            "loc": self.loc,
            "msg": self.message,
            "type": self.error_type,
        }


class InvalidRuleSyntaxException(ValidationRuleException):
    """The rule declaration itself is malformed or inapplicable to the field."""

    default_message = "invalid validator syntax"


class UnexportedFieldTaggedException(ValidationRuleException):
    default_message = "validation for unexported field is not allowed"


class RuleViolationException(ValidationRuleException):
    """The value is well-typed and the declaration well-formed, but the check failed."""

    def __init__(self, rule_name: str, *, loc: tuple[str, ...] | None = None):
        super().__init__(f"validator {rule_name}", loc=loc)
        self.rule_name = rule_name


class ValidationErrors(ValueError):
    """
    Ordered collection of per-field failures, in field declaration order.

    Never constructed empty: a call without failures has no error at all.
    A single failure renders as its own message, several failures render
    as one line per failure.
    """

    def __init__(self, errors: Sequence[ValidationRuleException]):
        if not errors:
            raise ValueError("ValidationErrors requires at least one error")
        self.errors = list(errors)
        super().__init__(self._render())

    def _render(self) -> str:
        if len(self.errors) == 1:
            return str(self.errors[0])

        return "".join(f"{error}\n" for error in self.errors)

    def __str__(self) -> str:
        return self._render()

    def __len__(self) -> int:
        return len(self.errors)

    def __iter__(self) -> Iterator[ValidationRuleException]:
        return iter(self.errors)

    def __getitem__(self, index: int) -> ValidationRuleException:
        return self.errors[index]

    def of_type(self, kind: Type[ValidationRuleException]) -> list[ValidationRuleException]:
        return [error for error in self.errors if isinstance(error, kind)]

    def to_list(self) -> list[dict]:
        return [error.to_dict() for error in self.errors]
