from __future__ import annotations

import dataclasses
import logging
from typing import Any, List, Optional

from fast_rules.config import rule_tag_key
from fast_rules.core.fields import FieldDescriptor, iter_fields
from fast_rules.core.registry import compile_rule
from fast_rules.exceptions import (
    InvalidRuleSyntaxException,
    NotARecordException,
    UnexportedFieldTaggedException,
    ValidationErrors,
    ValidationRuleException,
)

logger = logging.getLogger(__name__)


def _validate_field(field: FieldDescriptor) -> None:
    loc = (field.name,)

    if not field.visible:
        raise UnexportedFieldTaggedException(loc=loc)

    try:
        rule = compile_rule(field.rule_spec)
    except ValidationRuleException as exc:
        raise exc.at(*loc)

    try:
        value = field.read()
    except AttributeError:
        # declared but never set (init=False without default, model_construct)
        raise InvalidRuleSyntaxException(loc=loc)

    rule.validate(value=value, loc=loc)


def collect_errors(value: Any, *, tag_key: Optional[str] = None) -> List[ValidationRuleException]:
    """
    Run every tagged field's rule and return the failures in declaration order.

    Raises:
        NotARecordException: If `value` is not a record.
    """
    errors: List[ValidationRuleException] = []

    for field in iter_fields(value, tag_key=tag_key):
        if not field.has_rule:
            continue

        try:
            _validate_field(field)
        except ValidationRuleException as exc:
            logger.debug(f"Field `{field.name}` of {type(value).__name__} failed: {exc} ({exc.error_type})")
            errors.append(exc)

    return errors


def validate(value: Any, *, tag_key: Optional[str] = None) -> None:
    """
    Validate a record against the rules declared in its field metadata.

    Every tagged field is checked, even after earlier fields failed.

        @dataclass
        class User:
            name: str = tagged("non-empty:30")

        validate(User(name="Ada"))

    Raises:
        NotARecordException: If `value` is not a dataclass or pydantic model instance.
        ValidationErrors: If one or more fields failed, in declaration order.
    """
    errors = collect_errors(value, tag_key=tag_key)
    if errors:
        logger.debug(f"{type(value).__name__}: {len(errors)} field(s) failed validation")
        raise ValidationErrors(errors)


def check(value: Any, *, tag_key: Optional[str] = None) -> Optional[Exception]:
    """Like `validate`, but return the error (or None) instead of raising it."""
    try:
        validate(value, tag_key=tag_key)
    except (NotARecordException, ValidationErrors) as exc:
        return exc
    return None


def tagged(spec: str, *, tag_key: Optional[str] = None, **field_kwargs: Any) -> Any:
    """
    `dataclasses.field` carrying a rule declaration in its metadata.

    Extra keyword arguments are passed through; other metadata entries are kept.
    """
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[tag_key or rule_tag_key()] = spec
    return dataclasses.field(metadata=metadata, **field_kwargs)
