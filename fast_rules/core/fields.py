from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from pydantic import BaseModel

from fast_rules.config import rule_tag_key
from fast_rules.exceptions import NotARecordException


@dataclass(frozen=True)
class FieldDescriptor:
    """
    One declared field of a record, as seen by the validator.

    `has_rule` separates a field without rule metadata (skipped) from a field
    whose metadata is present but empty or malformed (a syntax failure).
    """

    name: str
    visible: bool
    has_rule: bool
    rule_spec: Any
    reader: Callable[[], Any]

    def read(self) -> Any:
        return self.reader()


def is_record(value: Any) -> bool:
    """Dataclass and pydantic model instances are records; their classes are not."""
    if isinstance(value, type):
        return False
    return dataclasses.is_dataclass(value) or isinstance(value, BaseModel)


def is_visible(name: str) -> bool:
    return not name.startswith("_")


def _reader(record: Any, name: str) -> Callable[[], Any]:
    return lambda: getattr(record, name)


def _dataclass_fields(record: Any, tag_key: str) -> Iterator[FieldDescriptor]:
    for field in dataclasses.fields(record):
        yield FieldDescriptor(
            name=field.name,
            visible=is_visible(field.name),
            has_rule=tag_key in field.metadata,
            rule_spec=field.metadata.get(tag_key),
            reader=_reader(record, field.name),
        )


def _model_fields(record: BaseModel, tag_key: str) -> Iterator[FieldDescriptor]:
    for name, field_info in type(record).model_fields.items():
        # json_schema_extra may also be a callable, which carries no rule
        extra = field_info.json_schema_extra
        tags = extra if isinstance(extra, dict) else {}
        yield FieldDescriptor(
            name=name,
            visible=is_visible(name),
            has_rule=tag_key in tags,
            rule_spec=tags.get(tag_key),
            reader=_reader(record, name),
        )


def iter_fields(value: Any, *, tag_key: Optional[str] = None) -> Iterator[FieldDescriptor]:
    """
    Yield a descriptor for every declared field of `value`, in declaration order.

    Untagged and non-visible fields are included; the caller decides what to
    do with them.

    Raises:
        NotARecordException: If `value` is not a record. Raised before any field is yielded.
    """
    if not is_record(value):
        raise NotARecordException(type(value))

    tag_key = tag_key or rule_tag_key()

    if isinstance(value, BaseModel):
        return _model_fields(value, tag_key)
    return _dataclass_fields(value, tag_key)
