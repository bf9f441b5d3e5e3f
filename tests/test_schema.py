import pytest
from pydantic import Field

from fast_rules import Schema, ValidationErrors, check


class SignupSchema(Schema):
    name: str = Field(json_schema_extra={"validate": "non-empty:10"})
    nickname: str = Field(default="", json_schema_extra={"validate": "non-empty:5"})
    bio: str = ""


def test_schema_passes(short_text):
    SignupSchema(name=short_text, nickname="ada").check_rules()


def test_schema_collects_all_failures(long_text):
    schema = SignupSchema(name=long_text)

    with pytest.raises(ValidationErrors) as exc_info:
        schema.check_rules()

    assert [error.loc for error in exc_info.value] == [("name",), ("nickname",)]


def test_rule_errors_shape():
    errors = SignupSchema(name="ok").rule_errors()

    assert errors == [
        {"loc": ("nickname",), "msg": "validator non-empty", "type": "rule_violation"},
    ]


def test_plain_validate_accepts_models():
    assert check(SignupSchema(name="ok", nickname="ok")) is None
