from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel

from fast_rules.core.validation import collect_errors, validate


class Schema(BaseModel):
    """
    Pydantic model whose fields may carry rule declarations.

    Rules are declared through `json_schema_extra` and checked after parsing:

        class SignupSchema(Schema):
            name: str = Field(json_schema_extra={"validate": "non-empty:30"})

        SignupSchema(name="").check_rules()  # raises ValidationErrors
    """

    def check_rules(self) -> None:
        validate(self)

    def rule_errors(self) -> List[dict[str, Any]]:
        """Failures in the pydantic-like `{"loc", "msg", "type"}` shape."""
        return [error.to_dict() for error in collect_errors(self)]
