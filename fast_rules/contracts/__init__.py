"""Contract classes and abstract interfaces."""

from .validator_rule import ValidatorRule

__all__ = [
    "ValidatorRule",
]
