from .non_empty_validator_rule import NonEmptyValidatorRule

__all__ = [
    "NonEmptyValidatorRule",
]
