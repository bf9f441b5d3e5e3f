import os

DEFAULT_RULE_TAG_KEY = "validate"

# Separator between the rule name and its argument list
RULE_NAME_SEPARATOR = ":"

# Separator between arguments
RULE_ARG_SEPARATOR = ","


def rule_tag_key() -> str:
    """Metadata key holding a field's rule declaration (FAST_RULES_TAG_KEY)."""
    return os.getenv("FAST_RULES_TAG_KEY") or DEFAULT_RULE_TAG_KEY
