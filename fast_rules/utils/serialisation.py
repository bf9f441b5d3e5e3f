import re


def pascal_case_to_snake_case(pascal: type | str) -> str:
    """
    Convert a class name (CamelCase or PascalCase) to snake_case.

    Args:
        pascal: The class or class name as a string.

    Returns:
        str: The snake_case version of the class name.
    """
    if not isinstance(pascal, str):
        pascal = pascal.__name__
    # Insert underscores before capital letters, except at the start
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', pascal)
    snake = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1).lower()
    return snake


def remove_suffix(text: str, suffix: str) -> str:
    """
    Remove an exact suffix from the given text if present.

    Unlike str.rstrip, this removes only the provided suffix once,
    not any combination of its characters.
    """
    if text.endswith(suffix):
        return text[: -len(suffix)]
    return text


def get_exception_error_type(exception: Exception) -> str:
    return pascal_case_to_snake_case(remove_suffix(exception.__class__.__name__, "Exception"))
