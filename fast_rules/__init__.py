"""
FastRules - declarative field validation for dataclasses and pydantic models.

Rules are declared as strings in field metadata and checked at runtime:

    @dataclass
    class User:
        name: str = tagged("non-empty:30")

    validate(User(name=""))  # raises ValidationErrors
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
