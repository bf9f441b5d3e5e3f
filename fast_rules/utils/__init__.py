from .env_utils import configure_env
from .logging import setup_logging
from .serialisation import get_exception_error_type

__all__ = [
    "configure_env",
    "setup_logging",
    "get_exception_error_type",
]
