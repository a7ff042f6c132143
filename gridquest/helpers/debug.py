import functools
import logging

from gridquest.config import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL


def log_call(fn):
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        logging.getLogger("calls").debug(f"Calling {fn.__qualname__} {args} {kwargs}")
        return fn(*args, **kwargs)
    return __wrapped


def configure_logging(level: str = DEFAULT_LOG_LEVEL, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Set up root logging for an application embedding the game."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=fmt)
