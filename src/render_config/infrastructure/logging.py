"""Logging setup built on loguru.

Call `setup_logging` (or `configure_logger`) once at startup. Modules obtain
a logger with `get_logger(__name__)`, which leaves the sinks untouched;
importing the package never changes global logging.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel
from ..domain.environment import Environment

if t.TYPE_CHECKING:
    import loguru

    from ..config.settings import Settings

_DEVELOPMENT_FORMAT: t.Final = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)
_PRODUCTION_FORMAT: t.Final = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name} - {message}"
)

_configured = False


def configure_logger(
    level: LogLevel | str = LogLevel.INFO,
    environment: Environment = Environment.PRODUCTION,
) -> None:
    """Replace all loguru sinks with a single stderr sink.

    Only startup code should call this. Development output is colourised
    and includes function and line; production output is plain.
    """
    global _configured

    logger.remove()
    development = environment.is_development
    logger.add(
        sys.stderr,
        level=str(level),
        format=_DEVELOPMENT_FORMAT if development else _PRODUCTION_FORMAT,
        colorize=development,
        backtrace=development,
        diagnose=development,
    )
    _configured = True


def setup_logging(settings: "Settings") -> None:
    """Configure logging from Settings."""
    configure_logger(level=settings.log_level, environment=settings.environment)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to `name`.

    Never adds or removes sinks, so records go wherever the host
    application has configured loguru to send them.
    """
    return logger.bind(component=name)


def is_configured() -> bool:
    """Whether configure_logger has run since the last reset."""
    return _configured


def reset_logging() -> None:
    """Remove all sinks and forget any explicit configuration."""
    global _configured

    logger.remove()
    _configured = False
