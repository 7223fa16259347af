"""Logging setup built on loguru.

All output goes to stderr so that the child's stdout is never mixed with
diagnostics. Modules obtain a bound logger through ``get_logger`` which
configures loguru with defaults on first use.
"""

import sys
import typing as t

from loguru import logger

from ..config.settings import LogLevel, Settings

if t.TYPE_CHECKING:
    import loguru

_DEFAULT_FORMAT: t.Final = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> - <level>{message}</level>"
)

_configured = False


def configure_logger(
    level: LogLevel = LogLevel.WARNING,
    *,
    sink: t.Any = None,
    colorize: bool | None = None,
) -> None:
    """Replace loguru's handlers with a single stderr handler at ``level``."""
    global _configured

    logger.remove()
    logger.configure(extra={"name": "with_env"})
    logger.add(
        sink if sink is not None else sys.stderr,
        level=str(level),
        format=_DEFAULT_FORMAT,
        colorize=colorize,
        backtrace=False,
        diagnose=False,
    )
    _configured = True


def setup_logging(settings: Settings) -> None:
    """Configure logging from application settings."""
    configure_logger(level=settings.log_level)


def get_logger(name: str) -> "loguru.Logger":
    """Return a logger bound to ``name``, configuring defaults if needed."""
    if not _configured:
        configure_logger()
    return logger.bind(name=name)


def reset_logging() -> None:
    """Drop all handlers so the next ``get_logger`` call starts clean."""
    global _configured

    logger.remove()
    _configured = False
