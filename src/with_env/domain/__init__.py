"""Domain layer - core models and exceptions."""

from .command import CommandSpec
from .environment import EnvMapping, Override, ProcessEnvPrecedence, freeze
from .exceptions import (
    InvalidOverrideError,
    MissingCommandError,
    NotAFileError,
    ParseError,
    SpawnError,
    WithEnvError,
)
from .files import EnvFile, FileSearchSpec, merge_order

__all__ = [
    # Models
    "CommandSpec",
    "EnvFile",
    "EnvMapping",
    "FileSearchSpec",
    "Override",
    "ProcessEnvPrecedence",
    "freeze",
    "merge_order",
    # Exceptions
    "InvalidOverrideError",
    "MissingCommandError",
    "NotAFileError",
    "ParseError",
    "SpawnError",
    "WithEnvError",
]
