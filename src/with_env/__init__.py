"""with-env: run a command with layered .env files loaded."""

__version__ = "0.1.0"

from .domain import (  # noqa: E402
    CommandSpec,
    EnvFile,
    FileSearchSpec,
    InvalidOverrideError,
    MissingCommandError,
    NotAFileError,
    ParseError,
    SpawnError,
    WithEnvError,
)
from .pipeline import EnvPipeline, PreparedCommand, RunRequest  # noqa: E402

__all__ = [
    "__version__",
    "CommandSpec",
    "EnvFile",
    "EnvPipeline",
    "FileSearchSpec",
    "InvalidOverrideError",
    "MissingCommandError",
    "NotAFileError",
    "ParseError",
    "PreparedCommand",
    "RunRequest",
    "SpawnError",
    "WithEnvError",
]
