"""Custom exceptions for with-env.

Every error is fatal to the invocation: the CLI reports it and exits with
the error's ``exit_code``. Nothing is retried.
"""

from pathlib import Path


class WithEnvError(Exception):
    """Base exception for with-env errors."""

    exit_code: int = 1


class NotAFileError(WithEnvError):
    """Raised when an explicit env file path is not a regular file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"Not a file: {self.path}")


class ParseError(WithEnvError):
    """Raised when an env file cannot be read or parsed."""

    def __init__(self, path: Path | str, reason: str, *, line: int | None = None):
        self.path = Path(path)
        self.reason = reason
        self.line = line
        location = f"{self.path}:{line}" if line is not None else str(self.path)
        super().__init__(f"Cannot load {location}: {reason}")


class InvalidOverrideError(WithEnvError):
    """Raised when an inline override is not of the form KEY=VALUE."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(
            f"Invalid override '{value}': expected KEY=VALUE with KEY matching "
            "[A-Za-z_][A-Za-z0-9_]*"
        )


class MissingCommandError(WithEnvError):
    """Raised when no executable token could be resolved."""

    def __init__(self, message: str = "No command supplied") -> None:
        super().__init__(message)


class SpawnError(WithEnvError):
    """Raised when the child process could not be started."""

    def __init__(self, program: str, reason: str) -> None:
        self.program = program
        self.reason = reason
        super().__init__(f"Failed to start '{program}': {reason}")
