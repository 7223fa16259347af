"""Environment mapping types and override models."""

import enum
import re
import typing as t
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InvalidOverrideError

_OVERRIDE_PATTERN: t.Final = re.compile(
    r"(?P<key>[A-Za-z_][A-Za-z0-9_]*)=(?P<value>.*)", re.DOTALL
)

EnvMapping = t.Mapping[str, str]


class ProcessEnvPrecedence(enum.StrEnum):
    """Where the invoking process environment sits relative to loaded values."""

    LOWEST = "lowest"  # loaded values override ambient ones
    HIGHEST = "highest"  # ambient values override loaded ones


class Override(BaseModel):
    """Inline KEY=VALUE assignment supplied on the command line."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1, description="Variable name")
    value: str = Field(default="", description="Raw value, expanded later")

    @classmethod
    def parse(cls, raw: str) -> "Override":
        """Parse ``KEY=VALUE``.

        Raises:
            InvalidOverrideError: If ``raw`` does not match the pattern.
        """
        match = _OVERRIDE_PATTERN.fullmatch(raw)
        if match is None:
            raise InvalidOverrideError(raw)
        return cls(key=match["key"], value=match["value"])


def freeze(mapping: t.Mapping[str, str]) -> EnvMapping:
    """Read-only view over a private copy of ``mapping``."""
    return MappingProxyType(dict(mapping))
