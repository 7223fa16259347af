"""Env file loading and merging."""

import io
import typing as t

from dotenv.parser import parse_stream

from ..domain.environment import EnvMapping, Override, freeze
from ..domain.exceptions import ParseError
from ..domain.files import EnvFile
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    from loguru import Logger


class EnvFileLoader:
    """Reads env files and merges them into one mapping.

    Files are merged in the order given. A key seen for the first time is
    always set. A key seen again replaces the earlier value only when
    cascade is enabled, otherwise the first value is kept. Values are
    returned raw; reference expansion happens once over the merged result.
    """

    def __init__(
        self,
        *,
        encoding: str = "utf-8",
        logger: t.Optional["Logger"] = None,
    ) -> None:
        self._encoding = encoding
        self._logger = logger or get_logger(__name__)

    def load(self, files: t.Iterable[EnvFile], *, cascade: bool = True) -> EnvMapping:
        """Merge ``files`` into a single mapping.

        Raises:
            ParseError: If a file cannot be read or contains a malformed line.
        """
        merged: dict[str, str] = {}
        for env_file in files:
            for key, value in self.parse_file(env_file).items():
                if key not in merged or cascade:
                    merged[key] = value
        return freeze(merged)

    def parse_file(self, env_file: EnvFile) -> dict[str, str]:
        """Parse one file into an ordered dict of raw values."""
        try:
            content = env_file.path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseError(env_file.path, str(exc)) from exc

        parsed: dict[str, str] = {}
        for binding in parse_stream(io.StringIO(content)):
            if binding.error:
                raise ParseError(
                    env_file.path,
                    f"could not parse statement {binding.original.string.strip()!r}",
                    line=binding.original.line,
                )
            if binding.key is None:
                continue
            if binding.value is None:
                self._logger.debug(
                    f"Skipping '{binding.key}' without a value in {env_file.path}"
                )
                continue
            parsed[binding.key] = binding.value

        self._logger.debug(f"Parsed {len(parsed)} variable(s) from {env_file.path}")
        return parsed

    @staticmethod
    def apply_overrides(
        mapping: EnvMapping, overrides: t.Iterable[Override]
    ) -> EnvMapping:
        """Set every override on top of ``mapping``, regardless of cascade."""
        merged = dict(mapping)
        for override in overrides:
            merged[override.key] = override.value
        return freeze(merged)


def parse_overrides(raw_overrides: t.Iterable[str]) -> list[Override]:
    """Validate inline ``KEY=VALUE`` overrides.

    Raises:
        InvalidOverrideError: On the first malformed entry.
    """
    return [Override.parse(raw) for raw in raw_overrides]
