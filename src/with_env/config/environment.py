"""Environment name resolution and default candidate file names."""

import os
import typing as t

from .settings import DEFAULT_ENVIRONMENT, DEFAULT_ENVIRONMENT_SOURCES


def resolve_environment_name(
    explicit: str | None = None,
    *,
    environ: t.Mapping[str, str] | None = None,
    sources: t.Sequence[str] = DEFAULT_ENVIRONMENT_SOURCES,
    default: str = DEFAULT_ENVIRONMENT,
) -> str:
    """Pick the active environment name.

    An explicit value wins, then the first non-empty variable among
    ``sources`` in ``environ`` (the process environment by default), then
    ``default``.
    """
    if explicit:
        return explicit

    environ = os.environ if environ is None else environ
    for source in sources:
        value = environ.get(source)
        if value:
            return value
    return default


def default_file_names(environment: str) -> tuple[str, ...]:
    """Candidate file names for ``environment``, least specific first.

    Examples:
        >>> default_file_names("production")
        ('.env', '.env.production', '.env.local', '.env.production.local')
    """
    return (
        ".env",
        f".env.{environment}",
        ".env.local",
        f".env.{environment}.local",
    )
