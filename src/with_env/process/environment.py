"""Compose the child process environment."""

import os
import typing as t

from ..domain.environment import EnvMapping, ProcessEnvPrecedence, freeze


def compose_environment(
    loaded: EnvMapping,
    *,
    ambient: t.Mapping[str, str] | None = None,
    include_ambient: bool = True,
    precedence: ProcessEnvPrecedence = ProcessEnvPrecedence.LOWEST,
) -> EnvMapping:
    """Build the environment the child process sees.

    Args:
        loaded: Values from env files and overrides, already expanded
        ambient: Invoking process environment (``os.environ`` by default)
        include_ambient: Whether ambient variables are passed on at all
        precedence: LOWEST lets loaded values win, HIGHEST lets ambient win

    Returns:
        Read-only mapping for the child
    """
    if not include_ambient:
        return freeze(loaded)

    ambient = dict(os.environ if ambient is None else ambient)
    if precedence == ProcessEnvPrecedence.HIGHEST:
        return freeze({**loaded, **ambient})
    return freeze({**ambient, **loaded})
