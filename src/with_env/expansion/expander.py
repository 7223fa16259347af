"""Reference expansion for env values and command arguments."""

import re
import typing as t

from ..domain.environment import EnvMapping, ProcessEnvPrecedence, freeze
from .modes import SubstitutionMode

_REFERENCE: t.Final = re.compile(
    r"""
    (?P<escaped>\\\$)
    | \$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::-(?P<default>[^}]*))?\}
    | \$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)
    """,
    re.VERBOSE,
)

Lookup = t.Callable[[str], str | None]


class VariableExpander:
    """Resolves ``${NAME}``, ``$NAME`` and ``${NAME:-default}`` references.

    Expansion is a single left-to-right pass: substituted text is never
    scanned again, so self-referencing values cannot loop. A reference that
    does not resolve and has no default is kept verbatim. ``\\$`` produces a
    literal ``$``.
    """

    def __init__(self, *, args_mode: SubstitutionMode = SubstitutionMode.ALL) -> None:
        self.args_mode = args_mode

    def expand(
        self,
        text: str,
        lookup: Lookup,
        mode: SubstitutionMode = SubstitutionMode.ALL,
    ) -> str:
        """Expand references in ``text`` using ``lookup``."""
        seen: set[tuple[str, str]] = set()

        def replace(match: re.Match[str]) -> str:
            if match["escaped"]:
                return "$"

            form = "braced" if match["braced"] else "bare"
            name = match[form]
            if mode == SubstitutionMode.FIRST:
                if (name, form) in seen:
                    return match[0]
                seen.add((name, form))

            value = lookup(name)
            if value is not None:
                return value
            if match["default"] is not None:
                return match["default"]
            return match[0]

        return _REFERENCE.sub(replace, text)

    def expand_mapping(
        self,
        mapping: EnvMapping,
        fallback: EnvMapping | None = None,
        precedence: ProcessEnvPrecedence = ProcessEnvPrecedence.LOWEST,
    ) -> EnvMapping:
        """Expand every value of ``mapping`` once, in key order.

        A reference resolves to the expanded value of an earlier key, else
        the raw value of a later key, else ``fallback``. With
        ``ProcessEnvPrecedence.HIGHEST`` the ``fallback`` is consulted first,
        matching the environment the child will see. A key referring to
        itself only sees ``fallback``, so ``PATH=${PATH}:bin`` extends the
        ambient value.
        """
        fallback = fallback or {}
        fallback_first = precedence == ProcessEnvPrecedence.HIGHEST
        resolved: dict[str, str] = {}

        for key, raw in mapping.items():

            def lookup(name: str, current: str = key) -> str | None:
                if fallback_first and name in fallback:
                    return fallback[name]
                if name != current:
                    if name in resolved:
                        return resolved[name]
                    if name in mapping:
                        return mapping[name]
                return fallback.get(name)

            resolved[key] = self.expand(raw, lookup)

        return freeze(resolved)

    def expand_args(
        self,
        args: t.Iterable[str],
        environment: EnvMapping,
        mode: SubstitutionMode | None = None,
    ) -> list[str]:
        """Expand each argument against the final child environment."""
        mode = mode or self.args_mode
        return [self.expand(arg, environment.get, mode) for arg in args]
