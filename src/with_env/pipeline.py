"""Invocation pipeline: discover, load, expand, build and run."""

import os
import typing as t
from dataclasses import dataclass, field
from pathlib import Path

from .commands import CommandBuilder
from .config.environment import default_file_names, resolve_environment_name
from .config.settings import Settings
from .discovery import PathResolver
from .domain.command import CommandSpec
from .domain.environment import EnvMapping, ProcessEnvPrecedence
from .domain.files import EnvFile, FileSearchSpec, merge_order
from .expansion import SubstitutionMode, VariableExpander
from .infrastructure.logging import get_logger
from .loading import EnvFileLoader, parse_overrides
from .process import ProcessRunner, compose_environment

if t.TYPE_CHECKING:
    from loguru import Logger


@dataclass(frozen=True)
class RunRequest:
    """Everything one invocation needs, resolved from CLI options."""

    command: tuple[str, ...]
    search: FileSearchSpec
    environment_name: str
    file_paths: tuple[Path, ...] = ()
    overrides: tuple[str, ...] = ()
    cascade: bool = True
    include_process_env: bool = True
    process_env_precedence: ProcessEnvPrecedence = ProcessEnvPrecedence.LOWEST
    substitution_mode: SubstitutionMode = SubstitutionMode.ALL

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        command: t.Sequence[str],
        *,
        environment_name: str | None = None,
        search_path: Path | None = None,
        file_names: t.Sequence[str] = (),
        file_paths: t.Sequence[Path] = (),
        overrides: t.Sequence[str] = (),
        environ: t.Mapping[str, str] | None = None,
    ) -> "RunRequest":
        """Combine per-invocation options with the settings defaults."""
        name = resolve_environment_name(
            environment_name,
            environ=environ,
            sources=settings.environment_sources,
            default=settings.default_environment,
        )
        search = FileSearchSpec(
            start_dir=search_path or Path.cwd(),
            file_names=tuple(file_names) or default_file_names(name),
            ancestor_dirs=settings.ancestor_dirs,
            root_file_name=settings.root_file_name,
            limit_to_project_root=settings.limit_to_project_root,
        )
        return cls(
            command=tuple(command),
            search=search,
            environment_name=name,
            file_paths=tuple(file_paths),
            overrides=tuple(overrides),
            cascade=settings.cascade,
            include_process_env=settings.include_process_env,
            process_env_precedence=settings.process_env_precedence,
            substitution_mode=settings.substitution_mode,
        )


@dataclass(frozen=True)
class PreparedCommand:
    """A command ready to spawn together with its environment."""

    command: CommandSpec
    environment: EnvMapping
    loaded: EnvMapping
    files: tuple[EnvFile, ...] = field(default=())


class EnvPipeline:
    """Wires the components together for one invocation.

    Command and overrides are validated before any file is read, and the
    whole environment is built before anything is spawned, so a failure at
    any step never leaves a partially applied environment behind.
    """

    def __init__(
        self,
        *,
        resolver: PathResolver | None = None,
        loader: EnvFileLoader | None = None,
        expander: VariableExpander | None = None,
        builder: CommandBuilder | None = None,
        runner: ProcessRunner | None = None,
        ambient: t.Mapping[str, str] | None = None,
        logger: t.Optional["Logger"] = None,
    ) -> None:
        self._logger = logger or get_logger(__name__)
        self._resolver = resolver or PathResolver(logger=self._logger)
        self._loader = loader or EnvFileLoader(logger=self._logger)
        self._expander = expander or VariableExpander()
        self._builder = builder or CommandBuilder()
        self._runner = runner or ProcessRunner(logger=self._logger)
        self._ambient = ambient

    @property
    def ambient(self) -> t.Mapping[str, str]:
        return os.environ if self._ambient is None else self._ambient

    def prepare(self, request: RunRequest) -> PreparedCommand:
        """Resolve files, merge, expand and build the command."""
        overrides = parse_overrides(request.overrides)
        command = self._builder.build(request.command)
        self._logger.debug(f"Environment: {request.environment_name}")

        files = merge_order(self._resolver.resolve(request.search, request.file_paths))
        if files:
            self._logger.debug(
                "Loaded env files: " + ", ".join(str(f.path) for f in files)
            )
        else:
            self._logger.debug("Loaded env files: none")

        merged = self._loader.load(files, cascade=request.cascade)
        merged = self._loader.apply_overrides(merged, overrides)

        fallback = self.ambient if request.include_process_env else None
        loaded = self._expander.expand_mapping(
            merged, fallback=fallback, precedence=request.process_env_precedence
        )
        self._logger.debug(f"Parsed variables: {sorted(loaded)}")

        environment = compose_environment(
            loaded,
            ambient=self.ambient,
            include_ambient=request.include_process_env,
            precedence=request.process_env_precedence,
        )
        args = self._expander.expand_args(
            command.args, environment, request.substitution_mode
        )
        command = command.with_args(args)
        self._logger.debug(f"Command: {command.program} args: {list(command.args)}")

        return PreparedCommand(
            command=command,
            environment=environment,
            loaded=loaded,
            files=tuple(files),
        )

    def run(self, request: RunRequest) -> int:
        """Prepare and run the command, returning the child's exit code."""
        prepared = self.prepare(request)
        return self._runner.run(prepared.command, prepared.environment)
