"""CLI application factory."""

from pathlib import Path
from typing import List, Optional

import typer

from .. import __version__
from ..config.settings import LogLevel, Settings, build_settings
from ..domain.environment import ProcessEnvPrecedence
from ..domain.exceptions import WithEnvError
from ..expansion.modes import SubstitutionMode
from ..infrastructure.logging import get_logger, setup_logging
from ..pipeline import RunRequest
from .output.report import display_error
from .state import CLIState, PipelineFactory


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"with-env {__version__}")
        raise typer.Exit()


def create_cli_app(
    settings: Settings | None = None,
    pipeline_factory: PipelineFactory | None = None,
) -> typer.Typer:
    """Create CLI application with optional settings and pipeline overrides.

    Args:
        settings: Base Settings; CLI flags that are given still apply on top
        pipeline_factory: Optional EnvPipeline factory for testing

    Returns:
        Configured Typer application
    """
    app = typer.Typer(
        name="with-env",
        help="Run a command with .env files loaded",
        add_completion=False,
    )

    @app.command(
        context_settings={
            "allow_interspersed_args": False,
            "ignore_unknown_options": True,
        }
    )
    def run(
        ctx: typer.Context,
        command: Optional[List[str]] = typer.Argument(
            None,
            metavar="COMMAND [ARGS]...",
            help="Command to run; the first token may hold a quoted command line",
            show_default=False,
        ),
        env: Optional[str] = typer.Option(
            None,
            "--env",
            "-e",
            help="Environment name (defaults to $ENVIRONMENT, $ENV, $NODE_ENV "
            "or 'development')",
        ),
        file_names: Optional[List[str]] = typer.Option(
            None,
            "--file-name",
            "-f",
            help="Env file name to look for; repeat to give several, in load order",
        ),
        file_paths: Optional[List[Path]] = typer.Option(
            None,
            "--file-path",
            "-F",
            help="Full path of an env file to load instead of searching; repeatable",
        ),
        cascade: Optional[bool] = typer.Option(
            None,
            "--cascade/--no-cascade",
            "-c/-C",
            help="Let later files override variables set by earlier ones",
            show_default=False,
        ),
        ancestor_dirs: Optional[bool] = typer.Option(
            None,
            "--ancestor-dirs/--no-ancestor-dirs",
            "-a/-A",
            help="Keep searching ancestor directories after the first match",
            show_default=False,
        ),
        root_file_name: Optional[str] = typer.Option(
            None,
            "--root-file-name",
            "-r",
            help="Name of the project root marker file (default .root)",
        ),
        limit_to_project_root: Optional[bool] = typer.Option(
            None,
            "--limit-to-project-root/--no-limit-to-project-root",
            "-l/-L",
            help="Stop the ancestor search at the directory holding the root file",
            show_default=False,
        ),
        path: Optional[Path] = typer.Option(
            None,
            "--path",
            "-p",
            help="Directory to start searching from (default: current directory)",
            file_okay=False,
        ),
        overrides: Optional[List[str]] = typer.Option(
            None,
            "--set",
            "-s",
            help="Inline KEY=VALUE override, applied after the files; repeatable",
        ),
        include_env: Optional[bool] = typer.Option(
            None,
            "--include-env/--no-include-env",
            "-i/-I",
            help="Pass this process's environment on to the command",
            show_default=False,
        ),
        env_precedence: Optional[ProcessEnvPrecedence] = typer.Option(
            None,
            "--env-precedence",
            help="Whether the process environment loses (lowest) or wins "
            "(highest) against loaded values",
            case_sensitive=False,
        ),
        substitute: Optional[SubstitutionMode] = typer.Option(
            None,
            "--substitute",
            help="Replace all references in arguments, or only the first of each",
            case_sensitive=False,
        ),
        debug: bool = typer.Option(
            False,
            "--debug",
            "-d",
            help="Output extra debugging logs to stderr",
        ),
        version: bool = typer.Option(
            False,
            "--version",
            "-V",
            callback=_version_callback,
            is_eager=True,
            help="Show the version and exit",
        ),
    ) -> None:
        """Run COMMAND with variables from .env files in its environment.

        Examples:
            with-env -e production -- node server.js
            with-env 'echo ${DATABASE_URL}'
            with-env -s PORT=8080 -F ./ci.env make test
        """
        resolved_settings = build_settings(
            settings,
            log_level=LogLevel.DEBUG if debug else None,
            root_file_name=root_file_name,
            cascade=cascade,
            ancestor_dirs=ancestor_dirs,
            limit_to_project_root=limit_to_project_root,
            include_process_env=include_env,
            process_env_precedence=env_precedence,
            substitution_mode=substitute,
        )
        state = CLIState(resolved_settings, pipeline_factory=pipeline_factory)
        ctx.obj = state

        setup_logging(state.settings)
        logger = get_logger(__name__)
        logger.debug(f"Running command: {command}")
        logger.debug(f"Settings: {state.settings}")

        try:
            request = RunRequest.from_settings(
                state.settings,
                command or [],
                environment_name=env,
                search_path=path,
                file_names=file_names or [],
                file_paths=file_paths or [],
                overrides=overrides or [],
            )
            exit_code = state.create_pipeline().run(request)
        except WithEnvError as e:
            logger.debug(f"Aborting: {e!r}")
            display_error(e)
            raise typer.Exit(code=e.exit_code)

        raise typer.Exit(code=exit_code)

    return app
