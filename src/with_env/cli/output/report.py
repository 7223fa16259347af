"""User-facing messages for the CLI.

Everything is written to stderr so the child's stdout stays untouched.
"""

import typer

from ...domain.exceptions import WithEnvError


def display_error(error: WithEnvError) -> None:
    """Display a fatal error.

    Args:
        error: The error that aborted the invocation
    """
    typer.secho(f"✗ {error}", fg=typer.colors.RED, err=True)
