"""Process - compose the child environment and run the command."""

from .environment import compose_environment
from .runner import ProcessRunner, exit_code_from_returncode

__all__ = ["ProcessRunner", "compose_environment", "exit_code_from_returncode"]
