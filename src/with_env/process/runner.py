"""Child process execution."""

import subprocess
import typing as t

from ..domain.command import CommandSpec
from ..domain.environment import EnvMapping
from ..domain.exceptions import SpawnError
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    from loguru import Logger

# Shell convention for a child terminated by signal N.
_SIGNAL_EXIT_BASE: t.Final = 128


class ProcessRunner:
    """Runs a command synchronously with inherited stdio.

    Nothing is captured or buffered: the child writes straight to the
    caller's stdout and stderr and reads from its stdin. The call blocks
    until the child exits. Spawn failures are reported, never retried.

    Ctrl-C reaches the child through the terminal's process group; the
    runner keeps waiting so the child can shut down on its own terms and
    its exit code is still returned.
    """

    def __init__(self, *, logger: t.Optional["Logger"] = None) -> None:
        self._logger = logger or get_logger(__name__)

    def run(self, command: CommandSpec, environment: EnvMapping) -> int:
        """Run ``command`` with exactly ``environment`` and return its exit code.

        Raises:
            SpawnError: If the executable cannot be started.
        """
        self._logger.debug(f"Spawning {command.argv}")
        try:
            process = subprocess.Popen(command.argv, env=dict(environment))
        except FileNotFoundError as exc:
            raise SpawnError(command.program, "command not found") from exc
        except PermissionError as exc:
            raise SpawnError(command.program, "permission denied") from exc
        except OSError as exc:
            raise SpawnError(command.program, exc.strerror or str(exc)) from exc

        returncode = exit_code_from_returncode(self._wait(process))
        self._logger.debug(f"{command.program} exited with {returncode}")
        return returncode

    def _wait(self, process: subprocess.Popen) -> int:
        while True:
            try:
                return process.wait()
            except KeyboardInterrupt:
                self._logger.debug("Interrupted, waiting for child to exit")


def exit_code_from_returncode(returncode: int) -> int:
    """Map a subprocess return code to a process exit code.

    Examples:
        >>> exit_code_from_returncode(3)
        3
        >>> exit_code_from_returncode(-15)
        143
    """
    if returncode < 0:
        return _SIGNAL_EXIT_BASE - returncode
    return returncode
