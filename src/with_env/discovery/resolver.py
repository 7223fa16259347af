"""Env file discovery across a directory and its ancestors."""

import typing as t
from pathlib import Path

from ..domain.exceptions import NotAFileError
from ..domain.files import EnvFile, FileSearchSpec
from ..infrastructure.logging import get_logger

if t.TYPE_CHECKING:
    from loguru import Logger


class PathResolver:
    """Finds env files for a FileSearchSpec.

    The start directory is searched first, then each ancestor in turn.
    Ascent stops at the filesystem root, or at the first directory holding
    the root file when the search is limited to the project root. That
    directory is still searched.
    """

    def __init__(self, *, logger: t.Optional["Logger"] = None) -> None:
        self._logger = logger or get_logger(__name__)

    def resolve(
        self,
        spec: FileSearchSpec,
        file_paths: t.Sequence[Path | str] | None = None,
    ) -> list[EnvFile]:
        """Return the env files to load, in discovery order.

        Args:
            spec: Search configuration
            file_paths: Explicit files to use instead of searching

        Raises:
            NotAFileError: If an explicit path is not an existing regular file.
        """
        if file_paths:
            return self._from_explicit_paths(file_paths)
        return self._search(spec)

    def _from_explicit_paths(self, file_paths: t.Sequence[Path | str]) -> list[EnvFile]:
        env_files: list[EnvFile] = []
        for order, raw_path in enumerate(file_paths):
            path = Path(raw_path).expanduser()
            if not path.is_file():
                raise NotAFileError(path)
            env_files.append(EnvFile(path=path.resolve(), level=0, order=order))
            self._logger.debug(f"Using explicit env file {path}")
        return env_files

    def _search(self, spec: FileSearchSpec) -> list[EnvFile]:
        env_files: list[EnvFile] = []
        directory = spec.start_dir.expanduser().resolve()
        level = 0

        while True:
            at_top = self._is_top(directory, spec)

            matched = False
            for file_name in spec.file_names:
                candidate = directory / file_name
                if candidate.is_file():
                    env_files.append(
                        EnvFile(path=candidate, level=level, order=len(env_files))
                    )
                    matched = True
                    self._logger.debug(f"Found env file {candidate}")

            if matched and not spec.ancestor_dirs:
                self._logger.debug("Ancestor search disabled, stopping at first match")
                break
            if at_top:
                break

            directory = directory.parent
            level += 1

        return env_files

    def _is_top(self, directory: Path, spec: FileSearchSpec) -> bool:
        if directory.parent == directory:
            self._logger.debug(f"Reached filesystem root {directory}")
            return True
        if spec.limit_to_project_root and (directory / spec.root_file_name).exists():
            self._logger.debug(
                f"Found root file {spec.root_file_name} in {directory}, "
                "not searching further up"
            )
            return True
        return False
