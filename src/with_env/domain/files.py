"""Env file discovery models."""

import typing as t
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class FileSearchSpec(BaseModel):
    """How env files are discovered for one invocation."""

    model_config = ConfigDict(frozen=True)

    start_dir: Path = Field(description="Directory the search starts from")
    file_names: tuple[str, ...] = Field(
        description="Candidate file names tested at each directory, in order",
    )
    ancestor_dirs: bool = Field(
        default=True,
        description="Keep ascending after a directory yields a match",
    )
    root_file_name: str = Field(
        default=".root",
        min_length=1,
        description="Sentinel file marking the project root",
    )
    limit_to_project_root: bool = Field(
        default=True,
        description="Stop ascending at the directory holding the root file",
    )


class EnvFile(BaseModel):
    """A discovered env file and where it was found."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Absolute path of the file")
    level: int = Field(
        default=0,
        ge=0,
        description="Directory distance from the start directory",
    )
    order: int = Field(default=0, ge=0, description="Position in discovery order")


def merge_order(files: t.Iterable[EnvFile]) -> list[EnvFile]:
    """Sort files into the order they are merged.

    Directories closest to the filesystem root come first and the start
    directory last; inside one directory the candidate order is kept. With
    cascade enabled the last file wins, so nearer and more specific files
    take precedence.
    """
    return sorted(files, key=lambda env_file: (-env_file.level, env_file.order))
