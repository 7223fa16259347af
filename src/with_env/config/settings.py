"""Settings container and helpers for with-env."""

import enum
import typing as t

from pydantic import BaseModel, ConfigDict, Field

from ..domain.environment import ProcessEnvPrecedence
from ..expansion.modes import SubstitutionMode

DEFAULT_ENVIRONMENT: t.Final = "development"
DEFAULT_ROOT_FILE_NAME: t.Final = ".root"
DEFAULT_ENVIRONMENT_SOURCES: t.Final = ("ENVIRONMENT", "ENV", "NODE_ENV")


class LogLevel(enum.StrEnum):
    """Log levels understood by the logging layer."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Settings(BaseModel):
    """Policy defaults for a single invocation.

    The CLI layer decides which values are overridden; anything left unset
    falls back to the defaults declared here.
    """

    model_config = ConfigDict(frozen=True)

    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Minimum level written to stderr",
    )
    root_file_name: str = Field(
        default=DEFAULT_ROOT_FILE_NAME,
        min_length=1,
        description="Sentinel file bounding the ancestor search",
    )
    cascade: bool = Field(
        default=True,
        description="Later files overwrite keys set by earlier ones",
    )
    ancestor_dirs: bool = Field(
        default=True,
        description="Keep searching ancestor directories after a match",
    )
    limit_to_project_root: bool = Field(
        default=True,
        description="Stop ascending at the directory holding the root file",
    )
    include_process_env: bool = Field(
        default=True,
        description="Pass the invoking process environment to the child",
    )
    process_env_precedence: ProcessEnvPrecedence = Field(
        default=ProcessEnvPrecedence.LOWEST,
        description="Whether ambient variables lose or win against loaded ones",
    )
    substitution_mode: SubstitutionMode = Field(
        default=SubstitutionMode.ALL,
        description="How references inside command arguments are replaced",
    )
    environment_sources: tuple[str, ...] = Field(
        default=DEFAULT_ENVIRONMENT_SOURCES,
        description="Variables consulted, in order, for the environment name",
    )
    default_environment: str = Field(
        default=DEFAULT_ENVIRONMENT,
        min_length=1,
        description="Environment name used when no source is set",
    )


def build_settings(base: Settings | None = None, **overrides: t.Any) -> Settings:
    """Build Settings, ignoring overrides that were left as None.

    Args:
        base: Settings to start from (defaults when omitted)
        **overrides: Field values; None means "not set"
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    if base is None:
        return Settings(**values)
    return Settings(**{**base.model_dump(), **values})
