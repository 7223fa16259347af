"""Resolved command model."""

from pydantic import BaseModel, ConfigDict, Field


class CommandSpec(BaseModel):
    """Executable name plus its ordered arguments."""

    model_config = ConfigDict(frozen=True)

    program: str = Field(min_length=1, description="Executable to spawn")
    args: tuple[str, ...] = Field(
        default=(),
        description="Arguments passed to the executable, in order",
    )

    @property
    def argv(self) -> list[str]:
        """Full argument vector, program first."""
        return [self.program, *self.args]

    def with_args(self, args: tuple[str, ...] | list[str]) -> "CommandSpec":
        """Copy of this command with ``args`` replaced."""
        return self.model_copy(update={"args": tuple(args)})
