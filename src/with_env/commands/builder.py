"""Build a CommandSpec from raw user tokens."""

import typing as t

from ..domain.command import CommandSpec
from ..domain.exceptions import MissingCommandError
from .tokenizer import split_command


class CommandBuilder:
    """Turns the user's command tokens into a CommandSpec.

    Only the first token is split, since it may hold a whole quoted command
    line such as ``"npm run build"``. Every following token is passed
    through verbatim.
    """

    def build(self, tokens: t.Sequence[str]) -> CommandSpec:
        """Build the command.

        Raises:
            MissingCommandError: If no executable token results.
        """
        if not tokens:
            raise MissingCommandError()

        head, *passthrough = tokens
        pieces = split_command(head)
        if not pieces or not pieces[0]:
            raise MissingCommandError()

        program, *args = pieces
        return CommandSpec(program=program, args=(*args, *passthrough))
