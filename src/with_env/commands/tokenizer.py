"""Quote-aware command splitting.

This is deliberately smaller than POSIX shell parsing: there is no
globbing, no variable expansion and no operators. Spaces separate
tokens outside of quotes; tabs and newlines are ordinary characters.
Single and double quotes group characters and are dropped from the output.
An unterminated quote runs to the end of the input without error.
"""

import enum
import typing as t

_ESCAPABLE: t.Final = frozenset(" \"'\\")


class TokenizerState(enum.Enum):
    """States of the splitting state machine."""

    NORMAL = "normal"
    IN_SINGLE_QUOTE = "in_single_quote"
    IN_DOUBLE_QUOTE = "in_double_quote"


_QUOTES: t.Final = {
    "'": TokenizerState.IN_SINGLE_QUOTE,
    '"': TokenizerState.IN_DOUBLE_QUOTE,
}


class CommandTokenizer:
    """Splits one command string into tokens.

    A backslash outside single quotes makes the next character literal when
    that character is a space, a quote or another backslash; any other
    backslash is kept as is, so Windows paths survive. ``""`` and ``''``
    produce an empty token.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.state = TokenizerState.NORMAL
        self._tokens: list[str] = []
        self._current: list[str] = []
        self._has_token = False
        self._escape_next = False

    def split(self, text: str) -> list[str]:
        """Return the tokens of ``text``.

        Examples:
            >>> CommandTokenizer().split('foo "bar baz" qux')
            ['foo', 'bar baz', 'qux']
        """
        self._reset()
        for index, char in enumerate(text):
            if self._escape_next:
                self._push(char)
                self._escape_next = False
                continue

            if char == "\\" and self._starts_escape(text, index):
                self._escape_next = True
                continue

            if self.state is TokenizerState.NORMAL:
                self._on_normal(char)
            elif self.state is TokenizerState.IN_SINGLE_QUOTE:
                self._on_quoted(char, "'")
            else:
                self._on_quoted(char, '"')

        self._flush()
        return self._tokens

    def _starts_escape(self, text: str, index: int) -> bool:
        if self.state is TokenizerState.IN_SINGLE_QUOTE:
            return False
        following = text[index + 1 : index + 2]
        return following != "" and following in _ESCAPABLE

    def _on_normal(self, char: str) -> None:
        if char == " ":
            self._flush()
        elif char in _QUOTES:
            self.state = _QUOTES[char]
            self._has_token = True
        else:
            self._push(char)

    def _on_quoted(self, char: str, closing: str) -> None:
        if char == closing:
            self.state = TokenizerState.NORMAL
        else:
            self._push(char)

    def _push(self, char: str) -> None:
        self._current.append(char)
        self._has_token = True

    def _flush(self) -> None:
        if self._has_token:
            self._tokens.append("".join(self._current))
        self._current = []
        self._has_token = False


def split_command(text: str) -> list[str]:
    """Split ``text`` into tokens with a fresh tokenizer."""
    return CommandTokenizer().split(text)
