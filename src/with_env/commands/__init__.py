"""Commands - split and assemble the command to run."""

from .builder import CommandBuilder
from .tokenizer import CommandTokenizer, TokenizerState, split_command

__all__ = ["CommandBuilder", "CommandTokenizer", "TokenizerState", "split_command"]
