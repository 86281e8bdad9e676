"""
Tokenizing and classifying raw UCI input lines.

A UCI command is a single line of whitespace-separated tokens. The first
token names the command; the rest is its payload. Leading, trailing and
repeated whitespace (spaces, tabs, stray newlines) carry no meaning, so
the tokenizer collapses them before anything else looks at the line.

Classification only inspects the first token. An empty line or an
unrecognised verb classifies as None; the protocol requires engines to
ignore such input, so this is not an error at this layer.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from uci_protocol import constants as c


class CommandType(str, Enum):
    """The supported subset of UCI commands, valued by their wire literal."""

    UCI = c.CMD_UCI
    DEBUG = c.CMD_DEBUG
    IS_READY = c.CMD_IS_READY
    SET_OPTION = c.CMD_SET_OPTION
    UCI_NEW_GAME = c.CMD_UCI_NEW_GAME
    POSITION = c.CMD_POSITION
    GO = c.CMD_GO
    STOP = c.CMD_STOP
    QUIT = c.CMD_QUIT


_BY_LITERAL: dict[str, CommandType] = {t.value: t for t in CommandType}


def tokenize(line: str) -> list[str]:
    """
    Split an input line into its non-empty tokens, preserving order.

    Args:
        line: A raw input line, possibly with surrounding or repeated
              whitespace and a trailing newline.

    Returns:
        The tokens in order; an empty list for blank input.
    """
    return line.split()


def classify(tokens: Sequence[str]) -> CommandType | None:
    """
    Map a token sequence to its command type by exact match of the first token.

    Args:
        tokens: Tokens produced by tokenize().

    Returns:
        The matching CommandType, or None for empty input or an unknown verb.
    """
    if not tokens:
        return None
    return _BY_LITERAL.get(tokens[0])


@dataclass(frozen=True)
class Command:
    """
    One tokenized input line.

    Attributes:
        tokens: The non-empty tokens of the line. tokens[0] is the verb.
    """

    tokens: tuple[str, ...]

    @classmethod
    def from_line(cls, line: str) -> "Command":
        """Tokenize a raw line into a Command."""
        return cls(tuple(tokenize(line)))

    @property
    def command_type(self) -> CommandType | None:
        """The command type named by the first token, if it is known."""
        return classify(self.tokens)
