"""
Dispatch a raw input line to the parser for its command type.

This is the entry point a driver loop uses: it reads a line from the
transport, calls parse_line(), and acts on the ParsedCommand it gets
back. The dispatcher itself does no I/O.

Unknown commands:
    The protocol says engines must ignore input they do not understand,
    so an empty line or an unrecognised verb yields None instead of an
    error. It is logged at DEBUG level so the traffic can still be traced.

Parse failures:
    A recognised verb with a malformed payload raises the parser's
    ParsingError unchanged, after logging it at DEBUG level.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from uci_protocol.command import Command, CommandType
from uci_protocol.errors import ParsingError
from uci_protocol.parsers import (
    parse_debug,
    parse_go,
    parse_is_ready,
    parse_position,
    parse_quit,
    parse_set_option,
    parse_stop,
    parse_uci,
    parse_uci_new_game,
)

_log = logging.getLogger(__name__)

_PARSERS: dict[CommandType, Callable[[Sequence[str]], Any]] = {
    CommandType.UCI: parse_uci,
    CommandType.DEBUG: parse_debug,
    CommandType.IS_READY: parse_is_ready,
    CommandType.SET_OPTION: parse_set_option,
    CommandType.UCI_NEW_GAME: parse_uci_new_game,
    CommandType.POSITION: parse_position,
    CommandType.GO: parse_go,
    CommandType.STOP: parse_stop,
    CommandType.QUIT: parse_quit,
}


@dataclass(frozen=True)
class ParsedCommand:
    """
    A successfully parsed command.

    Attributes:
        command_type: Which command the line held.
        payload:      The parser's result: None for commands without data,
                      a bool for `debug`, otherwise a payload model.
    """

    command_type: CommandType
    payload: Any = None


def parse_command(command: Command) -> ParsedCommand | None:
    """
    Parse an already tokenized command.

    Args:
        command: The tokenized input line.

    Returns:
        The parsed command, or None if the verb is unknown or the line empty.

    Raises:
        ParsingError: The verb is known but its payload is malformed.
    """
    command_type = command.command_type
    if command_type is None:
        if command.tokens:
            _log.debug("uci: ignoring unknown command: %r", command.tokens[0])
        return None

    try:
        payload = _PARSERS[command_type](command.tokens)
    except ParsingError as exc:
        _log.debug("uci: rejected %s command: %s", command_type.value, exc)
        raise

    return ParsedCommand(command_type, payload)


def parse_line(line: str) -> ParsedCommand | None:
    """Tokenize *line* and parse it; see parse_command()."""
    return parse_command(Command.from_line(line))
