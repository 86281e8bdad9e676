"""
UCI protocol codec: parse GUI commands and build engine messages.

Pure text transforms with no I/O and no shared state. A driver loop reads
lines from its transport, hands them to parse_line(), and writes the
strings returned by the build_* functions followed by a newline.

Modules:
    command   — Tokenizer, CommandType, and the first-token classifier
    parsers   — One parser per command type
    payloads  — Payload records produced by the parsers
    grammar   — FEN, move, and unsigned-integer matchers
    info      — Score and the MoveInfo entries of `info` messages
    options   — Option descriptors for `option` messages
    messages  — Builders for every engine -> GUI message
    dispatch  — Line-level entry point routing to the right parser
    errors    — The ParsingError taxonomy
"""

from uci_protocol.command import Command, CommandType, classify, tokenize
from uci_protocol.dispatch import ParsedCommand, parse_command, parse_line
from uci_protocol.errors import InvalidCommandType, InvalidLength, ParsingError, UnknownToken
from uci_protocol.info import (
    CpuLoad,
    CurrLine,
    CurrMove,
    CurrMoveNumber,
    Custom,
    Depth,
    HashFull,
    MoveInfo,
    MultiPv,
    Nodes,
    Nps,
    Pv,
    Refutation,
    Score,
    ScoreInfo,
    SelDepth,
    TbHits,
    Time,
)
from uci_protocol.messages import (
    build_author,
    build_bestmove,
    build_info,
    build_name,
    build_option,
    build_ready_ok,
    build_uci_ok,
)
from uci_protocol.options import (
    OptionMsg,
    OptionType,
    new_button,
    new_check,
    new_combo,
    new_spin,
    new_string,
)
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
from uci_protocol.payloads import GoPayload, PositionPayload, SetOptionPayload

__all__ = [
    # Commands
    "Command",
    "CommandType",
    "classify",
    "tokenize",
    "ParsedCommand",
    "parse_command",
    "parse_line",
    # Errors
    "ParsingError",
    "InvalidCommandType",
    "InvalidLength",
    "UnknownToken",
    # Parsers and payloads
    "parse_uci",
    "parse_debug",
    "parse_is_ready",
    "parse_set_option",
    "parse_uci_new_game",
    "parse_position",
    "parse_go",
    "parse_stop",
    "parse_quit",
    "GoPayload",
    "PositionPayload",
    "SetOptionPayload",
    # Info entries
    "MoveInfo",
    "Score",
    "Depth",
    "SelDepth",
    "Time",
    "Nodes",
    "Pv",
    "ScoreInfo",
    "CurrMove",
    "CurrMoveNumber",
    "HashFull",
    "Nps",
    "TbHits",
    "CpuLoad",
    "Custom",
    "Refutation",
    "MultiPv",
    "CurrLine",
    # Options
    "OptionMsg",
    "OptionType",
    "new_check",
    "new_spin",
    "new_combo",
    "new_button",
    "new_string",
    # Messages
    "build_author",
    "build_name",
    "build_uci_ok",
    "build_ready_ok",
    "build_bestmove",
    "build_info",
    "build_option",
]
