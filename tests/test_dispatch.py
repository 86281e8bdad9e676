"""Tests for routing input lines to their parsers."""

import logging

import chess
import pytest

from uci_protocol.command import Command, CommandType
from uci_protocol.constants import START_FEN
from uci_protocol.dispatch import ParsedCommand, parse_command, parse_line
from uci_protocol.errors import InvalidLength, UnknownToken
from uci_protocol.payloads import GoPayload, PositionPayload, SetOptionPayload


@pytest.mark.parametrize(
    "line, expected",
    [
        ("uci", ParsedCommand(CommandType.UCI)),
        ("debug on", ParsedCommand(CommandType.DEBUG, True)),
        ("isready\n", ParsedCommand(CommandType.IS_READY)),
        ("setoption name Hash value 64", ParsedCommand(CommandType.SET_OPTION, SetOptionPayload(name="Hash", value="64"))),
        ("ucinewgame", ParsedCommand(CommandType.UCI_NEW_GAME)),
        ("position startpos moves e2e4", ParsedCommand(CommandType.POSITION, PositionPayload(fen=START_FEN, moves=["e2e4"]))),
        ("  go   movetime 500 ", ParsedCommand(CommandType.GO, GoPayload(movetime=500))),
        ("stop", ParsedCommand(CommandType.STOP)),
        ("quit", ParsedCommand(CommandType.QUIT)),
    ],
)
def test_parse_line(line, expected):
    assert parse_line(line) == expected


@pytest.mark.parametrize("line", ["", "   \n", "xboard", "register later", "UCI"])
def test_unknown_lines_are_ignored(line):
    assert parse_line(line) is None


def test_unknown_command_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="uci_protocol.dispatch"):
        assert parse_line("xboard") is None
    assert "ignoring unknown command" in caplog.text
    assert "'xboard'" in caplog.text


def test_parse_errors_propagate_and_are_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="uci_protocol.dispatch"):
        with pytest.raises(UnknownToken) as exc_info:
            parse_line("go wtime 1000")
    assert exc_info.value.token == "wtime"
    assert "rejected go command" in caplog.text


def test_known_verb_with_bad_payload_is_an_error():
    with pytest.raises(InvalidLength):
        parse_line("uci extra")


def test_parse_command_accepts_command_values():
    parsed = parse_command(Command(("debug", "off")))
    assert parsed == ParsedCommand(CommandType.DEBUG, False)


# ---------------------------------------------------------------------------
# Board hand-off
# ---------------------------------------------------------------------------


def test_position_payload_to_board():
    parsed = parse_line("position startpos moves e2e4 e7e5 g1f3")
    board = parsed.payload.to_board()
    assert isinstance(board, chess.Board)
    assert board.fen() == "rnbqkbnr/pppp1ppp/8/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R b KQkq - 1 2"


def test_position_payload_to_board_illegal_move():
    payload = PositionPayload(fen=START_FEN, moves=["e2e5"])
    with pytest.raises(ValueError):
        payload.to_board()
