"""Tests for the FEN, move and unsigned-integer matchers."""

import pytest

from uci_protocol.constants import START_FEN, U64_MAX
from uci_protocol.grammar import is_valid_fen, is_valid_move, parse_unsigned


@pytest.mark.parametrize(
    "move",
    ["a1a2", "e2e4", "h8a1", "a7a8q", "a7a8r", "a7a8b", "a7a8n", "a7a8Q", "a7a8R", "a7a8B", "a7a8N"],
)
def test_valid_moves(move):
    assert is_valid_move(move)


@pytest.mark.parametrize(
    "move",
    ["a1a2x", "a1a2qq", "a1a2k", "", "\n", "o9a2q", "aaaa", "a1a9", "i1a2", "e2e4\n", "e2-e4"],
)
def test_invalid_moves(move):
    assert not is_valid_move(move)


@pytest.mark.parametrize(
    "fen",
    [
        START_FEN,
        "rnbqkb1r/pppppppp/5n2/8/2PP4/8/PP2PPPP/RNBQKBNR b KQkq c3 0 2",
        "8/8/8/8/8/8/8/8 b - - 0 0",
        "r1bqkb1r/pppp1ppp/2n2n2/4p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4",
        "4k3/8/8/8/8/8/8/4K3 w q - 12 80",
        "4k3/8/8/8/8/8/8/4K3 b KQkq - 0 1",
    ],
)
def test_valid_fens(fen):
    assert is_valid_fen(fen)


@pytest.mark.parametrize(
    "fen",
    [
        "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR",
        "rnbqkb1r/pppppppp/5n2/8/2PP4/8/PP2PPPP/RNBQKBNR b KQkq c3 0",
        "8/8/8/8/8/8/8/8 b - - 0",
        "8/8/8/8/8/8/8/8 b - - 0 0 0",
        "8/8/8/8/8/8/8 b - - 0 0",
        "8/8/8/8/8/8/8/8/8 b - - 0 0",
        "8/8/8/8/8/8/8/8/ b - - 0 0",
        "9/8/8/8/8/8/8/8 w - - 0 1",
        "8/8/8/8/8/8/8/8 x - - 0 1",
        "8/8/8/8/8/8/8/8 w - e2 0 1",
        "8/8/8/8/8/8/8/8 w - - -1 1",
        "8/8/8/8/8/8/8/8 w KQ - 0 1",
        "8/8/8/8/8/8/8/8 w Kk - 0 1",
        "8/8/8/8/8/8/8/8 w QK - 0 1",
        "8/8/8/8/8/8/8/8 w KQkq - 0 1\n",
        "- - - - - -",
        "startpos",
    ],
)
def test_invalid_fens(fen):
    assert not is_valid_fen(fen)


@pytest.mark.parametrize("token, expected", [("0", 0), ("1000", 1000), ("+7", 7), ("007", 7)])
def test_parse_unsigned(token, expected):
    assert parse_unsigned(token, U64_MAX) == expected


def test_parse_unsigned_bounds():
    assert parse_unsigned(str(U64_MAX), U64_MAX) == U64_MAX
    assert parse_unsigned(str(U64_MAX + 1), U64_MAX) is None
    assert parse_unsigned("9" * 5000, U64_MAX) is None


@pytest.mark.parametrize("token", ["-5", "-0", "", "+", "1.5", "1_000", "abc", "1e3", "٣"])
def test_parse_unsigned_rejects(token):
    assert parse_unsigned(token, U64_MAX) is None


def test_parse_unsigned_zero_padding():
    assert parse_unsigned("0" * 5000, U64_MAX) == 0
    assert parse_unsigned("0" * 5000 + "7", U64_MAX) == 7
    assert parse_unsigned("+" + "0" * 5000 + "42", U64_MAX) == 42
