"""
Regular grammars for the textual fields of UCI commands.

The matchers are compiled once at import time and shared read-only by
every parse call. All patterns are applied with fullmatch() and use
explicit ASCII classes, so stray Unicode digits or a trailing newline can
never slip through.

FEN grammar:
    <ranks> <side> <castling> <en-passant> <halfmove> <fullmove>
    ranks       eight groups of 1-8 characters from pnbrqkPNBRQK1-8,
                separated by '/'
    side        b | w
    castling    - | K?Q?k?q
    en-passant  - | [a-h][3-6]
    clocks      non-negative decimal integers

Move grammar (long algebraic, as used by UCI):
    [a-h][1-8][a-h][1-8] with an optional promotion letter from rnbqRNBQ
"""

import re

_RANK = r"[pnbrqkPNBRQK1-8]{1,8}"

FEN_PATTERN: re.Pattern[str] = re.compile(
    rf"{_RANK}(?:/{_RANK}){{7}}"
    r" [bw]"
    r" (?:-|K?Q?k?q)"
    r" (?:-|[a-h][3-6])"
    r" [0-9]+"
    r" [0-9]+"
)

MOVE_PATTERN: re.Pattern[str] = re.compile(r"[a-h][1-8][a-h][1-8][rnbqRNBQ]?")

# Matches what an unsigned integer parser accepts: an optional '+' and digits.
UNSIGNED_PATTERN: re.Pattern[str] = re.compile(r"\+?[0-9]+")


def is_valid_fen(fen: str) -> bool:
    """Return True if *fen* is a syntactically complete FEN string."""
    return FEN_PATTERN.fullmatch(fen) is not None


def is_valid_move(move: str) -> bool:
    """Return True if *move* is a move in UCI long algebraic notation."""
    return MOVE_PATTERN.fullmatch(move) is not None


def parse_unsigned(token: str, maximum: int) -> int | None:
    """
    Parse *token* as an unsigned integer no larger than *maximum*.

    Args:
        token:   The candidate token.
        maximum: Largest accepted value (e.g. U64_MAX).

    Returns:
        The parsed value, or None if the token is not an unsigned decimal
        (including anything with a minus sign) or exceeds *maximum*.
    """
    if UNSIGNED_PATTERN.fullmatch(token) is None:
        return None
    # Only the significant digits reach int(); CPython refuses to convert
    # very long digit strings, zero padding included.
    digits = token.lstrip("+").lstrip("0") or "0"
    if len(digits) > len(str(maximum)):
        return None
    value = int(digits)
    if value > maximum:
        return None
    return value
