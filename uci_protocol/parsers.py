"""
Parsers for the supported UCI commands.

Each parser takes the tokens of one line (see command.tokenize) and either
returns the command's payload or raises a ParsingError at the first
violation. Parsers never recover internally and never look at anything
but their own tokens.

Command grammar:
    uci
    debug {on|off}
    isready
    setoption name <id> [value <v>]
    ucinewgame
    position {startpos | fen <f1> .. <f6>} [moves <m1> <m2> ...]
    go [movetime <uint>] [infinite]
    stop
    quit

Only `movetime` and `infinite` are recognised after `go`. Every other
keyword, including legal protocol ones such as `wtime` or `depth`, is
rejected rather than silently ignored.
"""

from collections.abc import Sequence

from uci_protocol import constants as c
from uci_protocol.errors import InvalidCommandType, InvalidLength, UnknownToken
from uci_protocol.grammar import is_valid_fen, is_valid_move, parse_unsigned
from uci_protocol.payloads import GoPayload, PositionPayload, SetOptionPayload

# ---------------------------------------------------------------------------
# Shared checks
# ---------------------------------------------------------------------------


def _expect_verb(tokens: Sequence[str], literal: str) -> None:
    if tokens[0] != literal:
        raise InvalidCommandType(literal, tokens[0])


def _expect_min_length(tokens: Sequence[str], minimum: int) -> None:
    if len(tokens) < minimum:
        raise InvalidLength(minimum, c.UNBOUNDED, len(tokens))


def _parse_single_token(tokens: Sequence[str], literal: str) -> None:
    """
    Validate a command that consists of exactly one literal token.

    Args:
        tokens:  The command tokens.
        literal: The only token the command may contain.

    Raises:
        InvalidLength:      The line does not hold exactly one token.
        InvalidCommandType: The token is not *literal*.
    """
    if len(tokens) != 1:
        raise InvalidLength(1, 1, len(tokens))
    _expect_verb(tokens, literal)


# ---------------------------------------------------------------------------
# Single-literal commands
# ---------------------------------------------------------------------------


def parse_uci(tokens: Sequence[str]) -> None:
    """Validate a `uci` command."""
    _parse_single_token(tokens, c.CMD_UCI)


def parse_is_ready(tokens: Sequence[str]) -> None:
    """Validate an `isready` command."""
    _parse_single_token(tokens, c.CMD_IS_READY)


def parse_uci_new_game(tokens: Sequence[str]) -> None:
    """Validate a `ucinewgame` command."""
    _parse_single_token(tokens, c.CMD_UCI_NEW_GAME)


def parse_stop(tokens: Sequence[str]) -> None:
    """Validate a `stop` command."""
    _parse_single_token(tokens, c.CMD_STOP)


def parse_quit(tokens: Sequence[str]) -> None:
    """Validate a `quit` command."""
    _parse_single_token(tokens, c.CMD_QUIT)


# ---------------------------------------------------------------------------
# Commands with payloads
# ---------------------------------------------------------------------------


def parse_debug(tokens: Sequence[str]) -> bool:
    """
    Parse a `debug on` / `debug off` command.

    Returns:
        True for `on`, False for `off`.

    Raises:
        InvalidLength:      The line does not hold exactly two tokens.
        InvalidCommandType: The first token is not `debug`.
        UnknownToken:       The switch is neither `on` nor `off`.
    """
    if len(tokens) != 2:
        raise InvalidLength(2, 2, len(tokens))
    _expect_verb(tokens, c.CMD_DEBUG)

    switch = tokens[1]
    if switch == c.DEBUG_ON:
        return True
    if switch == c.DEBUG_OFF:
        return False
    raise UnknownToken(switch)


def parse_set_option(tokens: Sequence[str]) -> SetOptionPayload:
    """
    Parse a `setoption name <id> [value <v>]` command.

    The tokens after the verb are read as a keyword stream. `name` and
    `value` each take the following token; a repeated keyword overwrites
    the earlier one. Whether the option exists is left to the engine,
    which by protocol ignores unknown options.

    Returns:
        SetOptionPayload with value "" when no value was given.

    Raises:
        InvalidLength:      Fewer than three tokens.
        InvalidCommandType: The first token is not `setoption`.
        UnknownToken:       An unknown keyword, or `name`/`value` at the end
                            of the line with nothing after it.
    """
    _expect_min_length(tokens, 3)
    _expect_verb(tokens, c.CMD_SET_OPTION)

    name = ""
    value = ""
    stream = iter(tokens[1:])
    for keyword in stream:
        if keyword not in (c.KW_NAME, c.KW_VALUE):
            raise UnknownToken(keyword)
        argument = next(stream, None)
        if argument is None:
            raise UnknownToken(keyword)
        if keyword == c.KW_NAME:
            name = argument
        else:
            value = argument

    return SetOptionPayload(name=name, value=value)


def parse_go(tokens: Sequence[str]) -> GoPayload:
    """
    Parse a `go [movetime <ms>] [infinite]` command.

    Keywords may appear in any order and repeat. The last `movetime` wins;
    `infinite` stays set once seen.

    Returns:
        GoPayload, defaulting to movetime 0 and infinite False.

    Raises:
        InvalidLength:      Fewer than two tokens.
        InvalidCommandType: The first token is not `go`.
        UnknownToken:       An unsupported keyword, a movetime that is not an
                            unsigned 64-bit integer, or a trailing `movetime`
                            with no value (reported as `movetime` itself).
    """
    _expect_min_length(tokens, 2)
    _expect_verb(tokens, c.CMD_GO)

    movetime = 0
    infinite = False
    stream = iter(tokens[1:])
    for keyword in stream:
        if keyword == c.KW_MOVETIME:
            argument = next(stream, None)
            if argument is None:
                raise UnknownToken(keyword)
            parsed = parse_unsigned(argument, c.U64_MAX)
            if parsed is None:
                raise UnknownToken(argument)
            movetime = parsed
        elif keyword == c.KW_INFINITE:
            infinite = True
        else:
            raise UnknownToken(keyword)

    return GoPayload(movetime=movetime, infinite=infinite)


def parse_position(tokens: Sequence[str]) -> PositionPayload:
    """
    Parse a `position` command.

    Command formats:
        position startpos [moves <m1> <m2> ...]
        position fen <f1> <f2> <f3> <f4> <f5> <f6> [moves <m1> <m2> ...]

    The position segment runs up to the first `moves` token. It is either
    the single token `startpos` or `fen` followed by the six FEN fields.
    Whatever FEN results is checked against the full FEN grammar, so a bare
    FEN-like token other than `startpos` is rejected.

    Returns:
        PositionPayload with the expanded FEN and the (possibly empty)
        move list.

    Raises:
        InvalidLength:      Fewer than two tokens, or a position segment that
                            is neither 1 nor 7 tokens long.
        InvalidCommandType: The first token is not `position`.
        UnknownToken:       The FEN fails the grammar (the token is the whole
                            FEN), or a move fails the move grammar.
    """
    _expect_min_length(tokens, 2)
    _expect_verb(tokens, c.CMD_POSITION)

    rest = list(tokens[1:])
    if c.KW_MOVES in rest:
        split = rest.index(c.KW_MOVES)
        segment, moves = rest[:split], rest[split + 1:]
    else:
        segment, moves = rest, []

    if len(segment) == 1:
        fen = c.START_FEN if segment[0] == c.KW_STARTPOS else segment[0]
    elif len(segment) == c.FEN_SEGMENT_LENGTH:
        # segment[0] is the `fen` keyword.
        fen = " ".join(segment[1:])
    else:
        raise InvalidLength(c.FEN_SEGMENT_LENGTH, c.FEN_SEGMENT_LENGTH, len(segment))

    if not is_valid_fen(fen):
        raise UnknownToken(fen)

    for move in moves:
        if not is_valid_move(move):
            raise UnknownToken(move)

    return PositionPayload(fen=fen, moves=moves)
