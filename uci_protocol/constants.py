"""
Protocol constants: command literals, message keywords, and numeric bounds.

Every literal the codec matches against or emits is defined here so that
parsers and builders never spell out a keyword inline. Centralizing the
wire vocabulary keeps the grammar in one place and makes a typo in a
keyword a NameError instead of a silent protocol bug.

Numeric bounds mirror the integer widths of the UCI fields: search
counters are unsigned 32-bit, scores are signed 32-bit, spin option
ranges are signed 64-bit, and the `go movetime` budget is unsigned 64-bit.
"""

import sys

import chess

# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------
# The standard initial position, substituted for `position startpos`.

START_FEN: str = chess.STARTING_FEN

# ---------------------------------------------------------------------------
# Command literals (GUI -> engine)
# ---------------------------------------------------------------------------

CMD_UCI: str = "uci"
CMD_DEBUG: str = "debug"
CMD_IS_READY: str = "isready"
CMD_SET_OPTION: str = "setoption"
CMD_UCI_NEW_GAME: str = "ucinewgame"
CMD_POSITION: str = "position"
CMD_GO: str = "go"
CMD_STOP: str = "stop"
CMD_QUIT: str = "quit"

# Sub-keywords of the commands above.
DEBUG_ON: str = "on"
DEBUG_OFF: str = "off"
KW_NAME: str = "name"
KW_VALUE: str = "value"
KW_STARTPOS: str = "startpos"
KW_FEN: str = "fen"
KW_MOVES: str = "moves"
KW_MOVETIME: str = "movetime"
KW_INFINITE: str = "infinite"

# A `fen` position segment is the keyword followed by the six FEN fields.
FEN_FIELD_COUNT: int = 6
FEN_SEGMENT_LENGTH: int = FEN_FIELD_COUNT + 1

# ---------------------------------------------------------------------------
# Message keywords (engine -> GUI)
# ---------------------------------------------------------------------------

MSG_ID: str = "id"
MSG_UCI_OK: str = "uciok"
MSG_READY_OK: str = "readyok"
MSG_BESTMOVE: str = "bestmove"
MSG_INFO: str = "info"
MSG_OPTION: str = "option"

# ---------------------------------------------------------------------------
# Integer bounds
# ---------------------------------------------------------------------------
# UNBOUNDED stands in for "no upper limit" in InvalidLength errors raised by
# commands that take a variable number of tokens.

U32_MAX: int = 2**32 - 1
I32_MIN: int = -(2**31)
I32_MAX: int = 2**31 - 1
I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1
U64_MAX: int = 2**64 - 1

UNBOUNDED: int = sys.maxsize
