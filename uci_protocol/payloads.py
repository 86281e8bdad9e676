"""
Typed payloads extracted from UCI commands.

Each record is an immutable pydantic model built fresh by a parser and
handed to the engine. Field constraints encode the integer widths of the
protocol, so a payload that exists is always in range.
"""

import chess
from pydantic import BaseModel, ConfigDict, Field

from uci_protocol.constants import U64_MAX


class GoPayload(BaseModel):
    """
    The payload of a `go` command.

    Fields:
        movetime: Milliseconds the engine should think; 0 when not given.
        infinite: Think until `stop`. When True the engine ignores movetime.
    """

    model_config = ConfigDict(frozen=True)

    movetime: int = Field(default=0, ge=0, le=U64_MAX)
    infinite: bool = False


class SetOptionPayload(BaseModel):
    """
    The payload of a `setoption` command.

    Fields:
        name:  The option identifier. Whether it is known is the engine's call.
        value: The new value, or "" when the command carried no value.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    value: str = ""


class PositionPayload(BaseModel):
    """
    The payload of a `position` command.

    Fields:
        fen:   The FEN of the position before any moves are played.
               `startpos` is already expanded to the standard start FEN.
        moves: Moves in UCI notation to play from that position, in order.
    """

    model_config = ConfigDict(frozen=True)

    fen: str
    moves: list[str] = Field(default_factory=list)

    def to_board(self) -> chess.Board:
        """
        Build a python-chess board for this payload.

        The FEN is loaded and the move list replayed in order. The codec
        only checks notation; legality is python-chess's concern, and its
        errors (ValueError subclasses) propagate for the first move that
        cannot be played.

        Returns:
            A new board positioned after the last move.
        """
        board = chess.Board(self.fen)
        for uci_move in self.moves:
            board.push_uci(uci_move)
        return board
