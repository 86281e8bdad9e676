"""
Search telemetry reported to the GUI through `info` messages.

MoveInfo is a closed family of immutable records, one per `info` field the
protocol defines. The engine collects whichever entries it has and hands
the list to messages.build_info(), which renders them in the given order.

Counters (depth, nodes, time, ...) are unsigned 32-bit; scores are signed
32-bit. Values outside those ranges fail validation at construction.
"""

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from uci_protocol.constants import I32_MAX, I32_MIN, U32_MAX

UInt32 = Annotated[int, Field(ge=0, le=U32_MAX)]


class Score(BaseModel):
    """
    The evaluation of a line, relative to the side to move.

    Fields:
        kind:  "cp" for centipawns, "mate" for moves (not plies) to mate.
        value: Centipawns, or moves to mate. Negative when the side to move
               is getting mated.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["cp", "mate"]
    value: int = Field(ge=I32_MIN, le=I32_MAX)

    @classmethod
    def cp(cls, value: int) -> "Score":
        """A centipawn score."""
        return cls(kind="cp", value=value)

    @classmethod
    def mate(cls, value: int) -> "Score":
        """A mate-in-N score, N counted in moves."""
        return cls(kind="mate", value=value)


class MoveInfo(BaseModel):
    """Base class of every `info` entry."""

    model_config = ConfigDict(frozen=True)


class Depth(MoveInfo):
    """Current search depth in plies."""

    plies: UInt32


class SelDepth(MoveInfo):
    """Selective search depth in plies."""

    plies: UInt32


class Time(MoveInfo):
    """Time searched, in milliseconds."""

    ms: UInt32


class Nodes(MoveInfo):
    """Nodes searched."""

    count: UInt32


class Pv(MoveInfo):
    """The principal variation, best move first."""

    moves: list[str]


class ScoreInfo(MoveInfo):
    """
    The score of the current line.

    Fields:
        score:       The evaluation.
        lower_bound: The score is only a lower bound (fail high).
        upper_bound: The score is only an upper bound (fail low).
    """

    score: Score
    lower_bound: bool = False
    upper_bound: bool = False


class CurrMove(MoveInfo):
    """The root move currently being searched."""

    move: str


class CurrMoveNumber(MoveInfo):
    """1-based index of the root move currently being searched."""

    number: UInt32


class HashFull(MoveInfo):
    """Hash table fill, in permille (0-1000)."""

    permille: UInt32


class Nps(MoveInfo):
    """Nodes searched per second."""

    value: UInt32


class TbHits(MoveInfo):
    """Endgame tablebase hits."""

    count: UInt32


class CpuLoad(MoveInfo):
    """CPU usage of the engine, in permille (0-1000)."""

    permille: UInt32


class Custom(MoveInfo):
    """
    Free-form text for the GUI.

    Rendered as `string <text>` at the very end of the message, so the text
    may contain anything, reserved keywords included.
    """

    text: str


class Refutation(MoveInfo):
    """The move being explored followed by the line that refutes it."""

    moves: list[str]


class MultiPv(MoveInfo):
    """Index of the reported principal variation in multi-PV mode."""

    index: UInt32


class CurrLine(MoveInfo):
    """
    The line a given search thread is currently calculating.

    Fields:
        task: Index of the thread (CPU) searching the line.
        line: The moves of the line.
    """

    task: UInt32
    line: list[str]
