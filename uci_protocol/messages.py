"""
Builders for the messages an engine sends to the GUI.

Every builder is a pure function from a payload to one protocol line,
without the trailing newline; the transport appends line termination.
Builders trust their input: keeping free text free of newlines or
reserved words is the producer's job.

Message grammar:
    id author <text>
    id name <text>
    uciok
    readyok
    bestmove <move>
    option name <id> type <kind> [default <v>] [min <i> max <j>] [var <v1> ...]
    info [depth N] [seldepth N] ... [string <text>]
"""

from collections.abc import Sequence

from uci_protocol import constants as c
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
from uci_protocol.options import OptionMsg

# ---------------------------------------------------------------------------
# Handshake and simple replies
# ---------------------------------------------------------------------------


def build_author(author: str) -> str:
    """Build `id author <author>`."""
    return f"{c.MSG_ID} author {author}"


def build_name(name: str) -> str:
    """Build `id name <name>`."""
    return f"{c.MSG_ID} name {name}"


def build_uci_ok() -> str:
    """Build `uciok`, which ends the reply to `uci`."""
    return c.MSG_UCI_OK


def build_ready_ok() -> str:
    """Build `readyok`, the reply to `isready`."""
    return c.MSG_READY_OK


def build_bestmove(move: str) -> str:
    """Build `bestmove <move>`, which ends every search."""
    return f"{c.MSG_BESTMOVE} {move}"


# ---------------------------------------------------------------------------
# info
# ---------------------------------------------------------------------------


def _score_fragment(entry: ScoreInfo) -> str:
    fragment = f" score {_score_value(entry.score)}"
    if entry.lower_bound:
        fragment += " lowerbound"
    if entry.upper_bound:
        fragment += " upperbound"
    return fragment


def _score_value(score: Score) -> str:
    return f"{score.kind} {score.value}"


def _info_fragment(entry: MoveInfo) -> str:
    if isinstance(entry, Depth):
        return f" depth {entry.plies}"
    if isinstance(entry, SelDepth):
        return f" seldepth {entry.plies}"
    if isinstance(entry, Time):
        return f" time {entry.ms}"
    if isinstance(entry, Nodes):
        return f" nodes {entry.count}"
    if isinstance(entry, Pv):
        return " pv " + " ".join(entry.moves)
    if isinstance(entry, ScoreInfo):
        return _score_fragment(entry)
    if isinstance(entry, CurrMove):
        return f" currmove {entry.move}"
    if isinstance(entry, CurrMoveNumber):
        return f" currmovenumber {entry.number}"
    if isinstance(entry, HashFull):
        return f" hashfull {entry.permille}"
    if isinstance(entry, Nps):
        return f" nps {entry.value}"
    if isinstance(entry, TbHits):
        return f" tbhits {entry.count}"
    if isinstance(entry, CpuLoad):
        return f" cpuload {entry.permille}"
    if isinstance(entry, Refutation):
        return " refutation " + " ".join(entry.moves)
    if isinstance(entry, MultiPv):
        return f" multipv {entry.index}"
    if isinstance(entry, CurrLine):
        return f" currline {entry.task} " + " ".join(entry.line)
    raise TypeError(f"not an info entry: {entry!r}")


def build_info(entries: Sequence[MoveInfo]) -> str:
    """
    Build an `info` message from search telemetry.

    Fields are rendered in the order the entries are given, except Custom:
    its text always goes last as `string <text>`, because everything after
    `string` is read by the GUI as free text. If several Custom entries are
    given, the last one is used.

    Args:
        entries: The info entries to report.

    Returns:
        The message, e.g. "info depth 12 score cp 31 nodes 81234 pv e2e4 e7e5".
    """
    msg = c.MSG_INFO
    custom: str | None = None

    for entry in entries:
        if isinstance(entry, Custom):
            custom = entry.text
        else:
            msg += _info_fragment(entry)

    if custom is not None:
        msg += f" string {custom}"

    return msg


# ---------------------------------------------------------------------------
# option
# ---------------------------------------------------------------------------


def build_option(option: OptionMsg) -> str:
    """
    Build an `option` message announcing a setting the engine supports.

    Only the fields relevant to the option type are rendered: no default
    for buttons, a range only for spins whose min and max differ, and a
    value list only for combos that have one.

    Returns:
        The message, e.g. "option name Hash type spin default 16 min 1 max 1024".
    """
    msg = f"{c.MSG_OPTION} name {option.id} type {option.option_type.value}"

    if option.has_default:
        msg += f" default {option.default}"

    if option.has_range:
        msg += f" min {option.min} max {option.max}"

    if option.has_var:
        msg += " var " + " ".join(option.var)

    return msg
