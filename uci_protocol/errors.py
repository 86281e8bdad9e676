"""
Errors raised while parsing a UCI command.

All parse failures derive from ParsingError, itself a ValueError, so
callers that only care about "the line was bad" can catch either. Each
concrete kind carries the context needed to report the failure precisely:
the expected literal, the accepted token-count bounds, or the offending
token. Errors are recoverable; a driver loop reports them and keeps
reading.
"""


class ParsingError(ValueError):
    """Base class for every command parsing failure."""

    def _fields(self) -> tuple:
        return (str(self),)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class InvalidCommandType(ParsingError):
    """
    The first token is not the literal the attempted parser requires.

    Raised, for example, when a `go` line is handed to the position parser.

    Attributes:
        expected: The literal the parser requires.
        got:      The first token actually found.
    """

    def __init__(self, expected: str, got: str) -> None:
        self.expected = expected
        self.got = got
        super().__init__(f"Invalid command type. Expected {expected}, got {got}")

    def _fields(self) -> tuple:
        return (self.expected, self.got)

    def __repr__(self) -> str:
        return f"InvalidCommandType(expected={self.expected!r}, got={self.got!r})"


class InvalidLength(ParsingError):
    """
    The token count lies outside the bounds accepted by the parser.

    Attributes:
        min: Minimum number of tokens accepted.
        max: Maximum number of tokens accepted (UNBOUNDED for open ranges).
        got: Number of tokens found.
    """

    def __init__(self, min: int, max: int, got: int) -> None:
        self.min = min
        self.max = max
        self.got = got
        super().__init__(f"Invalid length. Expected between {min} and {max}, got {got}")

    def _fields(self) -> tuple:
        return (self.min, self.max, self.got)

    def __repr__(self) -> str:
        return f"InvalidLength(min={self.min}, max={self.max}, got={self.got})"


class UnknownToken(ParsingError):
    """
    A keyword, argument, move, or FEN string fails its local grammar.

    For example `debug maybe`, where only `on` or `off` are accepted.

    Attributes:
        token: The offending token (for FEN failures, the whole FEN string).
    """

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown token '{token}'")

    def _fields(self) -> tuple:
        return (self.token,)

    def __repr__(self) -> str:
        return f"UnknownToken(token={self.token!r})"
