"""Custom exception hierarchy for tokviz errors."""

from .types import Token


class TokVizError(Exception):
    """Base exception for all tokviz errors."""


class NotFoundError(TokVizError, KeyError):
    """Raised when a raw vocabulary lookup misses."""

    def __init__(
        self,
        message: str,
        *,
        unit: str | None = None,
        token: Token | None = None,
    ) -> None:
        """Initialize with the missing unit or token appended to the message."""
        extra = " "
        # forward lookup: unit -> id
        if unit is not None:
            extra += f"(unit: {unit!r}) "
        # inverse lookup: id -> unit
        if token is not None:
            extra += f"(token: {token}) "
        super().__init__((message + extra).rstrip())
        self.unit = unit
        self.token = token

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0])


class InvalidTokenInputError(TokVizError, ValueError):
    """Raised when a user-supplied token list cannot be parsed."""

    def __init__(
        self,
        message: str,
        *,
        raw: str | None = None,
        position: int | None = None,
    ) -> None:
        extra = " "
        if raw is not None:
            extra += f"(got: {raw!r}) "
        if position is not None:
            extra += f"(position: {position}) "
        super().__init__((message + extra).rstrip())
        self.raw = raw
        self.position = position
