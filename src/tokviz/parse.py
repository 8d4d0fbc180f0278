"""Parsing of user-supplied token lists."""

from .errors import InvalidTokenInputError
from .types import Token


def parse_tokens(raw: str) -> list[Token]:
    """
    Parse a comma-separated list of integer token ids.

    :param raw: Text such as ``"10, 2099, 2097"``.
    :returns: Token ids in input order.
    :raises InvalidTokenInputError: If the input is blank or any entry is not
        an integer.
    """
    if not raw.strip():
        raise InvalidTokenInputError("no tokens to decode")

    tokens: list[Token] = []
    for i, piece in enumerate(raw.split(",")):
        piece = piece.strip()
        try:
            tokens.append(int(piece))
        except ValueError:
            raise InvalidTokenInputError(
                "invalid token", raw=piece, position=i
            ) from None
    return tokens
