"""
Parsing of the persisted mode order.

The selectable order is stored as text, a list of small integers naming catalog
positions. Older settings screens joined the values with a long literal separator;
newer ones use commas. Both forms are accepted, as is plain whitespace.
"""

import re
from typing import Optional, Tuple

from ringertile import constants

Order = Tuple[int, ...]

_SEPARATOR_RE = re.compile(
    "|".join([
        re.escape(constants.ringer.modes.LEGACY_ORDER_SEPARATOR),
        r"\s*" + re.escape(constants.ringer.modes.ORDER_SEPARATOR) + r"\s*",
        r"\s+",
    ])
)

_TOKEN_RE = re.compile(r"[+-]?[0-9]+")


class ParseError(ValueError):
    """Raised when the stored order text contains a token that is not an integer."""

    def __init__(self, raw: str, token: str) -> None:
        super().__init__(f"Malformed order entry {token!r} in {raw!r}")
        self.raw = raw
        self.token = token


def parse_order(raw: Optional[str]) -> Order:
    """
    Parses stored order text into a tuple of catalog indices.

    Args:
        raw: The stored value, or None when the setting is absent.

    Returns:
        Order: The parsed indices. Missing, empty or blank input yields the identity
        order. Entries are not range-checked here; out-of-range values are clamped
        when the order is used.

    Raises:
        ParseError: If any token is not an integer, including an empty token left by
            a doubled or trailing separator or digits grouped with underscores.

    Examples:
        >>> parse_order("2,3,0,1")
        (2, 3, 0, 1)
        >>> parse_order(None)
        (0, 1, 2, 3)
    """
    if raw is None or not raw.strip():
        return constants.ringer.modes.DEFAULT_ORDER

    order = []
    for token in _SEPARATOR_RE.split(raw.strip()):
        if not _TOKEN_RE.fullmatch(token):
            raise ParseError(raw, token)
        order.append(int(token))
    return tuple(order)
