"""Field parsing helpers shared by the network file codecs."""

import re

from transit_network.domain.exceptions import TransportFormatError

# Plain decimal integers only: no underscores, no non-ASCII digits
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Fields are 32-bit signed integers
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def parse_int(text: str | None) -> int:
    """Parse an integer field, ignoring surrounding whitespace.

    Raises:
        TransportFormatError: If the field is missing, not an integer or
            outside the 32-bit signed range.
    """
    if text is None:
        raise TransportFormatError("missing integer field")

    stripped = text.strip()
    if not _INTEGER_PATTERN.fullmatch(stripped):
        raise TransportFormatError(f"not an integer: {text!r}")
    value = int(stripped)
    if not INT_MIN <= value <= INT_MAX:
        raise TransportFormatError(f"integer out of range: {text!r}")
    return value
