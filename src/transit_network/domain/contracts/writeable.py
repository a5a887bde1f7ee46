"""Writeable contract."""

from typing import Protocol


class Writeable(Protocol):
    """Anything that can be encoded as a single line of a network file."""

    def encode(self) -> str:
        """Encode this object as one line, without a line terminator."""
        ...
