"""Passenger domain model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from transit_network.domain.models.stop import Stop


@dataclass(eq=False)
class Passenger:
    """Someone travelling on the network.

    Passengers compare by identity: two travellers with the same name are
    still different people.
    """

    name: str
    destination: Stop | None = None
