"""Stop domain model."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from transit_network.domain.exceptions import TransportFormatError
from transit_network.domain.models.parsing import parse_int

if TYPE_CHECKING:
    from transit_network.domain.models.passenger import Passenger
    from transit_network.domain.models.route import Route

logger = logging.getLogger(__name__)

STOP_DELIMITER = ":"


@dataclass(frozen=True)
class Stop:
    """A named point on the network with integer coordinates.

    Equality and hashing only consider the name and coordinates. The routes,
    neighbours and waiting passengers recorded on a stop are bookkeeping.
    """

    name: str
    x: int
    y: int
    _routes: list[Route] = field(default_factory=list, compare=False, repr=False)
    _neighbours: list[Stop] = field(default_factory=list, compare=False, repr=False)
    _waiting: list[Passenger] = field(default_factory=list, compare=False, repr=False)

    def add_route(self, route: Route | None) -> None:
        """Record that the given route passes through this stop."""
        if route is not None and route not in self._routes:
            self._routes.append(route)

    def get_routes(self) -> list[Route]:
        """Routes passing through this stop, in the order they were added."""
        return list(self._routes)

    def add_neighbouring_stop(self, neighbour: Stop | None) -> None:
        """Record a stop directly before or after this one on some route."""
        if neighbour is None or neighbour is self or neighbour in self._neighbours:
            return
        self._neighbours.append(neighbour)

    def get_neighbouring_stops(self) -> list[Stop]:
        return list(self._neighbours)

    def add_passenger(self, passenger: Passenger | None) -> None:
        """Add a passenger to the queue waiting at this stop."""
        if passenger is not None:
            self._waiting.append(passenger)

    def get_waiting_passengers(self) -> list[Passenger]:
        return list(self._waiting)

    def encode(self) -> str:
        """Encode as ``name:x:y``."""
        return f"{self.name}{STOP_DELIMITER}{self.x}{STOP_DELIMITER}{self.y}"

    @classmethod
    def decode(cls, stop_string: str | None) -> Stop:
        """Decode a stop from its ``name:x:y`` encoding.

        Raises:
            TransportFormatError: If the delimiter count is not exactly two,
                the name is empty or a coordinate is not an integer.
        """
        if stop_string is None:
            raise TransportFormatError("missing stop line")

        if stop_string.count(STOP_DELIMITER) != 2:
            logger.debug(f"Rejected stop line {stop_string!r}: expected two delimiters")
            raise TransportFormatError(f"stop must have the form name:x:y: {stop_string!r}")

        name, x, y = stop_string.split(STOP_DELIMITER)
        if not name:
            logger.debug(f"Rejected stop line {stop_string!r}: empty name")
            raise TransportFormatError(f"stop name must not be empty: {stop_string!r}")

        return cls(name, parse_int(x), parse_int(y))

    def __str__(self) -> str:
        return self.encode()
