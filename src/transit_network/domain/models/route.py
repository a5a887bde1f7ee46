"""Route domain model and its line codec."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, ClassVar

from transit_network.domain.exceptions import (
    EmptyRouteError,
    IncompatibleTypeError,
    TransportFormatError,
)
from transit_network.domain.models.parsing import parse_int
from transit_network.domain.models.route_type import RouteType

if TYPE_CHECKING:
    from transit_network.domain.models.stop import Stop
    from transit_network.domain.models.vehicle import PublicTransport

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
STOPS_DELIMITER = ":"
STOP_NAME_DELIMITER = "|"


class Route:
    """An ordered sequence of stops served by one kind of transport.

    Use one of the concrete subclasses (:class:`BusRoute`, :class:`TrainRoute`,
    :class:`FerryRoute`); the subclass fixes the route type.

    Two routes are equal when their type, name and number match. The stops and
    vehicles on a route are not part of its identity.
    """

    route_type: ClassVar[RouteType]

    def __init__(self, name: str, number: int) -> None:
        if type(self) is Route:
            raise TypeError("use BusRoute, TrainRoute or FerryRoute")
        self._name = name
        self._number = number
        self._stops: list[Stop] = []
        self._vehicles: list[PublicTransport] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def number(self) -> int:
        return self._number

    def get_type(self) -> RouteType:
        return self.route_type

    def get_route_number(self) -> int:
        return self._number

    def get_stops_on_route(self) -> list[Stop]:
        """Stops on this route in travel order (a copy)."""
        return list(self._stops)

    def get_transports(self) -> list[PublicTransport]:
        """Vehicles assigned to this route (a copy)."""
        return list(self._vehicles)

    def get_start_stop(self) -> Stop:
        """First stop on the route.

        Raises:
            EmptyRouteError: If the route has no stops.
        """
        if not self._stops:
            raise EmptyRouteError(f"route {self._number} has no stops")
        return self._stops[0]

    def add_stop(self, stop: Stop | None) -> None:
        """Append a stop to the end of the route.

        The stop learns about this route and becomes a neighbour of the stop
        that previously ended the route. ``None`` is ignored.
        """
        if stop is None:
            return

        if self._stops:
            previous = self._stops[-1]
            previous.add_neighbouring_stop(stop)
            stop.add_neighbouring_stop(previous)
        self._stops.append(stop)
        stop.add_route(self)

    def add_transport(self, transport: PublicTransport) -> None:
        """Assign a vehicle to this route.

        Raises:
            IncompatibleTypeError: If the vehicle's type differs from the route's.
            EmptyRouteError: If the route has no stops for the vehicle to start at.
        """
        if transport.get_type() != self.route_type:
            raise IncompatibleTypeError(
                f"cannot add {transport.get_type()} vehicle to {self.route_type} route"
            )
        if not self._stops:
            raise EmptyRouteError(f"route {self._number} has no stops")
        self._vehicles.append(transport)

    def encode(self) -> str:
        """Encode as ``type,name,number:stop1|stop2|...``.

        The ``:`` section is left out entirely when the route has no stops.
        """
        encoded = FIELD_DELIMITER.join((self.route_type, self._name, str(self._number)))
        if self._stops:
            encoded += STOPS_DELIMITER + STOP_NAME_DELIMITER.join(s.name for s in self._stops)
        return encoded

    @staticmethod
    def decode(route_string: str | None, existing_stops: Sequence[Stop] | None) -> Route:
        """Decode a route, resolving its stop names against existing stops.

        Raises:
            TransportFormatError: If the line is malformed, the type is unknown,
                the number is not an integer or a stop name cannot be resolved.
        """
        if route_string is None or existing_stops is None:
            raise TransportFormatError("missing route line or stop list")

        fields = route_string.split(FIELD_DELIMITER)
        if len(fields) != 3:
            logger.debug(f"Rejected route line {route_string!r}: expected three fields")
            raise TransportFormatError(f"route must have three fields: {route_string!r}")

        tag, name, tail = fields
        # The stop section may only follow the route number
        if STOPS_DELIMITER in tag or STOPS_DELIMITER in name or tail.count(STOPS_DELIMITER) > 1:
            logger.debug(f"Rejected route line {route_string!r}: misplaced stop delimiter")
            raise TransportFormatError(f"misplaced stop delimiter: {route_string!r}")

        route_type = RouteType.from_tag(tag)
        number_field, _, stop_names = tail.partition(STOPS_DELIMITER)
        number = parse_int(number_field)

        stops = []
        if STOPS_DELIMITER in tail:
            for stop_name in stop_names.split(STOP_NAME_DELIMITER):
                stops.append(_find_stop(stop_name, existing_stops))

        route = ROUTE_CLASSES[route_type](name, number)
        for stop in stops:
            route.add_stop(stop)
        return route

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Route):
            return NotImplemented
        return (self.route_type, self._name, self._number) == (
            other.route_type,
            other._name,
            other._number,
        )

    def __hash__(self) -> int:
        return hash((self.route_type, self._name, self._number))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, number={self._number})"

    def __str__(self) -> str:
        return self.encode()


class BusRoute(Route):
    """A route travelled by buses."""

    route_type = RouteType.BUS


class TrainRoute(Route):
    """A route travelled by trains."""

    route_type = RouteType.TRAIN


class FerryRoute(Route):
    """A route travelled by ferries."""

    route_type = RouteType.FERRY


ROUTE_CLASSES: dict[RouteType, type[Route]] = {
    RouteType.BUS: BusRoute,
    RouteType.TRAIN: TrainRoute,
    RouteType.FERRY: FerryRoute,
}


def _find_stop(stop_name: str, existing_stops: Sequence[Stop]) -> Stop:
    """Return the first existing stop with the given name."""
    if not stop_name:
        raise TransportFormatError("empty stop name in route")

    for stop in existing_stops:
        if stop.name == stop_name:
            return stop

    logger.debug(f"Rejected route: unknown stop {stop_name!r}")
    raise TransportFormatError(f"unknown stop: {stop_name!r}")
