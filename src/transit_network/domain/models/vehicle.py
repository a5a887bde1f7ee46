"""Public transport vehicles and their line codec."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING

from transit_network.domain.exceptions import (
    EmptyRouteError,
    IncompatibleTypeError,
    OverCapacityError,
    TransportFormatError,
)
from transit_network.domain.models.parsing import parse_int
from transit_network.domain.models.route_type import RouteType

if TYPE_CHECKING:
    from transit_network.domain.models.passenger import Passenger
    from transit_network.domain.models.route import Route
    from transit_network.domain.models.stop import Stop

logger = logging.getLogger(__name__)

FIELD_DELIMITER = ","
DEFAULT_FERRY_TYPE = "CityCat"


class PublicTransport(ABC):
    """A vehicle bound to a single route, carrying passengers up to its capacity.

    The vehicle's type is never stored: it is always the type of its route.
    """

    def __init__(self, id: int, capacity: int, route: Route) -> None:
        self._id = id
        self._capacity = max(capacity, 0)
        self._route = route
        self._passengers: list[Passenger] = []
        try:
            self._current_stop: Stop | None = route.get_start_stop()
        except EmptyRouteError:
            self._current_stop = None

    @property
    def id(self) -> int:
        return self._id

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def route(self) -> Route:
        return self._route

    @property
    def current_stop(self) -> Stop | None:
        """The stop the vehicle is at, or ``None`` if its route has no stops."""
        return self._current_stop

    def get_type(self) -> RouteType:
        return self._route.get_type()

    def passenger_count(self) -> int:
        return len(self._passengers)

    def get_passengers(self) -> list[Passenger]:
        """Passengers currently aboard (a copy)."""
        return list(self._passengers)

    def add_passenger(self, passenger: Passenger | None) -> None:
        """Board a passenger. ``None`` is ignored.

        Raises:
            OverCapacityError: If the vehicle is already at (or over) capacity.
        """
        if passenger is None:
            return
        if len(self._passengers) >= self._capacity:
            raise OverCapacityError(
                f"{self.get_type()} {self._id} is full ({self._capacity} passengers)"
            )
        self._passengers.append(passenger)

    def remove_passenger(self, passenger: Passenger | None) -> bool:
        """Let a passenger off. Returns ``False`` if they were not aboard."""
        if passenger not in self._passengers:
            return False
        self._passengers.remove(passenger)
        return True

    def unload(self) -> list[Passenger]:
        """Empty the vehicle, returning everyone who got off."""
        leaving, self._passengers = self._passengers, []
        return leaving

    def travel_to(self, stop: Stop | None) -> None:
        """Move to a stop on this vehicle's route; anything else is ignored."""
        if stop is None or stop not in self._route.get_stops_on_route():
            return
        self._current_stop = stop

    def encode(self) -> str:
        """Encode as ``type,id,capacity,routeNumber``.

        Subclasses append their own extra field.
        """
        return FIELD_DELIMITER.join(
            (self.get_type(), str(self._id), str(self._capacity), str(self._route.number))
        )

    @classmethod
    @abstractmethod
    def from_extra(
        cls, id: int, capacity: int, route: Route, extra: str | None
    ) -> PublicTransport:
        """Build this kind of vehicle from the optional extra field of its line."""

    @staticmethod
    def decode(
        transport_string: str | None, existing_routes: Sequence[Route] | None
    ) -> PublicTransport:
        """Decode a vehicle and attach it to the route it references.

        Raises:
            TransportFormatError: For a wrong field count, non-integer fields, an
                unknown route number, a tag that does not match the route type,
                an invalid carriage count, or a route the vehicle cannot join.
        """
        if transport_string is None or existing_routes is None:
            raise TransportFormatError("missing vehicle line or route list")

        fields = transport_string.split(FIELD_DELIMITER)
        tag = fields[0]
        # A ferry may leave out its ferry type
        if len(fields) != 5 and not (len(fields) == 4 and tag == RouteType.FERRY):
            logger.debug(f"Rejected vehicle line {transport_string!r}: wrong field count")
            raise TransportFormatError(f"wrong number of fields: {transport_string!r}")

        id = parse_int(fields[1])
        capacity = parse_int(fields[2])
        route = _find_route(parse_int(fields[3]), existing_routes)

        if route.get_type() != tag:
            logger.debug(
                f"Rejected vehicle line {transport_string!r}: route {route.number} "
                f"is a {route.get_type()} route"
            )
            raise TransportFormatError(
                f"{tag!r} vehicle references {route.get_type()} route {route.number}"
            )

        vehicle_class = VEHICLE_CLASSES[RouteType.from_tag(tag)]
        # An empty trailing field counts as absent
        extra = (fields[4] or None) if len(fields) == 5 else None
        transport = vehicle_class.from_extra(id, capacity, route, extra)

        try:
            route.add_transport(transport)
        except (EmptyRouteError, IncompatibleTypeError) as e:
            logger.debug(f"Rejected vehicle line {transport_string!r}: {e}")
            raise TransportFormatError(str(e)) from e

        return transport

    def __str__(self) -> str:
        return (
            f"{self.get_type()} number {self._id} ({self._capacity}) "
            f"on route {self._route.number}"
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id}, capacity={self._capacity}, "
            f"route={self._route!r})"
        )


class Bus(PublicTransport):
    """A bus identified on the road by its registration number."""

    def __init__(self, id: int, capacity: int, route: Route, registration_number: str) -> None:
        super().__init__(id, capacity, route)
        self._registration_number = registration_number

    @property
    def registration_number(self) -> str:
        return self._registration_number

    @classmethod
    def from_extra(cls, id: int, capacity: int, route: Route, extra: str | None) -> Bus:
        if extra is None:
            raise TransportFormatError("bus requires a registration number")
        return cls(id, capacity, route, extra)

    def encode(self) -> str:
        return super().encode() + FIELD_DELIMITER + self._registration_number


class Train(PublicTransport):
    """A train made up of a number of carriages."""

    def __init__(self, id: int, capacity: int, route: Route, carriage_count: int) -> None:
        super().__init__(id, capacity, route)
        self._carriage_count = carriage_count

    @property
    def carriage_count(self) -> int:
        return self._carriage_count

    @classmethod
    def from_extra(cls, id: int, capacity: int, route: Route, extra: str | None) -> Train:
        return cls(id, capacity, route, parse_int(extra))

    def encode(self) -> str:
        return super().encode() + FIELD_DELIMITER + str(self._carriage_count)


class Ferry(PublicTransport):
    """A ferry of a given class of vessel, a CityCat unless stated otherwise."""

    def __init__(
        self, id: int, capacity: int, route: Route, ferry_type: str | None = None
    ) -> None:
        super().__init__(id, capacity, route)
        self._ferry_type = DEFAULT_FERRY_TYPE if ferry_type is None else ferry_type

    @property
    def ferry_type(self) -> str:
        return self._ferry_type

    @classmethod
    def from_extra(cls, id: int, capacity: int, route: Route, extra: str | None) -> Ferry:
        return cls(id, capacity, route, extra)

    def encode(self) -> str:
        return super().encode() + FIELD_DELIMITER + self._ferry_type


VEHICLE_CLASSES: dict[RouteType, type[PublicTransport]] = {
    RouteType.BUS: Bus,
    RouteType.TRAIN: Train,
    RouteType.FERRY: Ferry,
}


def _find_route(route_number: int, existing_routes: Sequence[Route]) -> Route:
    """Return the first existing route with the given number."""
    for route in existing_routes:
        if route.number == route_number:
            return route

    logger.debug(f"Rejected vehicle: unknown route {route_number}")
    raise TransportFormatError(f"unknown route number: {route_number}")
