"""Network aggregate and the three-block network file codec."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from enum import Enum, auto

from transit_network.domain.contracts.writeable import Writeable
from transit_network.domain.exceptions import TransportFormatError
from transit_network.domain.models.network_summary import NetworkSummary
from transit_network.domain.models.parsing import parse_int
from transit_network.domain.models.route import Route
from transit_network.domain.models.stop import Stop
from transit_network.domain.models.vehicle import PublicTransport

logger = logging.getLogger(__name__)


class LoadState(Enum):
    """Where the decoder is within a network file."""

    READ_STOPS_HEADER = auto()
    READ_STOP_LINES = auto()
    READ_ROUTES_HEADER = auto()
    READ_ROUTE_LINES = auto()
    READ_VEHICLES_HEADER = auto()
    READ_VEHICLE_LINES = auto()
    EXPECT_EOF = auto()
    DONE = auto()


# header state -> state for the block's record lines
_BLOCK_RECORDS = {
    LoadState.READ_STOPS_HEADER: LoadState.READ_STOP_LINES,
    LoadState.READ_ROUTES_HEADER: LoadState.READ_ROUTE_LINES,
    LoadState.READ_VEHICLES_HEADER: LoadState.READ_VEHICLE_LINES,
}

# record state -> state once the block is finished
_BLOCK_END = {
    LoadState.READ_STOP_LINES: LoadState.READ_ROUTES_HEADER,
    LoadState.READ_ROUTE_LINES: LoadState.READ_VEHICLES_HEADER,
    LoadState.READ_VEHICLE_LINES: LoadState.EXPECT_EOF,
}


class Network:
    """The stops, routes and vehicles making up a transportation network.

    The add operations are tolerant: ``None`` is silently ignored. Decoding
    a network file is strict: anything malformed raises
    :class:`TransportFormatError`.
    """

    def __init__(self) -> None:
        self._stops: list[Stop] = []
        self._routes: list[Route] = []
        self._vehicles: list[PublicTransport] = []

    def add_stop(self, stop: Stop | None) -> None:
        if stop is not None:
            self._stops.append(stop)

    def add_stops(self, stops: Sequence[Stop | None]) -> None:
        """Add several stops, or none at all if any of them is ``None``."""
        if any(stop is None for stop in stops):
            return
        self._stops.extend(stops)  # type: ignore[arg-type]

    def add_route(self, route: Route | None) -> None:
        if route is not None:
            self._routes.append(route)

    def add_vehicle(self, vehicle: PublicTransport | None) -> None:
        if vehicle is not None:
            self._vehicles.append(vehicle)

    def get_stops(self) -> list[Stop]:
        return list(self._stops)

    def get_routes(self) -> list[Route]:
        return list(self._routes)

    def get_vehicles(self) -> list[PublicTransport]:
        return list(self._vehicles)

    def summary(self) -> NetworkSummary:
        return NetworkSummary(
            stop_count=len(self._stops),
            route_count=len(self._routes),
            vehicle_count=len(self._vehicles),
        )

    def encode(self) -> list[str]:
        """Encode the network as the lines of a network file.

        Stops, routes and vehicles are written in that order, each block
        starting with its record count.
        """
        lines: list[str] = []
        for block in (self._stops, self._routes, self._vehicles):
            lines.extend(_encode_block(block))
        return lines

    @classmethod
    def decode(cls, lines: Iterable[str]) -> Network:
        """Decode a network from the lines of a network file.

        Lines must not carry their terminators. Stops decoded earlier in the
        file are visible to route lines, and routes to vehicle lines.

        Raises:
            TransportFormatError: If a count is missing, negative or not an
                integer, a record is malformed or anything follows the
                vehicle block.
        """
        network = cls()
        reader = iter(lines)
        state = LoadState.READ_STOPS_HEADER
        remaining = 0
        line_number = 0

        while state is not LoadState.DONE:
            line = next(reader, None)
            line_number += 1

            if state is LoadState.EXPECT_EOF:
                if line is not None:
                    raise TransportFormatError(f"line {line_number}: unexpected trailing content")
                state = LoadState.DONE
                continue

            if line is None:
                raise TransportFormatError(f"line {line_number}: unexpected end of file")

            if state in _BLOCK_RECORDS:
                remaining = _parse_count(line, line_number)
                logger.debug(f"{state.name}: expecting {remaining} record(s)")
                records_state = _BLOCK_RECORDS[state]
                state = records_state if remaining else _BLOCK_END[records_state]
                continue

            try:
                network._decode_record(state, line)
            except TransportFormatError as e:
                raise TransportFormatError(f"line {line_number}: {e}") from e

            remaining -= 1
            if remaining == 0:
                state = _BLOCK_END[state]

        logger.debug(f"Decoded network: {network.summary()}")
        return network

    def _decode_record(self, state: LoadState, line: str) -> None:
        if state is LoadState.READ_STOP_LINES:
            self.add_stop(Stop.decode(line))
        elif state is LoadState.READ_ROUTE_LINES:
            self.add_route(Route.decode(line, self._stops))
        elif state is LoadState.READ_VEHICLE_LINES:
            self.add_vehicle(PublicTransport.decode(line, self._routes))


def _parse_count(line: str, line_number: int) -> int:
    """Parse a block header: a non-negative record count."""
    try:
        count = parse_int(line)
    except TransportFormatError as e:
        raise TransportFormatError(f"line {line_number}: invalid record count") from e
    if count < 0:
        raise TransportFormatError(f"line {line_number}: negative record count {count}")
    return count


def _encode_block(block: Sequence[Writeable]) -> list[str]:
    return [str(len(block)), *(item.encode() for item in block)]
