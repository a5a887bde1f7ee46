"""Domain models for the transportation network."""

from transit_network.domain.models.network import LoadState, Network
from transit_network.domain.models.network_summary import NetworkSummary
from transit_network.domain.models.passenger import Passenger
from transit_network.domain.models.route import BusRoute, FerryRoute, Route, TrainRoute
from transit_network.domain.models.route_type import RouteType
from transit_network.domain.models.stop import Stop
from transit_network.domain.models.vehicle import (
    DEFAULT_FERRY_TYPE,
    Bus,
    Ferry,
    PublicTransport,
    Train,
)

__all__ = [
    "DEFAULT_FERRY_TYPE",
    "Bus",
    "BusRoute",
    "Ferry",
    "FerryRoute",
    "LoadState",
    "Network",
    "NetworkSummary",
    "Passenger",
    "PublicTransport",
    "Route",
    "RouteType",
    "Stop",
    "Train",
    "TrainRoute",
]
