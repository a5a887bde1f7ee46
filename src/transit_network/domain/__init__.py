"""Domain layer - network entities, their codecs and ports."""

from transit_network.domain.exceptions import (
    EmptyRouteError,
    IncompatibleTypeError,
    OverCapacityError,
    TransportError,
    TransportFormatError,
)
from transit_network.domain.models import (
    Bus,
    BusRoute,
    Ferry,
    FerryRoute,
    Network,
    PublicTransport,
    Route,
    Stop,
    Train,
    TrainRoute,
)
from transit_network.domain.ports import NetworkRepository

__all__ = [
    "Bus",
    "BusRoute",
    "EmptyRouteError",
    "Ferry",
    "FerryRoute",
    "IncompatibleTypeError",
    "Network",
    "NetworkRepository",
    "OverCapacityError",
    "PublicTransport",
    "Route",
    "Stop",
    "Train",
    "TrainRoute",
    "TransportError",
    "TransportFormatError",
]
