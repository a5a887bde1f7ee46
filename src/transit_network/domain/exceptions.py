"""Exceptions raised by the transportation network domain."""


class TransportError(Exception):
    """Base class for all transportation network errors."""


class TransportFormatError(TransportError):
    """An encoded stop, route, vehicle or network file is malformed."""


class OverCapacityError(TransportError):
    """A passenger tried to board a vehicle that is already full."""


class EmptyRouteError(TransportError):
    """A route without stops was asked for its start or given a vehicle."""


class IncompatibleTypeError(TransportError):
    """A vehicle's type does not match the type of the route it is added to."""
