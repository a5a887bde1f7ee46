"""Route type domain model."""

from enum import StrEnum

from transit_network.domain.exceptions import TransportFormatError


class RouteType(StrEnum):
    """The kind of transport a route (and every vehicle on it) provides."""

    BUS = "bus"
    TRAIN = "train"
    FERRY = "ferry"

    @classmethod
    def from_tag(cls, tag: str) -> "RouteType":
        """Look up a route type by its encoded tag (e.g. "bus")."""
        try:
            return cls(tag)
        except ValueError as e:
            raise TransportFormatError(f"unknown transport type: {tag!r}") from e
