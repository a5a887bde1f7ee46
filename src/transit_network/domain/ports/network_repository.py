"""Network repository port."""

from typing import Protocol

from transit_network.domain.models.network import Network


class NetworkRepository(Protocol):
    """Port for loading and saving a whole network."""

    def load(self) -> Network:
        """Load the network, raising TransportFormatError for malformed content."""
        ...

    def save(self, network: Network) -> None:
        """Persist the network, replacing whatever was stored before."""
        ...
