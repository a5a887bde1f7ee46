"""Text file adapter for network persistence."""

from transit_network.adapters.text_file.network_file_repository import (
    TextFileNetworkRepository,
    load_network,
    save_network,
)

__all__ = ["TextFileNetworkRepository", "load_network", "save_network"]
