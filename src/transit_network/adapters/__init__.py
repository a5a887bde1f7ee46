"""Adapters layer - configuration and file persistence."""

from transit_network.adapters.config import AppConfig
from transit_network.adapters.text_file import (
    TextFileNetworkRepository,
    load_network,
    save_network,
)

__all__ = ["AppConfig", "TextFileNetworkRepository", "load_network", "save_network"]
