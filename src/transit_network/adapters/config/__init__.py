"""Configuration adapters."""

from transit_network.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
