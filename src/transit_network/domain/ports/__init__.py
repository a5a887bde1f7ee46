"""Ports (interfaces) for the ports-and-adapters architecture."""

from transit_network.domain.ports.network_repository import NetworkRepository

__all__ = ["NetworkRepository"]
