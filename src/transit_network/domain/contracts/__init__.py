"""Contracts (protocols) shared across the domain."""

from transit_network.domain.contracts.writeable import Writeable

__all__ = ["Writeable"]
