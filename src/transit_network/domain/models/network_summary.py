"""Network summary domain model."""

from pydantic import BaseModel, ConfigDict


class NetworkSummary(BaseModel):
    """Size of each block of a network."""

    model_config = ConfigDict(frozen=True)

    stop_count: int
    route_count: int
    vehicle_count: int
