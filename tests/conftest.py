"""Shared fixtures for network tests."""

from collections.abc import Callable
from pathlib import Path

import pytest

from transit_network.domain.models import Route, Stop


@pytest.fixture
def stops() -> list[Stop]:
    """The four stops of the sample network."""
    return [
        Stop("stop0", 0, 1),
        Stop("stop1", -1, 0),
        Stop("stop2", 4, 2),
        Stop("stop3", 2, -8),
    ]


@pytest.fixture
def routes(stops: list[Stop]) -> list[Route]:
    """The three routes of the sample network, decoded against its stops."""
    return [
        Route.decode("train,red,1:stop0|stop2|stop1", stops),
        Route.decode("bus,blue,2:stop1|stop3|stop0", stops),
        Route.decode("ferry,orange,3:stop1", stops),
    ]


@pytest.fixture
def write_network_file(tmp_path: Path) -> Callable[[str], Path]:
    """Write network file content to a temporary file and return its path."""

    def _write(content: str, name: str = "network.txt") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8", newline="")
        return path

    return _write
