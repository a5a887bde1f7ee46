"""Tests for the stop model and its codec."""

import pytest

from transit_network.domain.exceptions import TransportFormatError
from transit_network.domain.models import BusRoute, Passenger, Stop


def test_stop_encodes_name_and_coordinates() -> None:
    """Given a stop, when encoding it, then name and coordinates are colon separated."""
    assert Stop("stop1", -1, 0).encode() == "stop1:-1:0"


def test_stop_decode_reverses_encode() -> None:
    """Given an encoded stop, when decoding it, then name and coordinates are restored."""
    stop = Stop.decode("stop3:2:-8")

    assert stop.name == "stop3"
    assert stop.x == 2
    assert stop.y == -8
    assert Stop.decode(stop.encode()) == stop


def test_stop_decode_trims_coordinates() -> None:
    """Given whitespace around coordinates, when decoding, then it is ignored."""
    assert Stop.decode("stop2: 4 :  2") == Stop("stop2", 4, 2)


def test_stop_decode_accepts_32_bit_limits() -> None:
    """Given coordinates at the 32-bit limits, when decoding, then they are accepted."""
    assert Stop.decode("edge:2147483647:-2147483648") == Stop("edge", 2147483647, -2147483648)


@pytest.mark.parametrize(
    "line",
    [
        "stop0:0:1:2",  # extra delimiter
        "stop0:0",  # too few delimiters
        "stop0",  # no coordinates
        ":0:1",  # empty name
        "stop0:a:1",  # x not an integer
        "stop0:0:1.5",  # y not an integer
        "stop0::",  # empty coordinates
        "stop0:99999999999:0",  # x out of range
        "stop0:0:2147483648",  # y just above the 32-bit range
        "stop0:-2147483649:0",  # x just below the 32-bit range
    ],
)
def test_stop_decode_rejects_malformed_lines(line: str) -> None:
    """Given a malformed stop line, when decoding, then TransportFormatError is raised."""
    with pytest.raises(TransportFormatError):
        Stop.decode(line)


def test_stop_decode_rejects_missing_line() -> None:
    """Given no line at all, when decoding, then TransportFormatError is raised."""
    with pytest.raises(TransportFormatError):
        Stop.decode(None)


def test_stop_equality_ignores_bookkeeping() -> None:
    """Given two stops with equal name and coordinates, when one has routes, then they are equal."""
    stop = Stop("stop", 1, 2)
    other = Stop("stop", 1, 2)
    BusRoute("blue", 2).add_stop(stop)
    stop.add_passenger(Passenger("Alice"))

    assert stop == other
    assert hash(stop) == hash(other)
    assert stop != Stop("stop", 2, 1)


def test_stop_is_frozen() -> None:
    """Given a stop, when trying to rename it, then raises AttributeError."""
    stop = Stop("stop", 1, 2)

    with pytest.raises(AttributeError):
        stop.name = "renamed"  # type: ignore[misc]


def test_stop_neighbours_ignore_self_none_and_duplicates() -> None:
    """Given neighbour additions, when listing neighbours, then each stop appears once."""
    stop = Stop("a", 0, 0)
    neighbour = Stop("b", 1, 1)

    stop.add_neighbouring_stop(neighbour)
    stop.add_neighbouring_stop(neighbour)
    stop.add_neighbouring_stop(stop)
    stop.add_neighbouring_stop(None)

    assert stop.get_neighbouring_stops() == [neighbour]


def test_stop_waiting_passengers_is_a_copy() -> None:
    """Given waiting passengers, when modifying the returned list, then the stop is unchanged."""
    stop = Stop("a", 0, 0)
    stop.add_passenger(Passenger("Alice"))
    stop.add_passenger(None)

    stop.get_waiting_passengers().clear()

    assert len(stop.get_waiting_passengers()) == 1
