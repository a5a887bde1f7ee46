"""Network repository backed by a line-oriented text file."""

import logging
from pathlib import Path

from transit_network.domain.exceptions import TransportFormatError
from transit_network.domain.models.network import Network

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"


class TextFileNetworkRepository:
    """Loads and saves a network in the three-block text format.

    A missing path makes loading fail with :class:`OSError` and saving a no-op.
    """

    def __init__(self, path: str | Path | None, encoding: str = DEFAULT_ENCODING) -> None:
        self._path = Path(path) if path is not None else None
        self._encoding = encoding

    def load(self) -> Network:
        """Read and decode the network file.

        Raises:
            OSError: If no path was given or the file cannot be read.
            TransportFormatError: If the file content is malformed.
        """
        if self._path is None:
            raise OSError("no network file given")

        logger.info(f"Loading network from {self._path}")
        try:
            with open(self._path, encoding=self._encoding) as f:
                network = Network.decode(line.removesuffix("\n") for line in f)
        except UnicodeDecodeError as e:
            raise TransportFormatError(f"not valid {self._encoding} text: {e.reason}") from e

        summary = network.summary()
        logger.info(
            f"Loaded {summary.stop_count} stop(s), {summary.route_count} route(s) "
            f"and {summary.vehicle_count} vehicle(s) from {self._path}"
        )
        return network

    def save(self, network: Network) -> None:
        """Encode the network and write it, one record per line.

        Raises:
            TransportFormatError: If a record cannot be represented in the
                configured encoding. The target file is left untouched.
        """
        if self._path is None:
            logger.debug("No network file given, nothing saved")
            return

        text = "\n".join(network.encode()) + "\n"
        try:
            data = text.encode(self._encoding)
        except UnicodeEncodeError as e:
            raise TransportFormatError(
                f"cannot encode network as {self._encoding}: {e.reason}"
            ) from e

        with open(self._path, "wb") as f:
            f.write(data)
        logger.info(f"Saved network to {self._path}")


def load_network(path: str | Path | None, encoding: str = DEFAULT_ENCODING) -> Network:
    """Load a network from a file."""
    return TextFileNetworkRepository(path, encoding).load()


def save_network(
    network: Network, path: str | Path | None, encoding: str = DEFAULT_ENCODING
) -> None:
    """Save a network to a file; does nothing when ``path`` is ``None``."""
    TextFileNetworkRepository(path, encoding).save(network)
