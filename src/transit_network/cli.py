"""CLI for checking, summarising and rewriting network files."""

import argparse
import logging
import sys

from pydantic import ValidationError

from transit_network.adapters.config import AppConfig
from transit_network.adapters.text_file import TextFileNetworkRepository
from transit_network.domain.exceptions import TransportFormatError
from transit_network.domain.models import Network
from transit_network.domain.ports import NetworkRepository

logger = logging.getLogger(__name__)


def _configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=config.logging_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def _resolve_file(file: str | None, config: AppConfig) -> str:
    """Use the given file, falling back to the configured network file."""
    resolved = file or config.network_file
    if not resolved:
        raise OSError("no network file given and NETWORK_FILE is not set")
    return resolved


def _repository(file: str | None, config: AppConfig) -> NetworkRepository:
    return TextFileNetworkRepository(_resolve_file(file, config), config.file_encoding)


def _load(file: str | None, config: AppConfig) -> Network:
    return _repository(file, config).load()


def check(file: str | None, config: AppConfig) -> None:
    """Load a network file, raising if it is unreadable or malformed."""
    _load(file, config)
    print("OK")


def summary(file: str | None, config: AppConfig, as_json: bool = False) -> None:
    """Print how many stops, routes and vehicles a network file holds."""
    network_summary = _load(file, config).summary()
    if as_json:
        print(network_summary.model_dump_json(indent=2))
        return

    print(f"Stops:    {network_summary.stop_count}")
    print(f"Routes:   {network_summary.route_count}")
    print(f"Vehicles: {network_summary.vehicle_count}")


def rewrite(source: str, target: str, config: AppConfig) -> None:
    """Load a network file and save it again in canonical form."""
    network = _load(source, config)
    _repository(target, config).save(network)
    print(f"Wrote {target}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="transit-network",
        description="Transportation network file tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a network file
  transit-network check network.txt

  # Show block sizes as JSON
  transit-network summary network.txt --json

  # Load and save again in canonical form
  transit-network rewrite network.txt normalized.txt
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    check_parser = subparsers.add_parser("check", help="Validate a network file")
    check_parser.add_argument("file", nargs="?", help="Network file (default: NETWORK_FILE)")

    summary_parser = subparsers.add_parser("summary", help="Count stops, routes and vehicles")
    summary_parser.add_argument("file", nargs="?", help="Network file (default: NETWORK_FILE)")
    summary_parser.add_argument("--json", action="store_true", help="Output as JSON")

    rewrite_parser = subparsers.add_parser("rewrite", help="Load a network file and save it")
    rewrite_parser.add_argument("source", help="Network file to read")
    rewrite_parser.add_argument("target", help="Network file to write")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1
    _configure_logging(config)

    try:
        if args.command == "check":
            check(args.file, config)
        elif args.command == "summary":
            summary(args.file, config, as_json=args.json)
        elif args.command == "rewrite":
            rewrite(args.source, args.target, config)
    except TransportFormatError as e:
        logger.debug("Network file rejected", exc_info=True)
        print(f"Malformed network file: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the console script."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
