"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from biotope_map import __version__
from biotope_map.config import get_settings
from biotope_map.errors import BiotopeMapError
from biotope_map.flows.snapshot import snapshot_city
from biotope_map.schemas import Category, FilterState
from biotope_map.web import create_server

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="biotope-map",
        description="City biodiversity map from iNaturalist observations",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    # 'serve' command - interactive map page
    serve_parser = subparsers.add_parser("serve", help="Serve the interactive map locally")
    serve_parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Interface to bind (default: host from settings)",
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to serve on (default: port from settings)",
    )

    # 'snapshot' command - static page for one city
    snapshot_parser = subparsers.add_parser("snapshot", help="Export a static map for a city")
    snapshot_parser.add_argument("city", type=str, help="City name to look up")
    snapshot_parser.add_argument(
        "--category",
        action="append",
        choices=[c.value for c in Category],
        default=[],
        help="Only show this category (repeatable; default: all)",
    )
    snapshot_parser.add_argument(
        "--threatened-only",
        action="store_true",
        help="Only show threatened taxa",
    )
    snapshot_parser.add_argument(
        "--invasive-only",
        action="store_true",
        help="Only show introduced taxa",
    )
    snapshot_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output HTML path (default: <site_dir>/index.html)",
    )
    snapshot_parser.add_argument(
        "--radius",
        type=float,
        default=None,
        help="Search radius in km (default: radius_km from settings)",
    )

    return parser


def configure_logging(debug: bool = False) -> None:
    """Set up root logging once for the process."""
    level = logging.DEBUG if debug else get_settings().log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Search radius: {settings.radius_km} km")
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    """Handle the 'serve' command: run the interactive map server."""
    settings = get_settings()
    host = args.host if args.host is not None else settings.host
    port = args.port if args.port is not None else settings.port

    with create_server(host, port, radius_km=settings.radius_km) as server:
        print(f"Serving map on http://{host}:{port}/ (Ctrl+C to stop)")
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            print("\nServer stopped.")

    return 0


def cmd_snapshot(args: argparse.Namespace) -> int:
    """Handle the 'snapshot' command: export a static page for one city."""
    filter_state = FilterState(
        categories=frozenset(Category(c) for c in args.category),
        threatened_only=args.threatened_only,
        invasive_only=args.invasive_only,
    )
    try:
        result = snapshot_city(
            args.city,
            filter_state=filter_state,
            output=args.output,
            radius_km=args.radius,
        )
    except BiotopeMapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote {result['output']} ({result['shown']} of {result['fetched']} observations)")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(debug=getattr(args, "debug", False) or get_settings().debug)

    commands = {
        "info": cmd_info,
        "serve": cmd_serve,
        "snapshot": cmd_snapshot,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
