"""
OpenCage Geocoder — Interactive CLI
===================================
Thin wrapper around the opencagedata library.

Usage:
    opencagedata                          # interactive mode
    opencagedata "10 Downing Street"      # single forward lookup
    opencagedata 51.5034 -0.1276          # single reverse lookup

Settings are read from environment variables:
    OPENCAGE_API_KEY      API key (required)
    OPENCAGE_API_DOMAIN   API host, defaults to api.opencagedata.com
    OPENCAGE_API_VERSION  API version, defaults to v1
    OPENCAGE_LOG_LEVEL    logging level, defaults to WARNING
"""

import asyncio
import logging
import os
import sys
from typing import Any

import httpx

from opencagedata import ClientConfig, OpenCage
from opencagedata.exceptions import OpenCageError
from opencagedata.models import GeocodeResult

logger = logging.getLogger("opencagedata.cli")

_BANNER = """\
╔══════════════════════════════════════╗
║          OpenCage Geocoder           ║
║  Address ⇄ Coordinates               ║
╚══════════════════════════════════════╝
Enter an address, or 'lat,lon' for a reverse lookup.
Type 'q' to quit.
"""


def _log_api_event(event: str, value: Any) -> None:
    logger.info("%s = %s", event, value)


def _build_client() -> OpenCage:
    return OpenCage(
        ClientConfig.from_mapping(
            {
                "api_key": os.environ.get("OPENCAGE_API_KEY"),
                "api_domain": os.environ.get("OPENCAGE_API_DOMAIN"),
                "api_version": os.environ.get("OPENCAGE_API_VERSION"),
                "logger": _log_api_event,
            }
        )
    )


def _print_results(results: list[GeocodeResult]) -> None:
    if not results:
        print("  ✗ No results.")
        return
    for result in results:
        geometry = result.get("geometry") or {}
        print(f"  ✓ {result.get('formatted', '?')}")
        print(f"      confidence     {result.get('confidence')}")
        print(f"      radius (m)     {result['confidenceInM']}")
        print(f"      lat / lng      {geometry.get('lat')}, {geometry.get('lng')}")


async def _lookup(client: OpenCage, args: list[str]) -> list[GeocodeResult]:
    if len(args) == 2:
        return await client.reverse(args[0], args[1])
    return await client.search(args[0])


def _run_interactive(client: OpenCage) -> None:
    print(_BANNER)

    while True:
        try:
            raw = input("\nQuery:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if raw.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not raw:
            print("  ✗ A query is required.")
            continue

        parts = [p.strip() for p in raw.split(",")]
        args = parts if len(parts) == 2 and _looks_numeric(parts) else [raw]
        try:
            results = asyncio.run(_lookup(client, args))
        except (OpenCageError, httpx.TransportError) as exc:
            print(f"  ✗ Error: {exc}")
            continue
        _print_results(results)


def _looks_numeric(parts: list[str]) -> bool:
    try:
        for part in parts:
            float(part)
    except ValueError:
        return False
    return True


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    logging.basicConfig(
        level=os.environ.get("OPENCAGE_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not os.environ.get("OPENCAGE_API_KEY"):
        print("Error: OPENCAGE_API_KEY is not set.", file=sys.stderr)
        sys.exit(2)
    client = _build_client()

    if len(sys.argv) in (2, 3):
        args = sys.argv[1:]
        if len(args) == 2 and not _looks_numeric(args):
            args = [" ".join(args)]
        try:
            results = asyncio.run(_lookup(client, args))
        except (OpenCageError, httpx.TransportError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            sys.exit(1)
        _print_results(results)
    else:
        _run_interactive(client)


if __name__ == "__main__":
    main()
