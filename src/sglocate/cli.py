"""
Singapore Address Lookup CLI
============================
Thin wrapper around SearchGateway.

Usage:
    sglocate -z 547528              # zip code -> addresses + coordinates
    sglocate -z 547528 -f           # ... and save to addresses_547528.json
    sglocate -a "Plaza Singapura"   # address -> zip code
    sglocate -a "Orchard Road" -p 2 -d

Settings are read from the environment or a .env file:
    ONEMAP_API_KEY   Optional OneMap access token
    ONEMAP_API_URL   Override the OneMap search endpoint
    LOG_LEVEL        Logging level (default INFO)
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from pydantic import ValidationError

from sglocate import __version__
from sglocate.client import SearchGateway
from sglocate.config import load_settings
from sglocate.models import LocationRecord, parse_page
from sglocate.storage import save_records

ZIPCODE_MODE = "zipcode"
ADDRESS_MODE = "address"

_MISSING = "-"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sglocate",
        description="Convert zip codes to addresses and vice versa.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "-z", "--zipcode", help="Convert zip code to address"
    )
    target.add_argument(
        "-a", "--address", help="Convert address to zip code"
    )
    parser.add_argument(
        "-f", "--file", action="store_true",
        help="Save addresses to a file (zip code lookups only)",
    )
    parser.add_argument(
        "-p", "--page", default="1", help="Result page number (default 1)"
    )
    parser.add_argument(
        "-d", "--detailed", action="store_true",
        help="Show block number, road name and building",
    )
    return parser


def _print_record(record: LocationRecord, mode: str, detailed: bool) -> None:
    rows = [("Address", record.address)]
    if mode == ZIPCODE_MODE:
        rows.append(("Latitude", record.latitude))
        rows.append(("Longitude", record.longitude))
    else:
        rows.append(("Zip Code", record.zip_code))
    if detailed:
        rows.append(("Block", record.block_no))
        rows.append(("Road", record.road_name))
        rows.append(("Building", record.building))

    for label, value in rows:
        print(f"  {label:>10}: {_MISSING if value is None else value}")
    print()


def run_lookup(
    gateway: SearchGateway,
    value: str,
    mode: str,
    page: int = 1,
    detailed: bool = False,
    save: bool = False,
) -> list[LocationRecord]:
    """
    Run one search and print it in the display style of *mode*.

    Both directions share the same search; *mode* only changes what is
    printed and whether saving is allowed.
    """
    outcome = gateway.lookup(value, page)

    if not outcome.ok:
        print(f"Error fetching data from OneMap API: {outcome.error}", file=sys.stderr)
        return []

    records = list(outcome.records)
    if not records:
        if mode == ZIPCODE_MODE:
            print(f"No addresses found for {value}.")
        else:
            print(f"No zip code found for {value}.")
        return records

    if mode == ZIPCODE_MODE:
        print(f"Addresses found for {value}:")
    else:
        print(f"Zip code found for {value}:")
    if outcome.total_pages > 1:
        print(f"  (page {outcome.page} of {outcome.total_pages}, {outcome.found} found)")
    print()
    for record in records:
        _print_record(record, mode, detailed)

    if mode == ADDRESS_MODE:
        print(f"Zip code for address '{value}': {records[0].zip_code or _MISSING}")
    elif save:
        # save_records logs success or failure itself
        save_records(value, records)

    return records


def main(
    argv: Optional[Sequence[str]] = None,
    gateway: Optional[SearchGateway] = None,
) -> None:
    """Entry point: one lookup per invocation."""
    args = build_parser().parse_args(argv)

    if not args.zipcode and not args.address:
        print("Please provide either a zip code or an address.")
        return

    try:
        settings = load_settings()
    except ValidationError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return
    logging.basicConfig(level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))
    if gateway is None:
        gateway = SearchGateway.from_settings(settings)

    page = parse_page(args.page)
    if args.zipcode:
        run_lookup(
            gateway, args.zipcode, ZIPCODE_MODE,
            page=page, detailed=args.detailed, save=args.file,
        )
    else:
        if args.file:
            print("  ✗ --file is only supported with --zipcode; not saving.")
        run_lookup(
            gateway, args.address, ADDRESS_MODE,
            page=page, detailed=args.detailed,
        )


if __name__ == "__main__":
    main()
