#!/usr/bin/env python3
"""
Fetch one resource from the Congress API and print the raw body.

Reads CONGRESS_API_KEY (and optional CONGRESS_API_VERSION, CONGRESS_API_FORMAT)
from the environment.

Usage:
    python fetch.py member 400180                 # Member bio
    python fetch.py members 118 senate            # Senate roster, 118th Congress
    python fetch.py current_members house NY 10   # Current member for NY-10
    python fetch.py schedule house --json         # Today's House schedule as JSON
    python fetch.py bill 113 hr2397 --debug       # Log the request
    python fetch.py list                          # Show available operations
"""

import asyncio
import inspect
import sys

from congress_client import OPERATIONS, CongressClient, CongressAPIError
from settings.logging import setup_logging

FLAGS = ("--json", "--xml", "--debug")


def parse_args(args: list[str]) -> tuple[str | None, list[str], dict, bool]:
    """Split argv into operation, positional params, config overrides, debug flag."""
    overrides = {}
    if "--json" in args:
        overrides["format"] = "json"
    elif "--xml" in args:
        overrides["format"] = "xml"
    debug = "--debug" in args

    args = [a for a in args if a not in FLAGS]
    if not args:
        return None, [], overrides, debug
    return args[0], args[1:], overrides, debug


async def fetch(client: CongressClient, operation: str, params: list[str]) -> str:
    async with client:
        return await getattr(client, operation)(*params)


def main(argv: list[str] | None = None) -> int:
    operation, params, overrides, debug = parse_args(sys.argv[1:] if argv is None else argv)
    logger = setup_logging(level="DEBUG" if debug else "WARNING", to_file=False)

    if operation == "list":
        print("\n".join(OPERATIONS))
        return 0
    if operation not in OPERATIONS:
        print(__doc__)
        return 1

    try:
        inspect.signature(getattr(CongressClient, operation)).bind(None, *params)
    except TypeError as e:
        logger.error("Bad arguments for {}: {}", operation, e)
        return 1

    try:
        client = CongressClient.from_env(**overrides)
        body = asyncio.run(fetch(client, operation, params))
    except CongressAPIError as e:
        logger.error("{}", e)
        return 1

    print(body)
    return 0


if __name__ == "__main__":
    sys.exit(main())
