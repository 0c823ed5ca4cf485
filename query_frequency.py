#!/usr/bin/env python3
"""
Query phrase frequency in news coverage and print the JSON response.

Usage:
    python query_frequency.py inflation                         # US, domains, last 90 days, monthly
    python query_frequency.py inflation "interest rates" --regions=US,EU
    python query_frequency.py inflation --start=2023-01-01 --end=2023-03-31 --granularity=weekly
    python query_frequency.py inflation --mode=sourcecountry    # country allow-lists
    python query_frequency.py inflation --estimate              # cost estimate only
    python query_frequency.py inflation --probe                 # single raw diagnostic query
    python query_frequency.py --clear-cache                     # drop both cache tiers
"""

import asyncio
import json
import sys
from datetime import date, timedelta
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container  # noqa: E402
from app.models.common import CHUNK_CACHE_TABLE, RESPONSE_CACHE_TABLE  # noqa: E402
from settings import DB_PATH  # noqa: E402
from settings.logging import setup_logging  # noqa: E402
from web.api.frequency import post_frequency  # noqa: E402

logger = setup_logging(to_file=True)

DEFAULT_LOOKBACK_DAYS = 90


def parse_args(args: list[str]) -> dict:
    """Build a request body from command-line arguments."""
    options = {a[2:].split("=", 1)[0]: a.split("=", 1)[1] for a in args if a.startswith("--") and "=" in a}
    flags = {a[2:] for a in args if a.startswith("--") and "=" not in a}
    phrases = [a for a in args if not a.startswith("--")]

    end = options.get("end", date.today().isoformat())
    start = options.get("start", (date.fromisoformat(end) - timedelta(days=DEFAULT_LOOKBACK_DAYS)).isoformat())

    return {
        "phrases": phrases,
        "regions": [r.strip().upper() for r in options.get("regions", "US").split(",") if r.strip()],
        "mode": options.get("mode", "domains"),
        "startDate": start,
        "endDate": end,
        "granularity": options.get("granularity", "monthly"),
        "estimateOnly": "estimate" in flags,
        "testMode": "probe" in flags,
    }


def main():
    """Run one request from the command line."""
    args = sys.argv[1:]

    if not args or "--help" in args or "-h" in args:
        print(__doc__)
        sys.exit(0 if args else 1)

    container.init(db_path=DB_PATH)

    if "--clear-cache" in args:
        store = container.store
        logger.info(
            "Clearing {} chunk and {} response cache entries",
            store.count(CHUNK_CACHE_TABLE),
            store.count(RESPONSE_CACHE_TABLE),
        )
        store.clear()
        return

    try:
        body = parse_args(args)
    except ValueError as e:
        print(f"Invalid arguments: {e}")
        sys.exit(1)

    status, response = asyncio.run(post_frequency(body))
    print(json.dumps(response, indent=2))

    if status != 200:
        logger.error("Request failed with status {}", status)
        sys.exit(1)


if __name__ == "__main__":
    main()
