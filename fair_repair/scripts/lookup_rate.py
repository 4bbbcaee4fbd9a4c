"""
Look up the regional labor rate (and optionally an adjusted quote) for ZIP codes.

Intended for checking the rate tables by hand.

Usage:
  python -m fair_repair.scripts.lookup_rate 10001 59999
  python -m fair_repair.scripts.lookup_rate 60601 --json
  python -m fair_repair.scripts.lookup_rate 77002 --price 420 610 --labor 180 260
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from fair_repair.config.errors import FairRepairError
from fair_repair.config.settings import settings
from fair_repair.services.labor_rate_service import resolve_labor_rate
from fair_repair.services.quote_adjustment_service import build_adjusted_quote
from fair_repair.utils.rate_logger import (
    configure_logging,
    dump_output,
    log_adjusted_quote,
    log_rate_resolution,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Resolve ZIP codes to regional hourly labor rates."
    )
    parser.add_argument("zips", nargs="+", help="5-digit ZIP codes")
    parser.add_argument("--json", action="store_true", help="Print API-shaped JSON instead of banners")
    parser.add_argument(
        "--price", nargs=2, type=float, metavar=("LOW", "HIGH"),
        help="Baseline total price range to adjust",
    )
    parser.add_argument(
        "--labor", nargs=2, type=float, metavar=("LOW", "HIGH"),
        help="Baseline labor price range to adjust (requires --price)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.labor and not args.price:
        parser.error("--labor requires --price")

    try:
        settings.validate()
        configure_logging(settings.log_level, json_output=settings.log_json)

        for zip_code in args.zips:
            if args.price:
                pricing = {"total": {"low": args.price[0], "high": args.price[1]}}
                if args.labor:
                    pricing["labor"] = {"low": args.labor[0], "high": args.labor[1]}
                quote = build_adjusted_quote(pricing, zip_code)
                if args.json:
                    dump_output(quote.to_api_output(data_source=settings.data_source))
                else:
                    log_rate_resolution(quote.resolution)
                    log_adjusted_quote(quote, title=zip_code)
                continue

            resolution = resolve_labor_rate(zip_code)
            if args.json:
                dump_output(resolution.to_api_output(data_source=settings.data_source))
            else:
                log_rate_resolution(resolution)

    except FairRepairError as e:
        dump_output(e.to_dict())
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
