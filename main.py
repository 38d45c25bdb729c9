"""
main.py
-------
Command-line entry point for the LightBnB data-access layer.

Usage:
    python main.py search --city Van --min-price 50 --min-rating 4 --limit 5
    python main.py user --email Jane@Example.com
    python main.py reservations 12 --limit 3
"""

import argparse
import sys

import psycopg2

from config import DEFAULT_RESULT_LIMIT
from db.connection import init_pool, close_pool
from db.errors import QueryExecutionError
from models.filters import FilterOptions
from repositories import (
    get_all_properties,
    get_all_reservations,
    get_user_with_email,
    get_user_with_id,
)
from utils.logger import get_logger

logger = get_logger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the LightBnB database.")
    sub = parser.add_subparsers(dest="command", required=True)

    search = sub.add_parser("search", help="search properties, cheapest first")
    search.add_argument("--city", help="substring of the city name (case-sensitive)")
    search.add_argument("--owner-id", type=int)
    search.add_argument("--min-price", type=int, help="minimum price per night, whole units")
    search.add_argument("--max-price", type=int, help="maximum price per night, whole units")
    search.add_argument("--min-rating", type=int)
    search.add_argument("--limit", type=_positive_int, default=DEFAULT_RESULT_LIMIT)

    user = sub.add_parser("user", help="look up a single user")
    key = user.add_mutually_exclusive_group(required=True)
    key.add_argument("--email")
    key.add_argument("--id", type=int)

    reservations = sub.add_parser("reservations", help="list a guest's reservations")
    reservations.add_argument("guest_id", type=int)
    reservations.add_argument("--limit", type=_positive_int, default=DEFAULT_RESULT_LIMIT)

    return parser


def run(args: argparse.Namespace) -> list:
    """Dispatch a parsed command and return the resulting records."""
    if args.command == "search":
        options = FilterOptions(
            city=args.city,
            owner_id=args.owner_id,
            minimum_price_per_night=args.min_price,
            maximum_price_per_night=args.max_price,
            minimum_rating=args.min_rating,
        )
        return get_all_properties(options, args.limit)

    if args.command == "user":
        if args.email is not None:
            found = get_user_with_email(args.email)
        else:
            found = get_user_with_id(args.id)
        return [found] if found else []

    return get_all_reservations(args.guest_id, args.limit)


def main(argv=None) -> int:
    """Parse arguments, run one query and print one line per record."""
    args = build_parser().parse_args(argv)

    try:
        init_pool()
    except psycopg2.OperationalError:
        return 1

    try:
        results = run(args)
    except QueryExecutionError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1
    finally:
        close_pool()

    for record in results:
        print(record)
    if not results:
        logger.info("No results.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
