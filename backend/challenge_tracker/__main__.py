"""
Command line entry point.

Usage:
    python -m challenge_tracker serve [--reload]
    python -m challenge_tracker init-db
    python -m challenge_tracker days-needed --stake 10 --target 5000 --odds 1.3
"""

import argparse
import asyncio
import logging
import sys
from decimal import Decimal

from dotenv import load_dotenv

from challenge_tracker.config import get_settings
from challenge_tracker.engine import (
    InvalidInputError,
    days_needed,
    odds_to_scaled,
    to_cents,
)
from challenge_tracker.observability import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "challenge_tracker.main:create_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


async def _init_db() -> None:
    from challenge_tracker.database import create_engine_from_settings, get_db_info, init_models

    settings = get_settings()
    engine = create_engine_from_settings(settings)
    try:
        await init_models(engine)
    finally:
        await engine.dispose()
    logger.info(f"Database tables created: {get_db_info(settings)['url']}")


def cmd_init_db(args: argparse.Namespace) -> int:
    asyncio.run(_init_db())
    return 0


def cmd_days_needed(args: argparse.Namespace) -> int:
    try:
        days = days_needed(to_cents(args.stake), to_cents(args.target), odds_to_scaled(args.odds))
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"{days} consecutive wins at {args.odds} take {args.stake} to {args.target}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="challenge_tracker",
        description="Betting challenge tracker",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    serve.set_defaults(func=cmd_serve)

    init_db = subparsers.add_parser("init-db", help="Create database tables")
    init_db.set_defaults(func=cmd_init_db)

    calc = subparsers.add_parser("days-needed", help="Wins needed to reach a target")
    calc.add_argument("--stake", type=Decimal, required=True)
    calc.add_argument("--target", type=Decimal, required=True)
    calc.add_argument("--odds", type=Decimal, required=True)
    calc.set_defaults(func=cmd_days_needed)

    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)
    configure_logging(get_settings().log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
