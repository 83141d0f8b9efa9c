"""mongo-fixtures command line.

Usage:
    mongo-fixtures load -u mongodb://localhost:27017/test -d tests/fixtures
    mongo-fixtures unload -u mongodb://localhost:27017/test
    mongo-fixtures rebuild --filter '^users'

Every option falls back to a MONGO_FIXTURES_* environment variable.
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from pymongo.errors import PyMongoError

from mongo_fixtures.config.settings import LOG_LEVELS, FixtureSettings, get_settings
from mongo_fixtures.engine import Fixtures
from mongo_fixtures.errors import FixtureError
from mongo_fixtures.logging import configure_logging, create_logger

COMMANDS = ("load", "unload", "rebuild")


def build_parser(settings: FixtureSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mongo-fixtures",
        description="Load and unload MongoDB test fixtures",
    )
    parser.add_argument("command", choices=COMMANDS, help="rebuild = unload then load")
    parser.add_argument("-u", "--uri", default=settings.uri, help="MongoDB connection string")
    parser.add_argument("-n", "--db-name", default=settings.db_name, help="database name")
    parser.add_argument("-d", "--dir", default=settings.dir, help="fixtures directory")
    parser.add_argument("-f", "--filter", default=settings.filter, help="regex on file names")
    parser.add_argument("--mute", action="store_true", default=settings.mute, help="no logging")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
    )
    parser.add_argument("--json-logs", action="store_true", default=settings.json_logs)
    return parser


async def run(fixtures: Fixtures, args: argparse.Namespace) -> None:
    async with fixtures:
        await fixtures.connect(args.uri, db_name=args.db_name)
        if args.command in ("unload", "rebuild"):
            await fixtures.unload()
        if args.command in ("load", "rebuild"):
            await fixtures.load()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser(get_settings())
    args = parser.parse_args(argv)
    if not args.uri:
        parser.error("a MongoDB URI is required (-u/--uri or MONGO_FIXTURES_URI)")

    configure_logging(level=args.log_level, json_output=args.json_logs)
    logger = create_logger("cli", mute=args.mute)

    # Bad directory or filter is a usage error, not a failed command
    try:
        fixtures = Fixtures(dir=args.dir, filter=args.filter, mute=args.mute)
    except ValueError as e:
        parser.error(str(e))

    try:
        asyncio.run(run(fixtures, args))
    except (FixtureError, PyMongoError, OSError) as e:
        logger.error("command_failed", command=args.command, error=str(e))
        return 1

    logger.info("command_done", command=args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
