#!/usr/bin/env python3
"""
Database migration script.

Applies or reverts the schema migrations of the relational backend.
The database URL comes from ``--url`` or from the ``db`` section of the
configuration, which must then select PostgreSQL.
"""

import argparse
import logging
import sys
from typing import List, Optional

from qna.common.exceptions import ConfigurationError
from qna.config import PostgresDatabaseConfig, load_config
from qna.database.init_db import downgrade_migrations, run_migrations

logger = logging.getLogger("qna.scripts.migrate")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Manage the question database schema")
    parser.add_argument("-c", "--config", action="append", default=None,
                        help="Config file or glob pattern; may be repeated")
    parser.add_argument("--url", help="Database URL, instead of the configured one")
    subparsers = parser.add_subparsers(dest="command", required=True)

    upgrade = subparsers.add_parser("upgrade", help="Apply migrations")
    upgrade.add_argument("revision", nargs="?", default="head")

    downgrade = subparsers.add_parser("downgrade", help="Revert migrations")
    downgrade.add_argument("revision")

    return parser.parse_args(argv)


def resolve_database_url(args: argparse.Namespace) -> str:
    if args.url:
        return args.url
    config = load_config(args.config)
    if not isinstance(config.db, PostgresDatabaseConfig):
        raise ConfigurationError("the configured database is not relational", "db.kind")
    return config.db.url


def main(argv: Optional[List[str]] = None) -> None:
    """Run the migration command."""
    args = parse_args(argv)

    try:
        database_url = resolve_database_url(args)
        if args.command == "upgrade":
            run_migrations(database_url, args.revision)
        else:
            downgrade_migrations(database_url, args.revision)
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(2)
    except Exception as e:
        logger.error(f"Migration failed: {e}")
        sys.exit(1)

    logger.info("Migrations finished")


if __name__ == "__main__":
    main()
