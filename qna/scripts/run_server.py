#!/usr/bin/env python3
"""
Server runner script.

This script loads the configuration and starts the FastAPI server with
uvicorn.
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

import uvicorn

from qna import __version__
from qna.common.exceptions import ConfigurationError
from qna.main import create_app, setup_logging
from qna.config import load_config

logger = logging.getLogger("qna.scripts.run_server")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the question service")
    parser.add_argument(
        "-c", "--config",
        action="append",
        default=None,
        help="Config file or glob pattern; may be repeated, later files win",
    )
    parser.add_argument("--host", help="Override the bind address")
    parser.add_argument("--port", type=int, help="Override the port")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("config", help="Print the resolved configuration and exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    """Run the server, or print its configuration."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        logging.getLogger("qna").error(str(e))
        sys.exit(1)

    if args.command == "config":
        print(json.dumps(config.model_dump(mode="json"), indent=2))
        return

    setup_logging(config.log)
    host = args.host or config.server.host
    port = args.port or config.server.port

    logger.info(f"Starting server on {host}:{port}")
    try:
        uvicorn.run(
            create_app(config),
            host=host,
            port=port,
            log_level=config.log.level.lower(),
        )
    except Exception as e:
        logger.error(f"Error starting server: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
