#!/usr/bin/env python3
"""Development server for the holidex query API.

Jurisdiction modules are discovered by the app's lifespan hook, so the
server starts with every bundled rule set registered.
"""

import argparse
import logging

import uvicorn


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the holidex holiday API")
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to listen on")
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload on code changes")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for holidex and uvicorn",
    )
    return parser.parse_args()


def configure_logging(level: str) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.addHandler(handler)


def run() -> None:
    args = parse_args()
    configure_logging(args.log_level)
    uvicorn.run(
        "holidex.api:app",
        host=args.host,
        port=args.port,
        reload=not args.no_reload,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    run()
