"""Entry point for the Recipes API.

Loads the recipe seed file and serves the API with Uvicorn.  The
listen address is given with ``--addr`` in ``host:port`` form; the
default comes from the ``RECIPES_ADDR`` environment variable and
falls back to ``:5000`` (all interfaces, port 5000).

Other configuration such as the seed file path (``RECIPES_FILE``) and
log level (``LOG_LEVEL``) is read from environment variables.  See
``recipes_api/app/core/config.py``.

Usage:
    python run.py
    python run.py --addr 127.0.0.1:8080
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Tuple

from uvicorn import Config, Server

from recipes_api.app.core.address import parse_addr
from recipes_api.app.core.config import settings
from recipes_api.app.core.errors import SeedFileError
from recipes_api.app.main import create_app


def addr_type(value: str) -> Tuple[str, int]:
    try:
        return parse_addr(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Serve the Recipes API.")
    ap.add_argument(
        "--addr",
        type=addr_type,
        default=settings.addr,
        help="HTTP network address (default: %(default)s)",
    )
    return ap.parse_args(argv)


async def serve(app, host: str, port: int) -> None:
    """Run the API with Uvicorn until it is stopped.

    Uvicorn's access log is off; the app's middleware logs each request.
    """
    config = Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        log_level=settings.log_level.lower(),
        access_log=False,
    )
    server = Server(config)
    await server.serve()


def main(argv: Optional[List[str]] = None) -> None:
    # A string default is converted by ``addr_type`` too, so this is
    # always a (host, port) pair.
    host, port = parse_args(argv).addr
    try:
        app = create_app()
    except SeedFileError as e:
        logging.getLogger(__name__).critical("%s", e)
        sys.exit(1)
    asyncio.run(serve(app, host, port))


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
