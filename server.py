"""Unusual Whales MCP - market data tools for options flow, darkpool and more."""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastmcp import FastMCP

from config import Settings, StartupConfigError
from tools import registry
from tools.catalog import build_catalog
from tools.dispatcher import Dispatcher
from uw_client import UnusualWhalesClient

SERVER_NAME = "unusualwhales-mcp"
SERVER_VERSION = "0.2.0"

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Unusual Whales market data API. Every tool is a read-only GET against one "
    "endpoint and returns the raw JSON response. Per-ticker tools (get_stock_*, "
    "get_etf_*, get_shorts_*, get_darkpool_ticker) take a 'ticker' argument. "
    "For market-wide options activity start with get_option_trades_flow_alerts, "
    "get_market_tide or get_darkpool_recent. Errors from the data source come back "
    "as tool errors with the HTTP status and message."
)


def create_server(settings: Settings) -> FastMCP:
    """Build the FastMCP server with every catalog tool registered."""
    client = UnusualWhalesClient(settings)
    dispatcher = Dispatcher(build_catalog(), client)

    @asynccontextmanager
    async def lifespan(server):
        """Manage client lifecycle."""
        yield
        await client.close()

    mcp = FastMCP(SERVER_NAME, version=SERVER_VERSION, instructions=INSTRUCTIONS, lifespan=lifespan)
    registry.register(mcp, dispatcher)
    logger.debug("Registered %d tools against %s", len(dispatcher.catalog), settings.base_url)
    return mcp


def configure_logging(level: str) -> None:
    # stdout carries the stdio transport; logs must stay on stderr.
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the Unusual Whales MCP server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "sse", "http"],
        default="stdio",
        help="Transport protocol for the server",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Host/address to bind to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind to")
    parser.add_argument("--path", default=None, help="HTTP path for the endpoint")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_dotenv(override=False)
    args = parse_arguments(argv)

    try:
        settings = Settings.from_env()
    except StartupConfigError as e:
        configure_logging("INFO")
        logger.error("Unable to start server: %s", e)
        raise SystemExit(1) from e

    configure_logging(settings.log_level)
    mcp = create_server(settings)

    kwargs = {}
    if args.transport != "stdio":
        kwargs["host"] = args.host
        kwargs["port"] = args.port
        if args.path:
            kwargs["path"] = args.path

    logger.info("%s %s running on %s", SERVER_NAME, SERVER_VERSION, args.transport)
    mcp.run(transport=args.transport, **kwargs)


if __name__ == "__main__":
    main()
