#!/usr/bin/env python3
"""
Entry point for the CHUK Pitch-Class Set MCP Server.

The server speaks MCP over stdio only.
"""

import argparse
import asyncio
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="CHUK Pitch-Class Set MCP Server")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Import after argument parsing to avoid issues
    from chuk_mcp_pcset.async_server import mcp

    logger.info("Starting CHUK Pitch-Class Set MCP Server (stdio)")
    asyncio.run(mcp.run_stdio())


if __name__ == "__main__":
    main()
