#!/usr/bin/env python3
"""
Entry point for the CHUK Composer MCP Server.

Parses the command line, points the server at its output and preset
directories, then runs it over stdio or HTTP. The directories are handed to
``async_server`` through environment variables, so they must be set before
that module is imported.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

OUTPUT_DIR_ENV = "CHUK_COMPOSER_OUTPUT_DIR"
PRESETS_DIR_ENV = "CHUK_COMPOSER_PRESETS_DIR"


def directory_from_env(env_name: str, default: Path) -> Path:
    """The directory named by an environment variable, or the default."""
    value = os.environ.get(env_name)
    if value:
        return Path(value).expanduser()
    return default


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="CHUK Composer MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        help="Where generated .mid files are written (default: ./output)",
    )
    parser.add_argument(
        "--presets-dir",
        type=Path,
        help="Project preset directory, searched before the library (default: ./presets)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def apply_directories(args: argparse.Namespace) -> None:
    """Export the directory options for ``async_server`` to pick up."""
    if args.output_dir is not None:
        os.environ[OUTPUT_DIR_ENV] = str(args.output_dir.resolve())
    if args.presets_dir is not None:
        os.environ[PRESETS_DIR_ENV] = str(args.presets_dir.resolve())


def main(argv: list[str] | None = None) -> None:
    """Main entry point with transport detection."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    apply_directories(args)

    # Imported late so the directories and log level above are in effect
    from chuk_mcp_composer.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Composer MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Composer MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
