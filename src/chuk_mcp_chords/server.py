#!/usr/bin/env python3
"""
Entry point for the CHUK Chords MCP Server.

Runs the MCP server over stdio or http. With --transpose it instead
renders a single chart file in another key (or as Nashville numbers)
and prints it, without starting a server:

    chuk-mcp-chords --transpose song.txt --from G --to A
    chuk-mcp-chords --transpose - --from D --nashville < song.txt
"""

import argparse
import asyncio
import logging
import sys

from chuk_mcp_chords.chart.transposer import get_transposed_content
from chuk_mcp_chords.core.scale import ALL_KEYS

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

KEY_CHOICES = [key.value for key in ALL_KEYS]


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-chords",
        description="CHUK Chords MCP Server: chord chart transposition tools",
    )

    server = parser.add_argument_group("server")
    server.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    server.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )

    chart = parser.add_argument_group("one-off transposition")
    chart.add_argument(
        "--transpose",
        metavar="FILE",
        help="Print FILE ('-' for stdin) transposed and exit instead of serving",
    )
    chart.add_argument(
        "--from",
        dest="original_key",
        choices=KEY_CHOICES,
        default="C",
        metavar="KEY",
        help="Key the chart is written in (default: C)",
    )
    chart.add_argument(
        "--to",
        dest="target_key",
        choices=KEY_CHOICES,
        metavar="KEY",
        help="Key to transpose to (default: the --from key)",
    )
    chart.add_argument(
        "--nashville",
        action="store_true",
        help="Print chords as Nashville numbers relative to the --from key",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging for the chord engine and tools",
    )
    return parser


def _read_chart(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    # newline="" keeps \r\n and \r breaks as written
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def transpose_file(args: argparse.Namespace) -> None:
    """Print the chart named by --transpose in the requested key."""
    content = _read_chart(args.transpose)
    target = args.target_key or args.original_key
    logger.debug(f"Transposing {args.transpose}: {args.original_key} -> {target}")
    sys.stdout.write(get_transposed_content(content, args.original_key, target, args.nashville))


def main(argv: list[str] | None = None) -> None:
    """Main entry point: serve MCP tools, or transpose one chart file."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger("chuk_mcp_chords").setLevel(logging.DEBUG)

    if args.transpose is not None:
        try:
            transpose_file(args)
        except OSError as e:
            parser.error(f"cannot read {args.transpose}: {e.strerror}")
        return

    # Import after argument parsing so --transpose never builds the server
    from chuk_mcp_chords.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Chords MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Chords MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
