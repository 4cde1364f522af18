"""Command Line — solve a packet corpus from a file or stdin, or serve the API.

Invariants:
    - stdout carries only answers (and the sorted corpus with --sorted)
    - Malformed input: message on stderr, exit 1, no partial answers
    - No command: help on stdout, exit 0

Usage:
    distress solve input.txt
    distress solve - < input.txt
    distress solve input.txt --sorted
    distress serve --port 8000
"""

import argparse
import logging
import sys
from pathlib import Path

from distress import __version__
from distress.config import get_settings
from distress.core.errors import MalformedInputError
from distress.core.packet import format_packet
from distress.infrastructure.observability import setup_logging
from distress.services.solve_puzzle import load_packets, solve_corpus, sort_corpus

logger = logging.getLogger(__name__)


def _read_input(path: str) -> tuple[str, str]:
    """Return (text, source label) for a path or '-' (stdin)."""
    if path == "-":
        return sys.stdin.read(), "<stdin>"
    return Path(path).read_text(encoding="utf-8"), path


def cmd_solve(args) -> int:
    """Print part 1 and part 2 for the input."""
    try:
        text, source = _read_input(args.input)
    except UnicodeDecodeError as exc:
        print(
            f"error: cannot decode {args.input}: "
            f"{exc.reason} at byte {exc.start}",
            file=sys.stderr,
        )
        return 1
    except OSError as exc:
        print(f"error: cannot read {args.input}: {exc.strerror}", file=sys.stderr)
        return 1

    try:
        packets = load_packets(text, source=source)
        answer = solve_corpus(packets, source=source)
    except MalformedInputError as exc:
        logger.debug(
            "Rejected malformed input",
            extra={
                "error_code": exc.code,
                "source": source,
                "line_number": exc.context.line_number,
                "column": exc.context.column,
            },
        )
        print(f"error: {source}: {exc.message}", file=sys.stderr)
        return 1

    print(f"Part 1: {answer.part1}")
    print(f"Part 2: {answer.part2}")
    if args.sorted:
        print()
        for packet in sort_corpus(packets):
            print(format_packet(packet))
    return 0


def cmd_serve(args) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "distress.main:app",
        host=args.host or settings.api_host,
        port=args.port or settings.api_port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="distress",
        description="Distress Signal - rank nested-list packets",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", dest="log_level", help="Override LOG_LEVEL")
    parser.add_argument(
        "--log-format", dest="log_format", choices=["text", "json"],
        help="Override LOG_FORMAT",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    parser_solve = subparsers.add_parser("solve", help="Print part 1 and part 2 answers")
    parser_solve.add_argument(
        "input", nargs="?", default="-",
        help="Input file (default: '-' reads stdin)",
    )
    parser_solve.add_argument(
        "--sorted", action="store_true",
        help="Also print every packet, dividers included, in sorted order",
    )
    parser_solve.set_defaults(func=cmd_solve)

    parser_serve = subparsers.add_parser("serve", help="Start the HTTP API")
    parser_serve.add_argument("--host", help="Bind address (default: API_HOST)")
    parser_serve.add_argument("--port", type=int, help="Bind port (default: API_PORT)")
    parser_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(
        args.log_level or settings.log_level,
        args.log_format or settings.log_format,
    )

    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("Operation cancelled by user", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
