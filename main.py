"""
Main entry point for the Kdenlive filtergraph converter.
Extracts color grading filters from a project and bakes them into
filtergraph properties of its producers.
"""

import argparse
import os
import sys

from colorgrade import __version__
from colorgrade.constants import (
    DEFAULT_CONVERSION_TEMPLATE,
    ENV_APPEND_FILTER,
    ENV_CONVERSION_TEMPLATE,
)
from colorgrade.pipeline import convert_project, generate_conversion_commands


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command line parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="kdenlive-filter-converter",
        description=(
            "Convert Kdenlive color grading filters into filtergraph "
            "properties of the clips they are applied to."
        ),
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "input", help="Kdenlive input file (filters are extracted from here)"
    )
    parser.add_argument("output", help="Output file")
    parser.add_argument(
        "-i",
        "--insert-into",
        default=None,
        help=(
            "Optional file where the filtergraph strings are inserted "
            "(if not set the input file is used)"
        ),
    )
    parser.add_argument(
        "-d",
        "--delete-existing-filtergraph",
        action="store_true",
        default=False,
        help="Delete existing filtergraph properties from all producers",
    )
    parser.add_argument(
        "-a",
        "--append-filter",
        default=os.getenv(ENV_APPEND_FILTER) or None,
        help=f"Filter appended to every filtergraph (default: ${ENV_APPEND_FILTER})",
    )
    parser.add_argument(
        "--print-commands",
        action="store_true",
        default=False,
        help="Print an ffmpeg conversion command for every graded media file",
    )
    parser.add_argument(
        "--encoder",
        default="",
        help="Video encoder used in the printed conversion commands",
    )
    return parser


def run(argv: list[str] | None = None) -> int:
    """
    Run the converter.

    Args:
        argv: Command line arguments, defaults to sys.argv[1:]

    Returns:
        Process exit code
    """
    args = build_parser().parse_args(argv)

    try:
        filter_strings = convert_project(
            args.input,
            args.output,
            insert_into=args.insert_into,
            delete_existing=args.delete_existing_filtergraph,
            append_filter=args.append_filter,
        )
    except KeyboardInterrupt:
        print("\n\nConversion cancelled by user.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Fatal error: {str(e)}", file=sys.stderr)
        return 1

    if args.print_commands:
        template = os.getenv(ENV_CONVERSION_TEMPLATE) or DEFAULT_CONVERSION_TEMPLATE
        for command in generate_conversion_commands(
            filter_strings,
            template=template,
            encoder=args.encoder,
            append_filter=args.append_filter,
        ):
            print(command)

    return 0


def main() -> None:
    """Main entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
