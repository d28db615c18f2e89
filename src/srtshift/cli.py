"""Command-line interface for shifting and splitting SRT files."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from srtshift import __version__
from srtshift.core import SRTParseError, parse_offset
from srtshift.formats import load_srt, save_srt
from srtshift.utils import get_settings, setup_logging

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = structlog.get_logger()


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="srtshift",
        description="Shift SubRip subtitle timings and optionally split each "
        "subtitle's text into a second, separated file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
examples:
  srtshift input.srt output.srt 1500
  srtshift input.srt output.srt -750
  srtshift input.srt output.srt "00:00:01,000 --> 00:00:03,500"
  srtshift input.srt left.srt 0 right.srt
""",
    )
    parser.add_argument("input", help="Source .srt file")
    parser.add_argument("output", help="Destination .srt file")
    parser.add_argument(
        "shift",
        help="Shift in milliseconds, or a duration "
        "'HH:MM:SS,mmm --> HH:MM:SS,mmm' whose length is the shift",
    )
    parser.add_argument(
        "separated",
        nargs="?",
        help="If given, split each subtitle's text: the first half goes to "
        "OUTPUT, the second half to this file",
    )
    parser.add_argument("--encoding", help="Text encoding of input and output files")

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors"
    )
    output_group.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _log_level(args: argparse.Namespace, default: str) -> str:
    if args.verbose:
        return "DEBUG"
    if args.quiet:
        return "WARNING"
    return default


def run(argv: Sequence[str] | None = None) -> int:
    """Run the shift/split workflow.

    Args:
        argv: Command-line arguments, defaults to sys.argv[1:]

    Returns:
        Process exit code: 0 on success, 1 on failure, 130 if interrupted
    """
    args = create_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(_log_level(args, settings.log_level), json=settings.log_json)
    encoding = args.encoding or settings.encoding

    try:
        offset_ms = parse_offset(args.shift)
    except SRTParseError as e:
        logger.error("invalid_offset", shift=args.shift, error=str(e))
        return 1
    logger.info("offset_resolved", milliseconds=offset_ms)

    try:
        subtitle = load_srt(Path(args.input), encoding=encoding)
        shifted = subtitle.offset(offset_ms)

        if args.separated:
            logger.info("separated_file", path=args.separated)
            shifted, separated = shifted.split()
            save_srt(Path(args.separated), separated, encoding=encoding)

        save_srt(Path(args.output), shifted, encoding=encoding)
    except (OSError, UnicodeError) as e:
        logger.error("io_failed", error=str(e))
        return 1
    except KeyboardInterrupt:
        logger.warning("interrupted")
        return 130

    logger.info("completed", subtitles=len(shifted))
    return 0


def main() -> None:
    """Console script entry point."""
    sys.exit(run())


if __name__ == "__main__":
    main()
