"""Command-line entry point: ``mipsstat [-u] [-i|-o|-r] [file]``."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import BinaryIO, Sequence

from .api import report_stream
from .reader import InputParseError
from .stats_types import ReportConfig, ReportMode

logger = logging.getLogger(__name__)


class _FirstModeAction(argparse.Action):
    """Store a report mode unless an earlier mode flag already chose one."""

    def __init__(self, option_strings, dest, const=None, **kwargs):
        super().__init__(option_strings, dest, nargs=0, const=const, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        current = getattr(namespace, self.dest, None)
        if current is None:
            setattr(namespace, self.dest, self.const)
        elif current != self.const:
            logger.debug(
                "Ignoring %s; %s mode already selected", option_string, current.value
            )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mipsstat",
        description="Instruction format, opcode and register statistics "
        "for hex-encoded MIPS words (one 0xXXXXXXXX per line).",
    )
    parser.add_argument(
        "file", nargs="?", help="Input file of instruction words (default: stdin)"
    )
    parser.add_argument(
        "-u",
        dest="human_readable",
        action="store_true",
        help="Print headers and register names",
    )
    parser.add_argument(
        "-i",
        dest="mode",
        action=_FirstModeAction,
        const=ReportMode.FORMATS,
        help="Instruction format statistics",
    )
    parser.add_argument(
        "-o",
        dest="mode",
        action=_FirstModeAction,
        const=ReportMode.OPCODES,
        help="Opcode statistics",
    )
    parser.add_argument(
        "-r",
        dest="mode",
        action=_FirstModeAction,
        const=ReportMode.REGISTERS,
        help="Register usage statistics",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log pipeline progress to stderr",
    )
    return parser


def parse_config(args: argparse.Namespace) -> ReportConfig:
    return ReportConfig(mode=args.mode, human_readable=args.human_readable)


def _stdin() -> BinaryIO:
    return sys.stdin.buffer


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    config = parse_config(args)
    logger.info(
        "Report mode: %s (human readable: %s)",
        config.mode.value if config.mode else "none",
        config.human_readable,
    )

    try:
        if args.file:
            with open(args.file, "rb") as f:
                output = report_stream(f, config)
        else:
            output = report_stream(_stdin(), config)
    except InputParseError as exc:
        print(f"mipsstat: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"mipsstat: error reading input: {exc}", file=sys.stderr)
        return 1

    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
