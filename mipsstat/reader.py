"""Line reader — turns ``0xXXXXXXXX`` lines into 32-bit words."""

from __future__ import annotations

import logging
from typing import BinaryIO

from . import constants

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class InputParseError(ValueError):
    """Raised when a well-sized input line does not hold valid hex digits."""

    def __init__(self, line_number: int, text: str):
        self.line_number = line_number
        self.text = text
        super().__init__(f"Could not parse digits on line {line_number}: {text!r}")


def parse_line(line: bytes, line_number: int = 1) -> int:
    """Parse one 11-byte line (prefix, 8 digits, terminator) to a word.

    The two-byte prefix is sliced off without being checked.

    Raises:
        InputParseError: If the eight middle bytes are not ASCII hex digits.
    """
    raw = line[
        constants.HEX_PREFIX_LENGTH : constants.HEX_PREFIX_LENGTH
        + constants.HEX_DIGIT_COUNT
    ]
    try:
        digits = raw.decode("ascii")
    except UnicodeDecodeError as exc:
        raise InputParseError(
            line_number, raw.decode("utf-8", errors="replace")
        ) from exc
    # int() would also accept "+", "_" and surrounding whitespace
    if len(digits) != constants.HEX_DIGIT_COUNT or not set(digits) <= _HEX_DIGITS:
        raise InputParseError(line_number, digits)
    return int(digits, 16)


def read_words(stream: BinaryIO) -> list[int]:
    """Read instruction words until the first line that is not 11 bytes.

    Lines are split on ``\\n`` only. EOF, blank lines, and short or long
    lines all end input quietly. Read errors from the stream propagate.

    Args:
        stream: A binary stream (a file opened with ``"rb"`` or
            ``sys.stdin.buffer``).

    Returns:
        The words read so far, in input order (possibly empty).
    """
    words: list[int] = []
    line_number = 0
    while True:
        line = stream.readline()
        line_number += 1
        if len(line) != constants.INPUT_LINE_LENGTH:
            if line:
                logger.info(
                    "Stopping at line %d (%d bytes)", line_number, len(line)
                )
            break
        words.append(parse_line(line, line_number))
    logger.info("Read %d instruction words", len(words))
    return words
