"""Composable API functions for the instruction statistics pipeline.

Each function corresponds to a CLI workflow (-i, -o, -r) but is callable
programmatically without argparse.
"""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterable

from .decoder import decode_all
from .reader import read_words
from .report import render_table
from .stats import build_table
from .stats_types import ReportConfig, StatTable

logger = logging.getLogger(__name__)


def analyze_words(words: Iterable[int], config: ReportConfig) -> StatTable | None:
    """Decode words and aggregate them according to config.

    Words are decoded even when no mode is selected, so out-of-range
    words are still rejected.

    Args:
        words: Raw 32-bit instruction words.
        config: Report mode and label style.

    Returns:
        The statistic table, or None when config.mode is None.
    """
    instructions = decode_all(words)
    if config.mode is None:
        logger.info("No report mode selected; %d words decoded", len(instructions))
        return None
    return build_table(config.mode, instructions, config.human_readable)


def analyze_stream(stream: BinaryIO, config: ReportConfig) -> StatTable | None:
    """Read every word from stream, then analyze them."""
    return analyze_words(read_words(stream), config)


def report_words(words: Iterable[int], config: ReportConfig) -> str:
    """Analyze words and render the resulting table as text.

    Returns:
        The rendered report; an empty string when no mode is selected.
    """
    table = analyze_words(words, config)
    if table is None:
        return ""
    return render_table(table, config.human_readable)


def report_stream(stream: BinaryIO, config: ReportConfig) -> str:
    """Read every word from stream and render its report."""
    return report_words(read_words(stream), config)
