"""MIPS instruction statistics package."""

from .decoder import decode  # noqa: F401
from .api import (  # noqa: F401
    analyze_words,
    analyze_stream,
    report_words,
    report_stream,
)
