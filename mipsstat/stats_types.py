"""Statistics data types (pure data, no business logic)."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


class ReportMode(Enum):
    """Which statistic table to produce."""

    FORMATS = "formats"
    OPCODES = "opcodes"
    REGISTERS = "registers"


@dataclass(frozen=True)
class ReportConfig:
    """Groups report configuration parsed from the command line."""

    mode: ReportMode | None = None
    human_readable: bool = False


@dataclass(frozen=True)
class CountRow:
    label: str
    count: int
    percent: float


@dataclass(frozen=True)
class RegisterRow:
    label: str
    total: int
    r_count: int
    i_count: int
    percent: float


StatRow = Union[CountRow, RegisterRow]


@dataclass(frozen=True)
class StatTable:
    """Rows for one report, in output order."""

    mode: ReportMode
    instruction_count: int
    rows: tuple[StatRow, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.rows)
