"""Pure functions for computing statistics over decoded instruction lists."""

from __future__ import annotations

import logging
from typing import Sequence

from .instruction import DecodedInstruction, IInstruction, JInstruction, RInstruction
from .stats_types import CountRow, RegisterRow, ReportMode, StatTable
from . import constants

logger = logging.getLogger(__name__)


def percentage(count: int, total: int) -> float:
    """Return count as a percentage of total; 0.0 when total is zero."""
    if total == 0:
        return 0.0
    return count / total * 100.0


def hex_label(index: int) -> str:
    return f"0x{index:X}"


def register_label(index: int, human_readable: bool = False) -> str:
    """Label for register index: ``$a0`` style when human_readable, else ``0x4``."""
    if human_readable:
        return f"${constants.REGISTER_NAMES[index]}"
    return hex_label(index)


def _unexpected(inst: object) -> TypeError:
    return TypeError(f"Unexpected decoded instruction: {type(inst).__name__}")


def count_formats(
    instructions: Sequence[DecodedInstruction], total: int | None = None
) -> list[CountRow]:
    """Count instructions per format.

    Args:
        instructions: Decoded instructions.
        total: Denominator for percentages; defaults to len(instructions).

    Returns:
        Three rows in the fixed order I-Type, J-Type, R-Type.
    """
    total = len(instructions) if total is None else total
    i_count = j_count = r_count = 0
    for inst in instructions:
        if isinstance(inst, RInstruction):
            r_count += 1
        elif isinstance(inst, IInstruction):
            i_count += 1
        elif isinstance(inst, JInstruction):
            j_count += 1
        else:
            raise _unexpected(inst)

    return [
        CountRow(constants.I_TYPE_LABEL, i_count, percentage(i_count, total)),
        CountRow(constants.J_TYPE_LABEL, j_count, percentage(j_count, total)),
        CountRow(constants.R_TYPE_LABEL, r_count, percentage(r_count, total)),
    ]


def count_opcodes(
    instructions: Sequence[DecodedInstruction], total: int | None = None
) -> list[CountRow]:
    """Count I- and J-format opcodes into a 63-slot table.

    R-format instructions are not counted. Opcode 0x3F has no slot and is
    dropped.

    Returns:
        One row per opcode 0x0..0x3E, ascending.
    """
    total = len(instructions) if total is None else total
    counts = [0] * constants.OPCODE_TABLE_SIZE
    dropped = 0
    for inst in instructions:
        if isinstance(inst, (IInstruction, JInstruction)):
            if inst.opcode < constants.OPCODE_TABLE_SIZE:
                counts[inst.opcode] += 1
            else:
                dropped += 1
        elif not isinstance(inst, RInstruction):
            raise _unexpected(inst)

    if dropped:
        logger.debug("Dropped %d instructions with opcode 0x3F", dropped)

    return [
        CountRow(hex_label(opcode), count, percentage(count, total))
        for opcode, count in enumerate(counts)
    ]


def count_registers(
    instructions: Sequence[DecodedInstruction],
    total: int | None = None,
    human_readable: bool = False,
) -> list[RegisterRow]:
    """Count register field usage, split by R- and I-format.

    R-format adds one for each of rs, rt and rd; I-format one for each of
    rs and rt. A register named twice in one instruction counts twice.
    J-format has no register fields.

    Args:
        instructions: Decoded instructions.
        total: Denominator for percentages; defaults to len(instructions).
        human_readable: Label rows with ``$name`` instead of ``0xN``.

    Returns:
        32 rows, one per register index, ascending.
    """
    total = len(instructions) if total is None else total
    r_counts = [0] * constants.REGISTER_COUNT
    i_counts = [0] * constants.REGISTER_COUNT
    for inst in instructions:
        if isinstance(inst, RInstruction):
            r_counts[inst.rs] += 1
            r_counts[inst.rt] += 1
            r_counts[inst.rd] += 1
        elif isinstance(inst, IInstruction):
            i_counts[inst.rs] += 1
            i_counts[inst.rt] += 1
        elif not isinstance(inst, JInstruction):
            raise _unexpected(inst)

    return [
        RegisterRow(
            label=register_label(idx, human_readable),
            total=r + i,
            r_count=r,
            i_count=i,
            percent=percentage(r + i, total),
        )
        for idx, (r, i) in enumerate(zip(r_counts, i_counts))
    ]


def build_table(
    mode: ReportMode,
    instructions: Sequence[DecodedInstruction],
    human_readable: bool = False,
) -> StatTable:
    """Run the aggregator for mode and wrap its rows in a StatTable."""
    total = len(instructions)
    logger.info("Aggregating %d instructions (%s)", total, mode.value)
    if mode == ReportMode.FORMATS:
        rows = count_formats(instructions, total)
    elif mode == ReportMode.OPCODES:
        rows = count_opcodes(instructions, total)
    elif mode == ReportMode.REGISTERS:
        rows = count_registers(instructions, total, human_readable)
    else:
        raise ValueError(f"Unknown report mode: {mode}")
    return StatTable(mode=mode, instruction_count=total, rows=tuple(rows))
