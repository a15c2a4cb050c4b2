"""Instruction decoder — classify a 32-bit word and slice out its fields."""

from __future__ import annotations

import logging
from typing import Iterable

from .instruction import DecodedInstruction, IInstruction, JInstruction, RInstruction
from . import constants

logger = logging.getLogger(__name__)


def is_r_format(word: int) -> bool:
    """True when the top six bits are all zero."""
    return (word & constants.TOP6_MASK) == 0


def is_jump(word: int) -> bool:
    """Jump predicate over bits 27 and 26.

    Note that this tests the literal masks rather than opcodes 2 and 3: any
    word with bit 27 set is treated as a jump.
    """
    return (word & constants.JUMP_BIT_MASK) == constants.JUMP_BIT_MASK or (
        word & constants.JUMP_PAIR_MASK
    ) == constants.JUMP_PAIR_MASK


def decode(word: int) -> DecodedInstruction:
    """Decode a raw 32-bit word into an R, I or J instruction.

    The R-format check runs first, then the jump predicate; everything
    else is I-format. Every 32-bit value decodes.

    Args:
        word: An unsigned 32-bit instruction word.

    Returns:
        One of RInstruction, IInstruction or JInstruction.

    Raises:
        ValueError: If word does not fit in 32 unsigned bits.
    """
    if word < 0 or word > constants.WORD_MASK:
        raise ValueError(f"Instruction word out of 32-bit range: {word:#x}")

    if is_r_format(word):
        return RInstruction(
            word=word,
            rs=(word >> constants.RS_SHIFT) & constants.REG_FIELD_MASK,
            rt=(word >> constants.RT_SHIFT) & constants.REG_FIELD_MASK,
            rd=(word >> constants.RD_SHIFT) & constants.REG_FIELD_MASK,
            shamt=(word >> constants.SHAMT_SHIFT) & constants.REG_FIELD_MASK,
            funct=word & constants.FUNCT_MASK,
        )
    if is_jump(word):
        return JInstruction(
            word=word,
            opcode=word >> constants.OPCODE_SHIFT,
            address=word & constants.JUMP_ADDRESS_MASK,
        )
    return IInstruction(
        word=word,
        opcode=word >> constants.OPCODE_SHIFT,
        rs=(word >> constants.RS_SHIFT) & constants.REG_FIELD_MASK,
        rt=(word >> constants.RT_SHIFT) & constants.REG_FIELD_MASK,
        immediate=word & constants.IMMEDIATE_MASK,
    )


def decode_all(words: Iterable[int]) -> list[DecodedInstruction]:
    """Decode every word, preserving input order."""
    instructions = []
    for word in words:
        inst = decode(word)
        logger.debug("%#010x: %s", word, inst)
        instructions.append(inst)
    logger.debug("Decoded %d instruction words", len(instructions))
    return instructions


# ── Word builders ────────────────────────────────────────────────


def encode_r(rs: int, rt: int, rd: int, shamt: int, funct: int) -> int:
    """Build an R-format word (opcode 0) from its fields."""
    return (
        ((rs & constants.REG_FIELD_MASK) << constants.RS_SHIFT)
        | ((rt & constants.REG_FIELD_MASK) << constants.RT_SHIFT)
        | ((rd & constants.REG_FIELD_MASK) << constants.RD_SHIFT)
        | ((shamt & constants.REG_FIELD_MASK) << constants.SHAMT_SHIFT)
        | (funct & constants.FUNCT_MASK)
    )


def encode_i(opcode: int, rs: int, rt: int, immediate: int) -> int:
    """Build an I-format word; the immediate is truncated to 16 bits."""
    return (
        ((opcode & constants.OPCODE_MASK) << constants.OPCODE_SHIFT)
        | ((rs & constants.REG_FIELD_MASK) << constants.RS_SHIFT)
        | ((rt & constants.REG_FIELD_MASK) << constants.RT_SHIFT)
        | (immediate & constants.IMMEDIATE_MASK)
    )


def encode_j(opcode: int, address: int) -> int:
    """Build a J-format word from an opcode and a 26-bit target."""
    return ((opcode & constants.OPCODE_MASK) << constants.OPCODE_SHIFT) | (
        address & constants.JUMP_TARGET_MASK
    )
