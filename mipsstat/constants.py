"""Named constants — bit masks, table sizes and report labels."""

from __future__ import annotations

WORD_MASK = 0xFFFFFFFF

# Format detection
TOP6_MASK = 0xFC000000
JUMP_BIT_MASK = 0x08000000
JUMP_PAIR_MASK = 0x0C000000

# Field shifts / widths
OPCODE_SHIFT = 26
RS_SHIFT = 21
RT_SHIFT = 16
RD_SHIFT = 11
SHAMT_SHIFT = 6

REG_FIELD_MASK = 0x1F
FUNCT_MASK = 0x3F
OPCODE_MASK = 0x3F
IMMEDIATE_MASK = 0xFFFF
# The jump target keeps only the low 16 bits, not the architectural 26.
JUMP_ADDRESS_MASK = 0xFFFF
JUMP_TARGET_MASK = 0x3FFFFFF

# Aggregation tables
OPCODE_TABLE_SIZE = 0x3F
REGISTER_COUNT = 32

REGISTER_NAMES: tuple[str, ...] = (
    "zero",
    "at",
    "v0",
    "v1",
    "a0",
    "a1",
    "a2",
    "a3",
    "t0",
    "t1",
    "t2",
    "t3",
    "t4",
    "t5",
    "t6",
    "t7",
    "s0",
    "s1",
    "s2",
    "s3",
    "s4",
    "s5",
    "s6",
    "s7",
    "t8",
    "t9",
    "k0",
    "k1",
    "gp",
    "fp",
    "sp",
    "ra",
)

# Input lines: "0x" + 8 hex digits + terminator
INPUT_LINE_LENGTH = 11
HEX_PREFIX_LENGTH = 2
HEX_DIGIT_COUNT = 8

# Report layout
COLUMN_WIDTH = 10

FORMAT_HEADERS: tuple[str, ...] = ("TYPE", "COUNT", "PERCENT")
OPCODE_HEADERS: tuple[str, ...] = ("OPCODE", "COUNT", "PERCENT")
REGISTER_HEADERS: tuple[str, ...] = ("REG", "USE", "R-TYPE", "I-TYPE", "PERCENT")

I_TYPE_LABEL = "I-Type"
J_TYPE_LABEL = "J-Type"
R_TYPE_LABEL = "R-Type"
