"""Decoded instruction — one model per MIPS instruction format."""

from __future__ import annotations

from enum import Enum
from typing import Union

from pydantic import BaseModel, Field


class InstructionFormat(str, Enum):
    R = "R"
    I = "I"  # noqa: E741
    J = "J"


class RInstruction(BaseModel):
    """Register format: top six bits all zero."""

    kind: InstructionFormat = InstructionFormat.R
    word: int
    rs: int = Field(ge=0, le=31)
    rt: int = Field(ge=0, le=31)
    rd: int = Field(ge=0, le=31)
    shamt: int = Field(ge=0, le=31)
    funct: int = Field(ge=0, le=63)

    def __str__(self) -> str:
        return (
            f"R rs={self.rs} rt={self.rt} rd={self.rd}"
            f" shamt={self.shamt} funct={self.funct:#x}"
        )


class IInstruction(BaseModel):
    """Immediate format: opcode, two registers and an unsigned 16-bit immediate."""

    kind: InstructionFormat = InstructionFormat.I
    word: int
    opcode: int = Field(ge=0, le=63)
    rs: int = Field(ge=0, le=31)
    rt: int = Field(ge=0, le=31)
    immediate: int = Field(ge=0, le=0xFFFF)

    def __str__(self) -> str:
        return (
            f"I op={self.opcode:#x} rs={self.rs} rt={self.rt}"
            f" imm={self.immediate:#06x}"
        )


class JInstruction(BaseModel):
    """Jump format: opcode and target address."""

    kind: InstructionFormat = InstructionFormat.J
    word: int
    opcode: int = Field(ge=0, le=63)
    address: int = Field(ge=0, le=0xFFFF)

    def __str__(self) -> str:
        return f"J op={self.opcode:#x} addr={self.address:#06x}"


DecodedInstruction = Union[RInstruction, IInstruction, JInstruction]
