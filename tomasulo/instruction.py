"""Instructions, opcodes and the text format they are read from."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from os import PathLike


class OpCode(enum.Enum):
    """Operations the simulated machine understands."""

    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    LOAD = "LD"
    STORE = "ST"
    INVALID = "INVALID"

    @property
    def mnemonic(self) -> str:
        """The text form used when printing an instruction."""
        return _MNEMONICS.get(self, "INVALID")


_MNEMONICS = {
    OpCode.LOAD: "LD",
    OpCode.ADD: "ADD",
    OpCode.SUB: "SUB",
    OpCode.MUL: "MUL",
    OpCode.DIV: "DIV",
}

_PARSE_TABLE = {text: opcode for opcode, text in _MNEMONICS.items()}


def parse_opcode(text: str) -> OpCode:
    """Map a mnemonic to its opcode; unknown text gives ``OpCode.INVALID``."""
    return _PARSE_TABLE.get(text, OpCode.INVALID)


@dataclass
class Instruction:
    """One instruction together with the clock cycles it passed through."""

    opcode: OpCode | str
    destination: str = ""
    src1: str = ""
    src2: str = ""
    issue: int | None = field(default=None, compare=False)
    execution_start: int | None = field(default=None, compare=False)
    execution_end: int | None = field(default=None, compare=False)
    write_back: int | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.opcode, OpCode):
            self.opcode = parse_opcode(self.opcode)

    def start_execution(self, clock_cycle: int) -> bool:
        """Record the cycle execution began; False if it already began."""
        if self.execution_start is not None:
            return False
        self.execution_start = clock_cycle
        return True

    def finish_execution(self, clock_cycle: int) -> bool:
        """Record the cycle execution ended; False if it already ended."""
        if self.execution_end is not None:
            return False
        self.execution_end = clock_cycle
        return True

    def has_started(self) -> bool:
        return self.execution_start is not None

    def has_finished(self) -> bool:
        return self.execution_end is not None

    def is_executing(self) -> bool:
        return self.has_started() and not self.has_finished()

    def __str__(self) -> str:
        return f"{self.opcode.mnemonic} {self.destination} {self.src1} {self.src2}"


def parse_line(line: str) -> Instruction:
    """Build an instruction from ``OP DEST SRC1 SRC2``; missing fields are empty."""
    fields = (line.split() + ["", "", "", ""])[:4]
    operation, destination, src1, src2 = fields
    return Instruction(operation, destination, src1, src2)


def read_instructions(path: str | PathLike[str]) -> list[Instruction]:
    """Read one instruction per line from a file, skipping empty lines."""
    instructions = []
    with open(path, encoding="utf-8") as handle:
        for raw in handle:
            line = raw.rstrip("\n")
            if not line:
                continue
            instructions.append(parse_line(line))
    return instructions