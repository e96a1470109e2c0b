"""Architectural registers and the renaming pass over a program."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .instruction import Instruction


@dataclass
class Register:
    """A register: the name of whatever currently produces it, and its value."""

    name: str = ""
    value: int | None = None


def _is_register(operand: str) -> bool:
    return operand.startswith("R")


def rename_registers(instructions: Iterable[Instruction]) -> dict[str, Register]:
    """Rename repeated destinations in place and return the register file.

    A destination written a second time is given a fresh name ``R100``,
    ``R101`` and so on; later sources are rewritten to the current name.
    Raises ValueError if an instruction has no destination.
    """
    registers: dict[str, Register] = {}
    result: dict[str, Register] = {}
    next_number = 100

    for instruction in instructions:
        destination = instruction.destination
        if not destination:
            raise ValueError(f"instruction without destination: {instruction}")

        if destination in registers:
            result[destination] = registers[destination]
            new_name = f"R{next_number}"
            registers[destination] = Register(new_name)
            instruction.destination = new_name
            next_number += 1
        else:
            registers[destination] = Register(destination)

        for attribute in ("src1", "src2"):
            source = getattr(instruction, attribute)
            if not _is_register(source):
                continue
            if source in registers:
                setattr(instruction, attribute, registers[source].name)
            else:
                registers[destination] = Register(destination)

    for register in registers.values():
        result[register.name] = register

    return result