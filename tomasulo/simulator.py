"""Cycle-by-cycle simulation of a program and the command that runs it."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Mapping, Sequence

from .buffers import Buffer, LoadBuffer, ReservationStation
from .bus import CommonDataBus
from .instruction import Instruction, OpCode, parse_line
from .register import Register, rename_registers

_UNIT_COUNT = 2
_ARITHMETIC = frozenset({OpCode.ADD, OpCode.SUB, OpCode.MUL, OpCode.DIV})


def has_busy_buffer(buffers: Iterable[Buffer]) -> bool:
    """True if any buffer still holds an instruction."""
    return any(not buffer.available for buffer in buffers)


def find_empty_buffer(buffers: Iterable[Buffer]) -> Buffer | None:
    """The first free buffer, or None if all are busy."""
    return next((buffer for buffer in buffers if buffer.available), None)


def assign_buffer(
    load_buffers: Sequence[Buffer],
    reservation_stations: Sequence[Buffer],
    instruction: Instruction,
    registers: Mapping[str, Register],
    clock_cycle: int,
) -> bool:
    """Issue an instruction to the unit that handles its opcode; False if it cannot."""
    if instruction.opcode is OpCode.LOAD:
        return assign_to(load_buffers, instruction, registers, clock_cycle)
    if instruction.opcode in _ARITHMETIC:
        return assign_to(reservation_stations, instruction, registers, clock_cycle)
    return False


def _resolve(operand: str, registers: Mapping[str, Register]) -> tuple[str, int | None]:
    if not operand.startswith("R"):
        return operand, int(operand)
    register = registers[operand]
    if register.name:
        return register.name, None
    return operand, register.value


def assign_to(
    buffers: Sequence[Buffer],
    instruction: Instruction,
    registers: Mapping[str, Register],
    clock_cycle: int,
) -> bool:
    """Issue an instruction to the first free buffer and point its destination at it."""
    buffer = find_empty_buffer(buffers)
    if buffer is None:
        return False

    # Both operands are taken from the first source field.
    tag_src1, value_src1 = _resolve(instruction.src1, registers)
    tag_src2, value_src2 = _resolve(instruction.src1, registers)

    success = buffer.issue(
        instruction, tag_src1, value_src1, tag_src2, value_src2, clock_cycle
    )
    registers[instruction.destination].name = buffer.name
    return success


def simulate(instructions: Iterable[Instruction]) -> dict[str, Register]:
    """Rename and run a program to completion, returning the register file.

    The instructions are renamed in place and get their issue and execution
    cycles recorded. Raises ValueError for an opcode no unit can execute.
    """
    program = list(instructions)
    for instruction in program:
        if instruction.opcode is not OpCode.LOAD and instruction.opcode not in _ARITHMETIC:
            raise ValueError(f"no unit can execute: {instruction}")

    registers = rename_registers(program)
    queue = deque(program)

    load_buffers = [LoadBuffer(i) for i in range(_UNIT_COUNT)]
    reservation_stations = [ReservationStation(i) for i in range(_UNIT_COUNT)]
    buses = [CommonDataBus() for _ in range(_UNIT_COUNT)]

    clock_cycle = 0
    while True:
        for bus in reversed(buses):
            bus.execute(load_buffers, reservation_stations, registers, clock_cycle)

        if queue and assign_buffer(
            load_buffers, reservation_stations, queue[0], registers, clock_cycle
        ):
            queue.popleft()

        busy = has_busy_buffer(load_buffers) or has_busy_buffer(reservation_stations)
        clock_cycle += 1
        if not busy and not queue:
            return registers


def main(argv: Sequence[str] | None = None) -> int:
    """Run each argument as one instruction line and print the final registers."""
    arguments = sys.argv[1:] if argv is None else list(argv)

    instructions = []
    for argument in arguments:
        instruction = parse_line(argument)
        instructions.append(instruction)
        print(instruction)

    if not instructions:
        return 1

    try:
        registers = simulate(instructions)
    except (ValueError, KeyError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1

    for instruction in instructions:
        print(instruction)

    for name, register in registers.items():
        value = -1 if register.value is None else register.value
        print(f"{name} {value}")

    return 0