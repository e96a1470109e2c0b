"""Load buffers and reservation stations that hold issued instructions."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .instruction import Instruction, OpCode

_REQUIRED_CYCLES = {
    OpCode.ADD: 2,
    OpCode.SUB: 2,
    OpCode.MUL: 10,
    OpCode.DIV: 40,
}
_INVALID_CYCLES = 41


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


_OPERATIONS = {
    OpCode.ADD: lambda a, b: a + b,
    OpCode.SUB: lambda a, b: a - b,
    OpCode.MUL: lambda a, b: a * b,
    OpCode.DIV: _truncating_div,
}


class Buffer(ABC):
    """A slot that holds one issued instruction until its result is ready.

    Operand values of ``None`` mean the value is still pending on the tag.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.available = True
        self.instruction: Instruction | None = None
        self._passed_cycles = 0

    @abstractmethod
    def issue(self, instruction, tag_src1, value_src1, tag_src2, value_src2, issue_cycle) -> bool:
        """Take an instruction; False if the slot is busy."""

    @abstractmethod
    def capture(self, tag, value, clock_cycle) -> bool:
        """Take a broadcast value for a pending operand; True if execution starts."""

    @abstractmethod
    def advance(self, clock_cycle) -> tuple[str, int] | None:
        """Run one cycle; return ``(name, result)`` once the result is ready."""

    def _tick(self, clock_cycle: int, required: int) -> bool:
        instruction = self.instruction
        if (
            self.available
            or instruction is None
            or not instruction.is_executing()
            or instruction.execution_start == clock_cycle
        ):
            return False
        self._passed_cycles += 1
        if self._passed_cycles < required:
            return False
        self.available = True
        return True

    def _waiting(self) -> bool:
        instruction = self.instruction
        return (
            not self.available
            and instruction is not None
            and not instruction.is_executing()
            and not instruction.has_finished()
        )


class LoadBuffer(Buffer):
    """Holds a load; the result is ready two cycles after execution starts."""

    REQUIRED_CYCLES = 2

    def __init__(self, buffer_id: int) -> None:
        super().__init__(f"LD{buffer_id}")
        self.tag = ""
        self.value: int | None = None

    def issue(self, instruction, tag_src1, value_src1, tag_src2=None, value_src2=None, issue_cycle=0) -> bool:
        if not self.available:
            return False
        self.tag = tag_src1
        self.value = value_src1
        self.instruction = instruction
        instruction.issue = issue_cycle
        if value_src1 is not None:
            instruction.start_execution(issue_cycle)
        self._passed_cycles = 0
        self.available = False
        return True

    def capture(self, tag, value, clock_cycle) -> bool:
        if not self._waiting() or self.tag != tag:
            return False
        self.value = value
        self.instruction.start_execution(clock_cycle)
        return True

    def advance(self, clock_cycle) -> tuple[str, int] | None:
        if not self._tick(clock_cycle, self.REQUIRED_CYCLES):
            return None
        return self.name, self.value


class ReservationStation(Buffer):
    """Holds an arithmetic instruction until both operands are known and it completes."""

    def __init__(self, station_id: int) -> None:
        super().__init__("")
        self.id = station_id
        self.tag_src1 = ""
        self.value_src1: int | None = None
        self.tag_src2 = ""
        self.value_src2: int | None = None

    @property
    def required_cycles(self) -> int:
        if self.instruction is None:
            return _INVALID_CYCLES
        return _REQUIRED_CYCLES.get(self.instruction.opcode, _INVALID_CYCLES)

    def issue(self, instruction, tag_src1, value_src1, tag_src2, value_src2, issue_cycle) -> bool:
        if not self.available:
            return False
        self.tag_src1 = tag_src1
        self.value_src1 = value_src1
        self.tag_src2 = tag_src2
        self.value_src2 = value_src2
        self.instruction = instruction
        instruction.issue = issue_cycle
        if value_src1 is not None and value_src2 is not None:
            instruction.start_execution(issue_cycle)
        self.name = f"{instruction.opcode.mnemonic}{self.id}"
        self._passed_cycles = 0
        self.available = False
        return True

    def capture(self, tag, value, clock_cycle) -> bool:
        if not self._waiting() or tag not in (self.tag_src1, self.tag_src2):
            return False
        if self.tag_src1 == tag:
            self.value_src1 = value
        else:
            self.value_src2 = value
        if self.value_src1 is None or self.value_src2 is None:
            return False
        self.instruction.start_execution(clock_cycle)
        return True

    def advance(self, clock_cycle) -> tuple[str, int] | None:
        if not self._tick(clock_cycle, self.required_cycles):
            return None
        operation = _OPERATIONS.get(self.instruction.opcode)
        if operation is None:
            return None
        return self.name, operation(self.value_src1, self.value_src2)