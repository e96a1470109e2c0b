import pytest

from tomasulo.instruction import parse_line
from tomasulo.register import Register, rename_registers


def _program(*lines):
    return [parse_line(line) for line in lines]


def test_register_defaults():
    register = Register()
    assert register.name == ""
    assert register.value is None


def test_distinct_destinations_are_kept():
    program = _program("LD R1 5 0", "LD R2 3 0", "ADD R3 R1 R2")
    registers = rename_registers(program)
    assert set(registers) == {"R1", "R2", "R3"}
    assert all(key == reg.name for key, reg in registers.items())
    assert [str(i) for i in program] == ["LD R1 5 0", "LD R2 3 0", "ADD R3 R1 R2"]


def test_repeated_destination_is_renamed():
    program = _program("LD R1 5 0", "LD R1 7 0")
    registers = rename_registers(program)
    assert program[1].destination == "R100"
    assert set(registers) == {"R1", "R100"}
    assert registers["R1"].name == "R1"
    assert registers["R100"].name == "R100"


def test_sources_follow_renamed_destination():
    program = _program("LD R1 5 0", "LD R1 7 0", "ADD R2 R1 R1")
    rename_registers(program)
    assert program[2].src1 == program[1].destination
    assert program[2].src2 == program[1].destination


def test_unknown_source_left_alone():
    program = _program("ADD R1 R5 R6")
    registers = rename_registers(program)
    assert set(registers) == {"R1"}
    assert program[0].src1 == "R5"
    assert program[0].src2 == "R6"


def test_immediate_sources_untouched():
    program = _program("LD R1 42 0")
    rename_registers(program)
    assert program[0].src1 == "42"
    assert program[0].src2 == "0"


def test_every_destination_in_result():
    program = _program("LD R1 5 0", "LD R2 3 0", "LD R1 4 0", "MUL R2 R1 R2")
    registers = rename_registers(program)
    for instruction in program:
        assert instruction.destination in registers


def test_missing_destination_raises():
    with pytest.raises(ValueError):
        rename_registers(_program("LD R1 5 0", "ADD"))