import pytest

from tomasulo.instruction import (
    Instruction,
    OpCode,
    parse_line,
    parse_opcode,
    read_instructions,
)


@pytest.mark.parametrize(
    "text, opcode",
    [
        ("LD", OpCode.LOAD),
        ("ADD", OpCode.ADD),
        ("SUB", OpCode.SUB),
        ("MUL", OpCode.MUL),
        ("DIV", OpCode.DIV),
        ("NOP", OpCode.INVALID),
        ("add", OpCode.INVALID),
        ("", OpCode.INVALID),
    ],
)
def test_parse_opcode(text, opcode):
    assert parse_opcode(text) is opcode


@pytest.mark.parametrize("text", ["LD", "ADD", "SUB", "MUL", "DIV"])
def test_mnemonic_round_trip(text):
    assert parse_opcode(text).mnemonic == text


def test_store_prints_as_invalid():
    instruction = Instruction(OpCode.STORE, "R1", "R2", "R3")
    assert instruction.opcode is OpCode.STORE
    assert str(instruction) == "INVALID R1 R2 R3"


def test_string_opcode_is_converted():
    instruction = Instruction("MUL", "R1", "R2", "R3")
    assert instruction.opcode is OpCode.MUL


def test_parse_line_fields():
    instruction = parse_line("ADD R1 R2 R3")
    assert instruction.opcode is OpCode.ADD
    assert instruction.destination == "R1"
    assert instruction.src1 == "R2"
    assert instruction.src2 == "R3"


def test_parse_line_str_round_trip():
    line = "DIV R4 R5 R6"
    assert str(parse_line(line)) == line


def test_parse_line_missing_fields_are_empty():
    instruction = parse_line("LD R1")
    assert instruction.destination == "R1"
    assert instruction.src1 == ""
    assert instruction.src2 == ""


def test_parse_line_ignores_extra_tokens_and_spacing():
    instruction = parse_line("  SUB   R1 R2   R3 R9 ")
    assert str(instruction) == "SUB R1 R2 R3"


def test_unknown_operation_prints_invalid():
    assert str(parse_line("FOO R1 R2 R3")) == "INVALID R1 R2 R3"


def test_execution_lifecycle():
    instruction = parse_line("ADD R1 R2 R3")
    assert not instruction.has_started()
    assert not instruction.is_executing()

    assert instruction.start_execution(4) is True
    assert instruction.start_execution(9) is False
    assert instruction.execution_start == 4
    assert instruction.is_executing()

    assert instruction.finish_execution(6) is True
    assert instruction.finish_execution(8) is False
    assert instruction.execution_end == 6
    assert instruction.has_finished()
    assert not instruction.is_executing()


def test_start_at_cycle_zero_counts_as_started():
    instruction = parse_line("LD R1 5 0")
    instruction.start_execution(0)
    assert instruction.has_started()


def test_read_instructions_skips_empty_lines(tmp_path):
    path = tmp_path / "program.txt"
    path.write_text("LD R1 5 0\n\nADD R2 R1 R1\n\n", encoding="utf-8")
    instructions = read_instructions(path)
    assert [str(i) for i in instructions] == ["LD R1 5 0", "ADD R2 R1 R1"]


def test_read_instructions_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_instructions(tmp_path / "absent.txt")