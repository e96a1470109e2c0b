# tomasulo

A small simulator of Tomasulo's algorithm for out-of-order instruction
execution. It takes a short program of loads and arithmetic instructions,
renames repeated destination registers, and steps the machine one clock
cycle at a time until every buffer is free and no instruction is left to
issue.

## The machine

- 2 load buffers (`LD0`, `LD1`)
- 2 reservation stations for arithmetic, named after the operation they
  currently hold and their number (for example `ADD0` or `MUL1`)
- 2 common data buses; each bus broadcasts at most one result per cycle

Latencies, counted in cycles after the cycle execution starts:

| Operation | Cycles |
|-----------|--------|
| `LD`      | 2      |
| `ADD`     | 2      |
| `SUB`     | 2      |
| `MUL`     | 10     |
| `DIV`     | 40     |

Division truncates towards zero.

Each cycle, the buses run first. Reservation stations are polled before load
buffers. A finished result is handed to every buffer waiting on its tag and
written into every register whose current name is that tag. After that, the
instruction at the head of the queue is issued if a buffer of the right kind
is free. Instructions issue in order, at most one per cycle.

When an instruction is issued, an operand that names a register is linked to
the tag that register currently points to and waits for that tag to be
broadcast. Any other operand is read as an integer constant. Both operands a
buffer receives are taken from the instruction's first source field. The
instruction's destination register is then pointed at the buffer's name.

## Instruction format

One instruction per line, fields separated by whitespace:

```
OP DEST SRC1 SRC2
```

`OP` is one of `LD`, `ADD`, `SUB`, `MUL`, `DIV`; any other text parses as
`OpCode.INVALID`. Missing fields are left empty. Register names start with
`R`. When a destination register is written more than once, the later writes
are renamed to fresh registers `R100`, `R101` and so on, and later sources
are rewritten to the current name.

## Command line

Install the package, then pass each instruction as one argument:

```
pip install .
tomasulo "LD R1 4 0" "LD R2 6 0" "ADD R3 R1 R2"
```

The command prints the instructions as given, then the instructions after
register renaming, and finally each register name with its value (`-1` for a
register that never received one). Without any instructions it exits with
status 1. An instruction that no unit can execute, a constant operand that is
not an integer, or a source register that is not known makes it print an
error to standard error and exit with status 1.

## Library use

```python
from tomasulo.instruction import parse_line
from tomasulo.simulator import simulate

program = [parse_line(text) for text in ("LD R1 4 0", "MUL R2 R1 R1")]
registers = simulate(program)
for name, register in registers.items():
    print(name, register.value)
```

- `tomasulo.instruction`: `OpCode`, `Instruction`, `parse_opcode`,
  `parse_line`, and `read_instructions(path)`, which reads a program from a
  text file, skipping empty lines.
- `tomasulo.register`: `Register` and `rename_registers(instructions)`, which
  renames in place and returns the register file. It raises `ValueError` for
  an instruction without a destination.
- `tomasulo.buffers`: `Buffer`, `LoadBuffer`, `ReservationStation`.
- `tomasulo.bus`: `CommonDataBus`.
- `tomasulo.simulator`: `simulate`, `assign_buffer`, `assign_to`,
  `find_empty_buffer`, `has_busy_buffer`, `main`.

`simulate` renames the instructions in place and records on each one the
cycle it was issued and the cycle its execution started. It raises
`ValueError` if the program holds an instruction whose opcode no unit can
execute.

## What it does not do

- There is no store unit: `OpCode.STORE` exists, but no text parses to it,
  and `simulate` rejects it.
- The end-of-execution and write-back cycles of an instruction are not
  recorded by the simulation; only issue and execution start are.
- The `tomasulo` command takes instructions only as arguments. Reading a
  program from a file is available through `read_instructions` in the
  library, not through the command.

## Running the tests

```
pip install ".[test]"
pytest
```