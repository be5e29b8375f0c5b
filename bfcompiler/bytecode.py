"""
Brainfuck Bytecode Format

Defines bytecode instructions and the compiled bytecode container.
"""

from enum import IntEnum
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union


class OpCode(IntEnum):
    """Brainfuck VM opcodes."""

    # Data pointer
    INCREMENT_POINTER = 0x00
    DECREMENT_POINTER = 0x01

    # Cell arithmetic
    INCREMENT_VALUE = 0x02
    DECREMENT_VALUE = 0x03

    # I/O
    OUTPUT_VALUE = 0x04
    INPUT_VALUE = 0x05

    # Control flow
    LOOP_START = 0x06    # operand: index of matching LOOP_END
    LOOP_END = 0x07      # operand: index of matching LOOP_START


# Opcodes that carry a jump target
JUMP_OPCODES = (OpCode.LOOP_START, OpCode.LOOP_END)


@dataclass(frozen=True)
class Instruction:
    """A single bytecode instruction."""

    opcode: OpCode
    jump_to: Optional[int] = None

    def __post_init__(self):
        if self.opcode in JUMP_OPCODES:
            if self.jump_to is None:
                raise ValueError(f"{self.opcode.name} requires a jump target")
        elif self.jump_to is not None:
            raise ValueError(f"{self.opcode.name} does not take a jump target")

    @classmethod
    def loop_start(cls, jump_to: int) -> 'Instruction':
        return cls(OpCode.LOOP_START, jump_to)

    @classmethod
    def loop_end(cls, jump_to: int) -> 'Instruction':
        return cls(OpCode.LOOP_END, jump_to)

    def __repr__(self) -> str:
        if self.jump_to is not None:
            return f"{self.opcode.name}(jump_to={self.jump_to})"
        return self.opcode.name


@dataclass
class Bytecode:
    """Container for compiled Brainfuck bytecode."""

    # List while emitting, tuple once frozen
    code: Union[List[Instruction], Tuple[Instruction, ...]] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.code)

    def __getitem__(self, index: int) -> Instruction:
        return self.code[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.code)

    @property
    def frozen(self) -> bool:
        return isinstance(self.code, tuple)

    def emit(self, opcode: OpCode) -> int:
        """Emit an instruction without operand, returning its index."""
        return self._append(Instruction(opcode))

    def emit_loop_start(self) -> int:
        """Emit a LOOP_START with placeholder target, returning its index."""
        return self._append(Instruction.loop_start(0))

    def emit_loop_end(self, start: int) -> int:
        """Emit a LOOP_END jumping back to the LOOP_START at start."""
        return self._append(Instruction.loop_end(start))

    def patch_loop_start(self, start: int, end: int) -> None:
        """Point the LOOP_START placeholder at start to the LOOP_END at end."""
        if isinstance(self.code, tuple):
            raise ValueError("Cannot patch frozen bytecode")
        if self.code[start].opcode != OpCode.LOOP_START:
            raise ValueError(f"No LOOP_START at index {start}")
        self.code[start] = Instruction.loop_start(end)

    def current_offset(self) -> int:
        """Index the next emitted instruction will occupy."""
        return len(self.code)

    def freeze(self) -> 'Bytecode':
        """Make the instruction sequence immutable."""
        self.code = tuple(self.code)
        return self

    def _append(self, instruction: Instruction) -> int:
        if isinstance(self.code, tuple):
            raise ValueError("Cannot emit into frozen bytecode")
        offset = len(self.code)
        self.code.append(instruction)
        return offset

    def loop_count(self) -> int:
        return sum(1 for ins in self.code if ins.opcode == OpCode.LOOP_START)

    def disassemble(self) -> str:
        """Disassemble bytecode to human-readable format."""
        lines = []
        lines.append("=== Brainfuck Bytecode ===")
        lines.append(f"Instructions: {len(self.code)}, loops: {self.loop_count()}")
        lines.append("")

        depth = 0
        for offset, ins in enumerate(self.code):
            if ins.opcode == OpCode.LOOP_END:
                depth -= 1
            lines.append(self._disassemble_instruction(offset, ins, depth))
            if ins.opcode == OpCode.LOOP_START:
                depth += 1

        return "\n".join(lines)

    def _disassemble_instruction(self, offset: int, ins: Instruction, depth: int) -> str:
        """Disassemble a single instruction."""
        indent = "  " * max(depth, 0)
        name = ins.opcode.name

        if ins.jump_to is not None:
            return f"  {offset:04x}: {indent}{name:18s} -> {ins.jump_to:04x}"
        return f"  {offset:04x}: {indent}{name}"


def from_instructions(instructions: List[Instruction]) -> Bytecode:
    """
    Build frozen bytecode from a prepared list of instructions.

    For hosts and tests that assemble programs without going through the
    scanner; loop targets are taken as given.
    """
    return Bytecode(list(instructions)).freeze()
