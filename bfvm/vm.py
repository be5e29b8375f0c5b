"""
Brainfuck Virtual Machine

Executes compiled bytecode over a fixed-size tape of byte cells.
"""

import sys
from typing import Optional

import numpy as np

from bfcompiler.bytecode import Bytecode, OpCode
from bfcompiler.errors import EndOfInput
from .io import InputOutput


DEFAULT_TAPE_SIZE = 3000


class VirtualMachine:
    """
    Fetch-execute loop over Brainfuck bytecode.

    Pointer movement wraps around the ends of the tape and cell arithmetic
    wraps modulo 256, so no instruction can fail. Execution halts when the
    code pointer moves past the last instruction.

    Loop instructions jump to the index of their matching instruction. The
    code pointer is incremented after every instruction, jumps included, so
    a skipped loop resumes after its LOOP_END and a repeated loop resumes at
    the first instruction of its body.
    """

    def __init__(self, io: InputOutput,
                 tape_size: int = DEFAULT_TAPE_SIZE,
                 persistent_tape: bool = False,
                 debug: bool = False):
        """
        Create a virtual machine.

        Args:
            io: Input source and output sink
            tape_size: Number of cells on the tape, fixed for the VM's lifetime
            persistent_tape: Keep tape contents and data pointer between runs
            debug: Print execution statistics to stderr
        """
        if tape_size < 1:
            raise ValueError(f"Tape size must be positive, got {tape_size}")

        self.io = io
        self.tape_size = tape_size
        self.persistent_tape = persistent_tape
        self.debug = debug

        self.memory = np.zeros(tape_size, dtype=np.uint8)
        self.data_pointer = 0
        self.code_pointer = 0
        self.steps = 0
        self.bytecode: Optional[Bytecode] = None

    def reset(self) -> None:
        """Zero the tape and both pointers."""
        self.memory.fill(0)
        self.data_pointer = 0
        self.code_pointer = 0
        self.steps = 0

    def load(self, bytecode: Bytecode) -> None:
        """Bind a program and rewind to its first instruction."""
        if not self.persistent_tape:
            self.memory.fill(0)
            self.data_pointer = 0
        self.bytecode = bytecode
        self.code_pointer = 0
        self.steps = 0

    @property
    def halted(self) -> bool:
        return self.bytecode is None or self.code_pointer >= len(self.bytecode)

    def run(self, bytecode: Bytecode) -> int:
        """
        Execute bytecode until the code pointer runs off the end.

        Args:
            bytecode: Compiled bytecode

        Returns:
            Number of instructions executed
        """
        self.load(bytecode)

        while self.step():
            pass

        if self.debug:
            print(f"Halted after {self.steps} instructions, "
                  f"data pointer at {self.data_pointer}", file=sys.stderr)

        return self.steps

    def step(self) -> bool:
        """
        Execute one instruction.

        Returns:
            False if the VM has halted, True otherwise
        """
        if self.halted:
            return False

        ins = self.bytecode[self.code_pointer]
        opcode = ins.opcode

        if opcode == OpCode.INCREMENT_POINTER:
            if self.data_pointer == self.tape_size - 1:
                self.data_pointer = 0
            else:
                self.data_pointer += 1

        elif opcode == OpCode.DECREMENT_POINTER:
            if self.data_pointer == 0:
                self.data_pointer = self.tape_size - 1
            else:
                self.data_pointer -= 1

        elif opcode == OpCode.INCREMENT_VALUE:
            self.memory[self.data_pointer] = (self.cell + 1) & 0xFF

        elif opcode == OpCode.DECREMENT_VALUE:
            self.memory[self.data_pointer] = (self.cell - 1) & 0xFF

        elif opcode == OpCode.OUTPUT_VALUE:
            self.io.write(self.cell)

        elif opcode == OpCode.INPUT_VALUE:
            try:
                value = self.io.read()
            except EndOfInput:
                pass  # Cell keeps its value
            else:
                self.memory[self.data_pointer] = value & 0xFF

        elif opcode == OpCode.LOOP_START:
            if self.cell == 0:
                self.code_pointer = ins.jump_to

        elif opcode == OpCode.LOOP_END:
            if self.cell != 0:
                self.code_pointer = ins.jump_to

        else:
            raise ValueError(f"Unknown opcode: {opcode}")

        self.code_pointer += 1
        self.steps += 1
        return True

    @property
    def cell(self) -> int:
        """Value of the cell under the data pointer."""
        return int(self.memory[self.data_pointer])

    def dump_memory(self) -> str:
        """List the non-zero cells of the tape."""
        cells = np.nonzero(self.memory)[0]
        lines = [f"Tape: {self.tape_size} cells, data pointer at {self.data_pointer}"]
        for index in cells:
            marker = " <" if index == self.data_pointer else ""
            lines.append(f"  [{int(index):5d}] {int(self.memory[index]):3d}{marker}")
        return "\n".join(lines)
