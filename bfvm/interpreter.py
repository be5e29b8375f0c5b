"""
Brainfuck Interpreter

Ties the scanner, compiler and virtual machine together behind a single
interpret() call.
"""

from typing import Any

from bfcompiler import Compiler, compile_source
from .io import BufferIO, InputData, InputOutput
from .vm import DEFAULT_TAPE_SIZE, VirtualMachine


class Interpreter:
    """
    Runs Brainfuck source end-to-end against one I/O binding.

    Example:
        io = BufferIO()
        Interpreter(io).interpret("++++++++[>++++++++<-]>+.")
        io.text  # "A"
    """

    def __init__(self, io: InputOutput,
                 tape_size: int = DEFAULT_TAPE_SIZE,
                 persistent_tape: bool = False,
                 debug: bool = False):
        """
        Create an interpreter.

        Args:
            io: Input source and output sink for every program run
            tape_size: Number of tape cells
            persistent_tape: Keep the tape between interpret() calls
            debug: Print compile and execution statistics to stderr
        """
        self.debug = debug
        self._compiler = Compiler(debug=debug)
        self._vm = VirtualMachine(io, tape_size=tape_size,
                                  persistent_tape=persistent_tape, debug=debug)

    def interpret(self, source: str) -> None:
        """
        Scan, compile and run a program.

        Raises:
            UnmatchedBracket: If the brackets are not balanced. Nothing is
                executed in that case.
        """
        bytecode = compile_source(source, compiler=self._compiler)
        self._vm.run(bytecode)


def create_interpreter(io: InputOutput, **kwargs) -> Interpreter:
    """Create a new interpreter."""
    return Interpreter(io, **kwargs)


def run(source: str, input: InputData = b"", **kwargs: Any) -> str:
    """
    Run Brainfuck code on in-memory I/O.

    Args:
        source: Brainfuck source code
        input: Bytes (or characters) available to ','
        **kwargs: Interpreter options

    Returns:
        Program output, one character per byte
    """
    io = BufferIO(input)
    Interpreter(io, **kwargs).interpret(source)
    return io.text
