"""
Brainfuck Compiler Package

Scans Brainfuck source into tokens and compiles them to bytecode for the VM.
"""

import sys
from typing import Optional

from .tokens import Token
from .scanner import Scanner, scan
from .bytecode import Bytecode, Instruction, OpCode
from .codegen import Compiler
from .errors import BrainfuckError, CompileError, UnmatchedBracket, EndOfInput

__version__ = "0.1.0"
__all__ = [
    "Token",
    "Scanner",
    "scan",
    "Bytecode",
    "Instruction",
    "OpCode",
    "Compiler",
    "BrainfuckError",
    "CompileError",
    "UnmatchedBracket",
    "EndOfInput",
    "compile_source",
]


def compile_source(source: str, debug: bool = False,
                   compiler: Optional[Compiler] = None) -> Bytecode:
    """
    Compile Brainfuck source code to bytecode.

    Args:
        source: Brainfuck source code string
        debug: Print scan and compile statistics to stderr
        compiler: Compiler to reuse; a new one is created if omitted

    Returns:
        Bytecode object ready for VM execution

    Raises:
        UnmatchedBracket: If the brackets are not balanced; the error
            carries the line and column of the offending bracket
    """
    scanner = Scanner(source)
    tokens = scanner.scan()

    if compiler is None:
        compiler = Compiler(debug=debug)

    if debug or compiler.debug:
        print(f"Scanned {len(tokens)} tokens from {len(source)} characters",
              file=sys.stderr)

    return compiler.compile(tokens, scanner.locations)
