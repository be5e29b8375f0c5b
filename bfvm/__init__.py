"""
Brainfuck Virtual Machine Package

Runs compiled Brainfuck bytecode against byte-oriented I/O.
"""

from .io import InputSource, OutputSink, InputOutput, BufferIO, StreamIO, NullIO
from .vm import VirtualMachine, DEFAULT_TAPE_SIZE
from .interpreter import Interpreter, create_interpreter, run

__all__ = [
    'InputSource',
    'OutputSink',
    'InputOutput',
    'BufferIO',
    'StreamIO',
    'NullIO',
    'VirtualMachine',
    'DEFAULT_TAPE_SIZE',
    'Interpreter',
    'create_interpreter',
    'run',
]
