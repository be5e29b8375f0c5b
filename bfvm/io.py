"""
Brainfuck VM I/O

Byte-oriented input and output capabilities used by the virtual machine,
plus the in-memory and stream adapters that implement them.
"""

import sys
from abc import ABC, abstractmethod
from collections import deque
from typing import BinaryIO, Deque, Optional, Union

from bfcompiler.errors import EndOfInput


InputData = Union[str, bytes, bytearray]


def to_bytes(data: InputData) -> bytes:
    """Convert input data to bytes; each str character is truncated to a byte."""
    if isinstance(data, str):
        return bytes(ord(c) & 0xFF for c in data)
    return bytes(data)


class OutputSink(ABC):
    """Accepts output one byte at a time."""

    @abstractmethod
    def write(self, value: int) -> None:
        """Emit one byte (0-255)."""


class InputSource(ABC):
    """Supplies input one byte at a time."""

    @abstractmethod
    def read(self) -> int:
        """
        Read one byte.

        Raises:
            EndOfInput: When no more input is available
        """


class InputOutput(InputSource, OutputSink):
    """Both capabilities; what the virtual machine is bound to."""
    pass


class BufferIO(InputOutput):
    """
    In-memory I/O.

    Input is consumed from a queue, output is collected in a bytearray.

    Example:
        io = BufferIO("H")
        Interpreter(io).interpret(",.")
        io.text  # "H"
    """

    def __init__(self, input: InputData = b""):
        self.input: Deque[int] = deque(to_bytes(input))
        self.output = bytearray()

    def push_input(self, data: InputData) -> None:
        """Append more bytes to the input queue."""
        self.input.extend(to_bytes(data))

    def read(self) -> int:
        if not self.input:
            raise EndOfInput()
        return self.input.popleft()

    def write(self, value: int) -> None:
        self.output.append(value)

    @property
    def text(self) -> str:
        """Output decoded with one character per byte."""
        return self.output.decode('latin-1')

    def clear(self) -> None:
        self.input.clear()
        self.output.clear()


class StreamIO(InputOutput):
    """I/O over binary file objects, stdin/stdout by default."""

    def __init__(self, reader: Optional[BinaryIO] = None,
                 writer: Optional[BinaryIO] = None):
        self.reader = reader if reader is not None else sys.stdin.buffer
        self.writer = writer if writer is not None else sys.stdout.buffer

    def read(self) -> int:
        data = self.reader.read(1)
        if not data:
            raise EndOfInput()
        return data[0]

    def write(self, value: int) -> None:
        self.writer.write(bytes((value,)))
        self.writer.flush()


class NullIO(InputOutput):
    """Discards output; input can be replayed for repeated runs."""

    def __init__(self, input: InputData = b""):
        self._input_copy = to_bytes(input)
        self.input: Deque[int] = deque(self._input_copy)
        self.written = 0

    def load_input(self, data: InputData) -> None:
        self._input_copy = to_bytes(data)
        self.reload()

    def reload(self) -> None:
        """Restore the input queue to the last loaded data."""
        self.input = deque(self._input_copy)

    def read(self) -> int:
        if not self.input:
            raise EndOfInput("No more input")
        return self.input.popleft()

    def write(self, value: int) -> None:
        self.written += 1
