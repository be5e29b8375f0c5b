"""
Brainfuck Compiler Errors

Defines exception classes for compilation and I/O errors.
"""

from typing import Optional


class BrainfuckError(Exception):
    """Base exception for all interpreter errors."""

    def __init__(self, message: str, line: Optional[int] = None,
                 column: Optional[int] = None, index: Optional[int] = None):
        self.message = message
        self.line = line
        self.column = column
        self.index = index
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with location information."""
        if self.line is not None:
            location = f"line {self.line}"
            if self.column is not None:
                location += f":{self.column}"
            return f"{location}: {self.message}"

        if self.index is not None:
            return f"instruction {self.index}: {self.message}"

        return self.message


class CompileError(BrainfuckError):
    """Raised when a token stream cannot be compiled."""
    pass


class UnmatchedBracket(CompileError):
    """Raised for a ']' without an open '[' or a '[' that is never closed."""

    def __init__(self, bracket: str, index: int,
                 line: Optional[int] = None, column: Optional[int] = None):
        self.bracket = bracket
        if bracket == '[':
            message = "Unmatched '[': loop is never closed"
        else:
            message = "Unmatched ']': no open loop to close"
        super().__init__(message, line=line, column=column, index=index)


class EndOfInput(BrainfuckError):
    """Raised by an input source when no more bytes are available."""

    def __init__(self, message: str = "No more input"):
        super().__init__(message)
