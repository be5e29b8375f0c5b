"""
Brainfuck Token Definitions

Defines the token set produced by the scanner.
"""

from enum import Enum, auto
from typing import Dict, Optional


class Token(Enum):
    """All tokens in Brainfuck source."""

    # Pointer movement
    GREATER_THAN = auto()   # >
    LESS_THAN = auto()      # <

    # Cell arithmetic
    PLUS = auto()           # +
    MINUS = auto()          # -

    # I/O
    DOT = auto()            # .
    COMMA = auto()          # ,

    # Loops
    LEFT_BRACKET = auto()   # [
    RIGHT_BRACKET = auto()  # ]

    # Any other character, only emitted when the scanner keeps it
    SPACE = auto()

    @classmethod
    def from_char(cls, c: str) -> Optional['Token']:
        """Return the instruction token for a character, or None."""
        return CHARACTERS.get(c)

    def is_instruction(self) -> bool:
        """Check if this token produces a bytecode instruction."""
        return self is not Token.SPACE


# Instruction character mapping
CHARACTERS: Dict[str, Token] = {
    '>': Token.GREATER_THAN,
    '<': Token.LESS_THAN,
    '+': Token.PLUS,
    '-': Token.MINUS,
    '.': Token.DOT,
    ',': Token.COMMA,
    '[': Token.LEFT_BRACKET,
    ']': Token.RIGHT_BRACKET,
}

# Reverse mapping, used in compile error messages
SYMBOLS: Dict[Token, str] = {token: c for c, token in CHARACTERS.items()}
