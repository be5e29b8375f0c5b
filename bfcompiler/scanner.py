"""
Brainfuck Scanner

Turns source text into a list of tokens. Every character that is not one of
the eight instruction characters is a comment and is dropped.
"""

from typing import List, Tuple
from .tokens import Token


class Scanner:
    """Lexical analyzer for Brainfuck source code."""

    def __init__(self, source: str, keep_whitespace: bool = False):
        """
        Initialize the scanner.

        Args:
            source: Brainfuck source code to scan
            keep_whitespace: Emit Token.SPACE for non-instruction characters
                instead of dropping them
        """
        self.source = source
        self.keep_whitespace = keep_whitespace
        self.tokens: List[Token] = []
        self.locations: List[Tuple[int, int]] = []  # (line, column) per token
        self.current = 0    # Current position
        self.line = 1       # Current line number
        self.column = 1     # Current column number

    def scan(self) -> List[Token]:
        """
        Scan the entire source code.

        Returns:
            List of tokens in source order
        """
        while not self.is_at_end():
            self.scan_token()
        return self.tokens

    def scan_token(self) -> None:
        """Scan the next character."""
        line, column = self.line, self.column
        c = self.advance()

        token = Token.from_char(c)
        if token is not None:
            self.add_token(token, line, column)
        elif self.keep_whitespace:
            self.add_token(Token.SPACE, line, column)

    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.source[self.current]
        self.current += 1
        if c == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def is_at_end(self) -> bool:
        """Check if we've reached the end of the source."""
        return self.current >= len(self.source)

    def add_token(self, token: Token, line: int, column: int) -> None:
        self.tokens.append(token)
        self.locations.append((line, column))


def scan(source: str, keep_whitespace: bool = False) -> List[Token]:
    """Scan source text into a fresh list of tokens."""
    return Scanner(source, keep_whitespace).scan()
