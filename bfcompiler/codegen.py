"""
Brainfuck Code Generator

Translates a token stream into bytecode, pairing every '[' with its ']'.
"""

import sys
from typing import List, Optional, Sequence, Tuple

from .tokens import Token, SYMBOLS
from .bytecode import Bytecode, OpCode
from .errors import UnmatchedBracket


# Straight-line token to opcode mapping
TOKEN_OPCODES = {
    Token.GREATER_THAN: OpCode.INCREMENT_POINTER,
    Token.LESS_THAN: OpCode.DECREMENT_POINTER,
    Token.PLUS: OpCode.INCREMENT_VALUE,
    Token.MINUS: OpCode.DECREMENT_VALUE,
    Token.DOT: OpCode.OUTPUT_VALUE,
    Token.COMMA: OpCode.INPUT_VALUE,
}


class Compiler:
    """Generates bytecode from a Brainfuck token list."""

    def __init__(self, debug: bool = False):
        self.debug = debug
        self.bytecode = Bytecode()
        # (output index of LOOP_START, input index of its '[' token)
        self.loop_stack: List[Tuple[int, int]] = []

    def compile(self, tokens: Sequence[Token],
                locations: Optional[Sequence[Tuple[int, int]]] = None) -> Bytecode:
        """
        Compile tokens into bytecode.

        Args:
            tokens: Token list from the scanner
            locations: Optional (line, column) per token, used in errors

        Returns:
            Frozen Bytecode with every loop pair resolved

        Raises:
            UnmatchedBracket: If the brackets are not balanced
        """
        self.bytecode = Bytecode()
        self.loop_stack = []

        for i, token in enumerate(tokens):
            if not token.is_instruction():
                continue

            if token == Token.LEFT_BRACKET:
                # Output index, not token index: SPACE tokens emit nothing
                start = self.bytecode.emit_loop_start()
                self.loop_stack.append((start, i))

            elif token == Token.RIGHT_BRACKET:
                if not self.loop_stack:
                    raise self._unmatched(token, i, locations)
                start, _ = self.loop_stack.pop()
                end = self.bytecode.current_offset()
                self.bytecode.patch_loop_start(start, end)
                self.bytecode.emit_loop_end(start)

            else:
                self.bytecode.emit(TOKEN_OPCODES[token])

        if self.loop_stack:
            # Report the outermost unclosed loop
            _, i = self.loop_stack[0]
            raise self._unmatched(tokens[i], i, locations)

        if self.debug:
            print(f"Compiled {len(self.bytecode)} instructions, "
                  f"{self.bytecode.loop_count()} loops", file=sys.stderr)

        return self.bytecode.freeze()

    def _unmatched(self, token: Token, index: int,
                   locations: Optional[Sequence[Tuple[int, int]]]) -> UnmatchedBracket:
        self.loop_stack = []
        bracket = SYMBOLS[token]
        if locations is not None and index < len(locations):
            line, column = locations[index]
            return UnmatchedBracket(bracket, index, line, column)
        return UnmatchedBracket(bracket, index)
