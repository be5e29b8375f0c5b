"""
Brainfuck Interpreter Tests

End-to-end tests: source in, output out.
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from bfcompiler.errors import UnmatchedBracket
from bfvm import Interpreter, BufferIO, create_interpreter, run


PROGRAMS_DIR = Path(__file__).parent / "programs"

HELLO_WORLD = """
>++++++++[-<+++++++++>]<.
>>+>-[+]++>++>+++[>[->+++<<+++>]<<]>-----.
>->+++..
+++.
>-.
<<+[>[+>+]>>]<--------------.
>>.
+++.
------.
--------.
>+.
>+.
"""

HELLO_WORLD_COMPACT = """
+[>[<->+[>+++>[+++++++++++>][]-[<]>
-]]++++++++++<]>>>>>>----.<<+++.<-.
.+++.<-.>>>.<<.+++.------.>-.<<+.<.
"""


def load_program(name):
    """Load <name>.b with its optional .in and .out fixtures."""
    source = "".join((PROGRAMS_DIR / f"{name}.b").read_text().splitlines())

    input_path = PROGRAMS_DIR / f"{name}.in"
    output_path = PROGRAMS_DIR / f"{name}.out"
    input = input_path.read_text() if input_path.exists() else None
    output = output_path.read_text() if output_path.exists() else None
    return source, input, output


def run_program(source, input=None):
    io = BufferIO()
    if input is not None:
        io.push_input(input)
    Interpreter(io).interpret(source)
    return io.text


class TestEndToEnd:
    """Whole-program tests."""

    def test_echo(self):
        assert run_program(",.", "H") == "H"

    def test_dcode(self):
        source = "++++++++ [>++++++++++++>+++++++++++++<<-] >++++. -. >+++++++. <+. +."
        assert run_program(source) == "dcode"

    def test_hello_world(self):
        assert run_program(HELLO_WORLD) == "Hello World!\n"

    def test_hello_world_compact(self):
        assert run_program(HELLO_WORLD_COMPACT) == "Hello World!\n"

    def test_input_exhaustion_is_not_fatal(self):
        assert run_program(",,.", "A") == "A"

    def test_empty_program(self):
        assert run_program("") == ""

    def test_comment_only_program(self):
        assert run_program("this program does nothing") == ""

    def test_run_helper(self):
        assert run(",+.", input="a") == "b"

    def test_run_helper_passes_options(self):
        assert run("<+.", tape_size=5) == "\x01"

    def test_byte_output_is_latin1(self):
        assert run("-.") == "\xff"


class TestUnmatchedInput:
    """Programs rejected before execution."""

    def test_unmatched_closing_bracket(self):
        io = BufferIO()
        with pytest.raises(UnmatchedBracket):
            Interpreter(io).interpret("+.]")
        assert io.output == b""

    def test_unmatched_opening_bracket(self):
        io = BufferIO()
        with pytest.raises(UnmatchedBracket) as exc_info:
            Interpreter(io).interpret("+.\n+[.")
        assert io.output == b""
        assert (exc_info.value.line, exc_info.value.column) == (2, 2)

    def test_interpreter_usable_after_error(self):
        io = BufferIO()
        interp = Interpreter(io)
        with pytest.raises(UnmatchedBracket):
            interp.interpret("[")
        interp.interpret("+++[-]+.")
        assert io.output == b"\x01"


class TestInterpreterState:
    """Tape lifetime across interpret() calls."""

    def test_fresh_tape_per_interpretation(self):
        io = BufferIO()
        interp = create_interpreter(io)
        interp.interpret("+++")
        interp.interpret(".")
        assert io.output == b"\x00"

    def test_persistent_tape(self):
        io = BufferIO()
        interp = Interpreter(io, persistent_tape=True)
        interp.interpret("+++>")
        interp.interpret("<.")
        assert io.output == b"\x03"

    def test_debug_output_goes_to_stderr(self, capsys):
        io = BufferIO()
        Interpreter(io, debug=True).interpret("+[-]")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Scanned 4 tokens from 4 characters" in captured.err
        assert "Compiled 4 instructions, 1 loops" in captured.err
        assert "Halted after 4 instructions" in captured.err


@pytest.mark.parametrize("name", [
    "hello_world",
    "hello_world_compact",
    "dcode",
    "echo",
    "add_digits",
])
def test_program_fixtures(name):
    source, input, output = load_program(name)
    assert run_program(source, input) == output
