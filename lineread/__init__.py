"""Typed, prompt-aware reading of single lines from text streams."""

from lineread.errors import EndOfStream, InputError, IoFailure, ParseFailure
from lineread.parsing import TextParsable, parse_bool, strip_line_terminator
from lineread.reader import EofPolicy, PromptStyle, ReadResult, read_input, read_input_tolerant, read_line
from lineread.stdio import input_value, input_value_or_none, read_stdin, read_stdin_tolerant

__all__ = [
    "EndOfStream",
    "EofPolicy",
    "InputError",
    "IoFailure",
    "ParseFailure",
    "PromptStyle",
    "ReadResult",
    "TextParsable",
    "input_value",
    "input_value_or_none",
    "parse_bool",
    "read_input",
    "read_input_tolerant",
    "read_line",
    "read_stdin",
    "read_stdin_tolerant",
    "strip_line_terminator",
]

__version__ = "0.1.0"
