"""
Prompt, read and parse a single line from a stream.

Every public function here returns a ``ReadResult``; I/O problems, bad input
and end-of-stream come back as values rather than propagating, so a caller
can decide per call site whether EOF is an error or simply the end.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TextIO, Tuple, TypeVar

from lineread.errors import EndOfStream, InputError, IoFailure
from lineread.parsing import parse_text, strip_line_terminator

T = TypeVar("T")

DEFAULT_ENCODING = "utf-8"


class EofPolicy(Enum):
    FAIL = "fail"
    TOLERATE = "tolerate"


class PromptStyle(Enum):
    INLINE = "inline"
    LINE = "line"


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Outcome of one read: a value, an error, or (tolerant reads only) no more input."""

    value: Optional[T] = None
    error: Optional[InputError] = None
    eof: bool = False

    @classmethod
    def success(cls, value: T) -> "ReadResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: InputError) -> "ReadResult[T]":
        return cls(error=error)

    @classmethod
    def no_more_input(cls) -> "ReadResult[T]":
        return cls(eof=True)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value (``None`` for no more input) or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


def emit_prompt(prompt: Optional[str], output: Optional[TextIO] = None, style: PromptStyle = PromptStyle.INLINE) -> None:
    """Write the prompt and flush it so it is visible before the read blocks."""
    if prompt is None:
        return
    sink = output if output is not None else sys.stdout
    text = prompt + "\n" if style is PromptStyle.LINE else prompt
    try:
        sink.write(text)
        sink.flush()
    except (OSError, ValueError) as exc:
        raise IoFailure(exc) from exc


def acquire_line(source: Any, encoding: str = DEFAULT_ENCODING) -> Tuple[int, str]:
    """Read one raw line (terminator included).

    Returns (consumed, text); consumed is 0 only at end-of-stream. Binary
    sources are decoded with ``encoding``.
    """
    try:
        raw = source.readline()
    except Exception as exc:
        raise IoFailure(exc) from exc

    if isinstance(raw, (bytes, bytearray)):
        try:
            return len(raw), bytes(raw).decode(encoding)
        except UnicodeDecodeError as exc:
            raise IoFailure(exc) from exc
    return len(raw), raw


def read_line(
    source: Any,
    target: Any = str,
    prompt: Optional[str] = None,
    *,
    policy: EofPolicy = EofPolicy.FAIL,
    output: Optional[TextIO] = None,
    prompt_style: PromptStyle = PromptStyle.INLINE,
    encoding: str = DEFAULT_ENCODING,
    blank_is_eof: bool = False,
) -> ReadResult:
    """Run the full prompt → read → normalise → parse pipeline once."""
    if blank_is_eof and policy is not EofPolicy.TOLERATE:
        raise ValueError("blank_is_eof requires the tolerate EOF policy")

    try:
        emit_prompt(prompt, output, prompt_style)
        consumed, raw = acquire_line(source, encoding)
        if consumed == 0:
            if policy is EofPolicy.TOLERATE:
                return ReadResult.no_more_input()
            return ReadResult.failure(EndOfStream())

        text = strip_line_terminator(raw)
        if blank_is_eof and text == "":
            return ReadResult.no_more_input()
        return ReadResult.success(parse_text(text, target))
    except InputError as exc:
        return ReadResult.failure(exc)


def read_input(source: Any, target: Any = str, prompt: Optional[str] = None, **options: Any) -> ReadResult:
    """Read one value; end-of-stream is reported as ``EndOfStream``."""
    return read_line(source, target, prompt, policy=EofPolicy.FAIL, **options)


def read_input_tolerant(source: Any, target: Any = str, prompt: Optional[str] = None, **options: Any) -> ReadResult:
    """Read one value; end-of-stream yields ``ReadResult.no_more_input()``."""
    return read_line(source, target, prompt, policy=EofPolicy.TOLERATE, **options)
