"""
Line normalisation and typed parsing.

A target is anything that can turn text into a value: a type whose
constructor accepts a string (``int``, ``float``, ``Decimal``, ``UUID``),
a class implementing ``from_text``, or a plain function.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, Tuple, Type, runtime_checkable

from lineread.errors import ParseFailure

Parser = Callable[[str], Any]

# decimal.InvalidOperation derives from ArithmeticError, not ValueError.
PARSE_ERRORS: Tuple[Type[BaseException], ...] = (ValueError, TypeError, ArithmeticError)

_TERMINATORS = ("\r\n", "\n", "\r")


@runtime_checkable
class TextParsable(Protocol):
    @classmethod
    def from_text(cls, text: str) -> Any: ...


def strip_line_terminator(text: str) -> str:
    """Remove exactly one trailing line terminator, preferring ``\\r\\n``."""
    for terminator in _TERMINATORS:
        if text.endswith(terminator):
            return text[: -len(terminator)]
    return text


def parse_bool(text: str) -> bool:
    """Parse ``true`` or ``false``; ``bool("false")`` would be truthy."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"provided string was not `true` or `false`: {text!r}")


def resolve_parser(target: Any) -> Parser:
    if target is bool:
        return parse_bool
    if isinstance(target, TextParsable):
        return target.from_text
    if callable(target):
        return target
    raise TypeError(f"Cannot parse text into {target!r}: not callable and no from_text()")


def parse_text(text: str, target: Any) -> Any:
    """Parse already-normalised text, raising ``ParseFailure`` on bad input."""
    parser = resolve_parser(target)
    try:
        return parser(text)
    except PARSE_ERRORS as exc:
        raise ParseFailure(exc, text) from exc
