from __future__ import annotations

from typing import Optional


class InputError(Exception):
    """Base class for the three ways a line read can fail."""

    kind = "input"

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        super().__init__(cause)
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.kind} error: {self.cause}"


class IoFailure(InputError):
    """The stream could not deliver or accept bytes (read, write, flush or decode)."""

    kind = "I/O"

    def __init__(self, cause: BaseException) -> None:
        super().__init__(cause)


class ParseFailure(InputError):
    """The line text did not satisfy the target's grammar.

    ``cause`` is the exception raised by the target parser itself, so callers
    can inspect it (e.g. ``isinstance(err.cause, decimal.InvalidOperation)``).
    """

    kind = "Parse"

    def __init__(self, cause: BaseException, text: str = "") -> None:
        super().__init__(cause)
        self.text = text
        self.args = (cause, text)


class EndOfStream(InputError):
    """The source was exhausted before a line could be read."""

    kind = "EOF"

    def __init__(self, *args: object) -> None:
        # args is (None,) when rebuilt by pickle
        super().__init__(None)

    def __str__(self) -> str:
        return "EOF encountered"
