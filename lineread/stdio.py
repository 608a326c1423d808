"""Bindings of the reader to the process's standard input and output."""

from __future__ import annotations

import sys
import threading
from typing import Any, Dict, Optional

from lineread.reader import ReadResult, read_input, read_input_tolerant

# Held for the duration of one call, like a lock on the standard streams.
# Readers that use sys.stdin directly are not serialised by it.
_STDIO_LOCK = threading.RLock()


def _stdin_source(options: Dict[str, Any]) -> Any:
    # An explicit encoding only applies to bytes, so bypass the text layer.
    if "encoding" in options:
        return getattr(sys.stdin, "buffer", sys.stdin)
    return sys.stdin


def read_stdin(target: Any = str, prompt: Optional[str] = None, **options: Any) -> ReadResult:
    with _STDIO_LOCK:
        options.setdefault("output", sys.stdout)
        return read_input(_stdin_source(options), target, prompt, **options)


def read_stdin_tolerant(target: Any = str, prompt: Optional[str] = None, **options: Any) -> ReadResult:
    with _STDIO_LOCK:
        options.setdefault("output", sys.stdout)
        return read_input_tolerant(_stdin_source(options), target, prompt, **options)


def input_value(target: Any = str, prompt: Optional[str] = None, **options: Any) -> Any:
    """Read a value from stdin, raising the ``InputError`` subclass on failure or EOF."""
    return read_stdin(target, prompt, **options).unwrap()


def input_value_or_none(target: Any = str, prompt: Optional[str] = None, **options: Any) -> Any:
    """Like ``input_value`` but returns ``None`` once stdin is exhausted."""
    return read_stdin_tolerant(target, prompt, **options).unwrap()
