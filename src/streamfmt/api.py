"""Public entry points."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import IO, Any

from streamfmt import dispatch
from streamfmt.config import FormatSettings
from streamfmt.renderers.base import FormatArg
from streamfmt.renderers.value import make_format_list
from streamfmt.sink import Sink, StringSink, as_sink


def vformat(
    out: Sink | IO[str],
    fmt: str,
    args: Sequence[FormatArg],
    settings: FormatSettings | None = None,
) -> None:
    """Format a prepared argument list (see make_format_list) into out."""
    dispatch.vformat(as_sink(out), fmt, args, settings)


def format_to(out: Sink | IO[str], fmt: str, *args: Any, settings: FormatSettings | None = None) -> None:
    """Format args according to fmt and write the result to a sink or text stream.

    Args:
        out: A Sink, or any object with a write(str) method.
        fmt: printf-style format string.
        *args: Values to format; FormatArg instances are used as they are.
        settings: Error policy and argument strictness.

    Raises:
        FormatStringError: If fmt and args do not agree.
    """
    vformat(out, fmt, make_format_list(*args), settings)


def format(fmt: str, *args: Any, settings: FormatSettings | None = None) -> str:
    """Format args according to fmt and return the text.

    Example:
        >>> format("%-6s|%05.1f|%#x", "id", 3.14159, 255)
        'id    |003.1|0xff'
    """
    sink = StringSink()
    vformat(sink, fmt, make_format_list(*args), settings)
    return sink.getvalue()


def printf(fmt: str, *args: Any, settings: FormatSettings | None = None) -> None:
    """Format to stdout."""
    format_to(sys.stdout, fmt, *args, settings=settings)


def printfln(fmt: str, *args: Any, settings: FormatSettings | None = None) -> None:
    """Format to stdout and end the line."""
    format_to(sys.stdout, fmt, *args, settings=settings)
    sys.stdout.write("\n")
