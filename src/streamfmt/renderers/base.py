"""Base renderer protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from streamfmt.sink import Sink


@runtime_checkable
class FormatArg(Protocol):
    """Protocol that every formatting argument must implement."""

    def render(self, sink: Sink, conversion: str, truncate_at: int | None = None) -> None:
        """Write the value to sink under sink.config.

        conversion is the directive's type character; truncate_at, when not
        None, caps the number of characters of the value's text.
        """
        ...

    def to_int(self) -> int:
        """Integer value, used when the argument feeds a '*' width or precision."""
        ...
