"""Literal text between directives."""

from __future__ import annotations

from streamfmt.sink import Sink


def scan_literal(sink: Sink, fmt: str, pos: int = 0) -> int:
    """Write literal text starting at pos and return where the next directive starts.

    "%%" writes a single '%' and scanning carries on after it. The returned
    index is either len(fmt) or the position of a '%' opening a directive.
    """
    start = pos
    while True:
        pct = fmt.find("%", pos)
        if pct < 0:
            sink.write(fmt[start:])
            return len(fmt)
        if not fmt.startswith("%%", pct):
            sink.write(fmt[start:pct])
            return pct
        # keep the first '%' of the pair, drop the second
        sink.write(fmt[start : pct + 1])
        start = pos = pct + 2
