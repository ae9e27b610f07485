"""Default render capability for plain Python values."""

from __future__ import annotations

import numbers
from decimal import Decimal
from typing import Any

from streamfmt.errors import InvalidCharacterCode
from streamfmt.renderers.base import FormatArg
from streamfmt.renderers.numeric import float_parts, integer_parts, pad
from streamfmt.sink import Sink
from streamfmt.types import FloatStyle


def _char(code: int) -> str:
    try:
        return chr(code)
    except (ValueError, OverflowError) as exc:
        raise InvalidCharacterCode(f"%c argument {code} is not a valid code point") from exc


class ValueArg:
    """Wraps a Python value so the dispatch loop can render it.

    Integers, floats, bools and one-character %c codes get number-aware
    rendering; anything else is written as str(value).
    """

    __slots__ = ("value",)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"ValueArg({self.value!r})"

    def render(self, sink: Sink, conversion: str, truncate_at: int | None = None) -> None:
        cfg = sink.config
        value = self.value
        numeric = True
        if isinstance(value, bool):
            if cfg.bool_as_word:
                lead, body, numeric = "", "true" if value else "false", False
            else:
                lead, body = integer_parts(int(value), cfg)
        elif isinstance(value, numbers.Integral):
            if conversion == "c":
                lead, body, numeric = "", _char(int(value)), False
            elif cfg.float_style is not FloatStyle.UNSET:
                lead, body = float_parts(float(value), cfg)
            else:
                lead, body = integer_parts(int(value), cfg)
        elif isinstance(value, (numbers.Real, Decimal)):
            lead, body = float_parts(float(value), cfg)
        else:
            lead, body, numeric = "", str(value), False

        if truncate_at is not None:
            lead, body, numeric = "", (lead + body)[:truncate_at], False
        sink.write(pad(lead, body, cfg, numeric))

    def to_int(self) -> int:
        value = self.value
        if isinstance(value, (numbers.Real, Decimal)):
            return int(value)
        if isinstance(value, str):
            return int(value.strip())
        raise TypeError(f"cannot convert {type(value).__name__} to int")


def make_format_list(*values: Any) -> tuple[FormatArg, ...]:
    """Wrap each value as a FormatArg; values that already are one pass through."""
    return tuple(v if isinstance(v, FormatArg) else ValueArg(v) for v in values)
