"""Directive parser — one %[flags][width][.precision][length]type unit at a time.

The stages run in a fixed order and earlier stages shape later ones: flags
decide how a negative '*' width and the integer precision rule behave, and
whether precision was given decides what the conversion character does.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from streamfmt.errors import (
    MalformedDirectiveStart,
    MissingVariableArgument,
    UnsupportedConversion,
    UnterminatedDirective,
    VariableArgumentNotInteger,
)
from streamfmt.renderers.base import FormatArg
from streamfmt.state import RenderingConfiguration
from streamfmt.types import Alignment, FloatStyle, NumericBase

LENGTH_MODIFIERS = "lhLjzt"
INTEGER_CONVERSIONS = "diuoxXp"
UNSUPPORTED_CONVERSIONS = "aAn"


@dataclass
class Directive:
    """Result of parsing one directive.

    `space_pad_positive` and `truncate_at` are the parts of printf behaviour
    the configuration record has no field for; the dispatch loop handles them.
    """

    config: RenderingConfiguration
    conversion: str
    start: int
    end: int
    arg_index: int
    space_pad_positive: bool = False
    truncate_at: int | None = None


@dataclass
class _Cursor:
    """Parser cursor over a single directive."""

    src: str
    pos: int

    def eof(self) -> bool:
        return self.pos >= len(self.src)

    def peek(self) -> str:
        return self.src[self.pos] if self.pos < len(self.src) else ""

    def consume(self, ch: str) -> bool:
        if self.peek() == ch:
            self.pos += 1
            return True
        return False

    def read_int(self) -> int:
        start = self.pos
        while self.pos < len(self.src) and "0" <= self.src[self.pos] <= "9":
            self.pos += 1
        return int(self.src[start : self.pos]) if self.pos > start else 0

    def at_digit(self) -> bool:
        return "0" <= self.peek() <= "9"


def _variable_int(args: Sequence[FormatArg], index: int, what: str, position: int) -> int:
    if index >= len(args):
        raise MissingVariableArgument(f"Not enough arguments to read variable {what}", position)
    try:
        return int(args[index].to_int())
    except (TypeError, ValueError, OverflowError) as exc:
        raise VariableArgumentNotInteger(
            f"Cannot convert argument {index} to an integer for use as variable {what}", position
        ) from exc


def parse_directive(fmt: str, pos: int, args: Sequence[FormatArg], arg_index: int) -> Directive:
    """Parse the directive starting at fmt[pos].

    Args:
        fmt: The whole format string.
        pos: Index of the '%' opening the directive.
        args: Argument list; '*' width and precision read from it.
        arg_index: Index of the next unread argument.

    Returns:
        The parsed Directive. Its arg_index has moved past any argument taken
        by '*', and points at the argument the directive formats.

    Raises:
        MalformedDirectiveStart: fmt[pos] is not '%'.
        MissingVariableArgument: '*' with no argument left.
        VariableArgumentNotInteger: '*' argument is not an integer.
        UnsupportedConversion: %a, %A, %n or an unknown conversion character.
        UnterminatedDirective: The string ended before the conversion character.
    """
    if pos >= len(fmt) or fmt[pos] != "%":
        raise MalformedDirectiveStart("Not enough conversion specifiers in format string", pos)

    cfg = RenderingConfiguration.defaults()
    cur = _Cursor(fmt, pos + 1)
    space_pad_positive = False
    width_extra = 0
    width_set = False
    precision_set = False

    # 1) flags
    while True:
        ch = cur.peek()
        if ch == "#":
            cfg.show_point = True
            cfg.show_base = True
        elif ch == "0":
            # overridden by left alignment
            if cfg.alignment is not Alignment.LEFT:
                cfg.fill = "0"
                cfg.alignment = Alignment.INTERNAL
        elif ch == "-":
            cfg.fill = " "
            cfg.alignment = Alignment.LEFT
        elif ch == " ":
            # overridden by '+'
            if not cfg.show_sign:
                space_pad_positive = True
        elif ch == "+":
            cfg.show_sign = True
            space_pad_positive = False
            width_extra = 1
        else:
            break
        cur.pos += 1

    # 2) width
    if cur.at_digit():
        width_set = True
        cfg.width = cur.read_int()
    if cur.peek() == "*":
        width_set = True
        width = _variable_int(args, arg_index, "width", cur.pos)
        arg_index += 1
        if width < 0:
            cfg.fill = " "
            cfg.alignment = Alignment.LEFT
            width = -width
        cfg.width = width
        cur.pos += 1

    # 3) precision
    if cur.consume("."):
        precision = 0
        precision_set = True
        if cur.peek() == "*":
            precision = _variable_int(args, arg_index, "precision", cur.pos)
            arg_index += 1
            cur.pos += 1
            if precision < 0:
                # as in C, a negative variable precision counts as none given
                precision_set = False
                precision = cfg.precision
        elif cur.at_digit():
            precision = cur.read_int()
        elif cur.consume("-"):
            cur.read_int()
        cfg.precision = precision

    # 4) length modifiers carry no meaning here
    while cur.peek() and cur.peek() in LENGTH_MODIFIERS:
        cur.pos += 1

    # 5) conversion character
    if cur.eof():
        raise UnterminatedDirective("Conversion spec incorrectly terminated by end of string", cur.pos)
    conversion = cur.peek()
    truncate_at = None
    if conversion in "diu":
        cfg.base = NumericBase.DECIMAL
    elif conversion == "o":
        cfg.base = NumericBase.OCTAL
    elif conversion in "xXp":
        cfg.base = NumericBase.HEXADECIMAL
        cfg.uppercase = conversion == "X"
        if conversion == "p":
            cfg.show_base = True
    elif conversion in "eE":
        cfg.float_style = FloatStyle.SCIENTIFIC
        cfg.base = NumericBase.DECIMAL
        cfg.uppercase = conversion == "E"
    elif conversion in "fF":
        cfg.float_style = FloatStyle.FIXED
        cfg.uppercase = conversion == "F"
    elif conversion in "gG":
        cfg.float_style = FloatStyle.GENERAL
        cfg.base = NumericBase.DECIMAL
        cfg.uppercase = conversion == "G"
    elif conversion == "c":
        pass
    elif conversion == "s":
        if precision_set:
            truncate_at = cfg.precision
        cfg.bool_as_word = True
    elif conversion in UNSUPPORTED_CONVERSIONS:
        if conversion == "n":
            message = "%n conversion spec not supported"
        else:
            message = "the %a and %A conversion specs are not supported"
        raise UnsupportedConversion(message, conversion, cur.pos)
    else:
        raise UnsupportedConversion(f"unknown conversion spec '%{conversion}'", conversion, cur.pos)

    if conversion in INTEGER_CONVERSIONS and precision_set and not width_set:
        # printf's integer precision is a minimum digit count; model it as a
        # zero-filled width when the width is not otherwise in use
        cfg.width = cfg.precision + width_extra
        cfg.alignment = Alignment.INTERNAL
        cfg.fill = "0"

    return Directive(
        config=cfg,
        conversion=conversion,
        start=pos,
        end=cur.pos + 1,
        arg_index=arg_index,
        space_pad_positive=space_pad_positive,
        truncate_at=truncate_at,
    )
