"""Format string parsing: literal text and directives."""

from streamfmt.parsers.directive import Directive, parse_directive
from streamfmt.parsers.literal import scan_literal

__all__ = [
    "Directive",
    "parse_directive",
    "scan_literal",
]
