"""Shared type definitions for streamfmt.

Enums used by the directive parser, the configuration record and the renderers.
"""

from __future__ import annotations

from enum import Enum, auto


class Alignment(Enum):
    LEFT = auto()  # %-5d
    RIGHT = auto()  # %5d
    INTERNAL = auto()  # %05d, fill between sign/prefix and digits

    @classmethod
    def default(cls) -> Alignment:
        return cls.RIGHT


class NumericBase(Enum):
    DECIMAL = 10
    OCTAL = 8
    HEXADECIMAL = 16

    @classmethod
    def default(cls) -> NumericBase:
        return cls.DECIMAL


class FloatStyle(Enum):
    UNSET = auto()  # no float conversion seen, behaves like general
    FIXED = auto()  # %f
    SCIENTIFIC = auto()  # %e
    GENERAL = auto()  # %g

    @classmethod
    def default(cls) -> FloatStyle:
        return cls.UNSET
