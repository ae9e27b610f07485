"""Rendering configuration record and its defaults."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from streamfmt.types import Alignment, FloatStyle, NumericBase

DEFAULT_PRECISION = 6


@dataclass
class RenderingConfiguration:
    """How one value is laid out on a sink.

    A fresh instance is built for every directive; the instance attached to a
    sink between calls is the ambient configuration.
    """

    alignment: Alignment = field(default_factory=Alignment.default)
    fill: str = " "
    width: int = 0
    precision: int = DEFAULT_PRECISION
    base: NumericBase = field(default_factory=NumericBase.default)
    uppercase: bool = False
    float_style: FloatStyle = field(default_factory=FloatStyle.default)
    show_sign: bool = False
    show_base: bool = False
    show_point: bool = False
    bool_as_word: bool = False

    @classmethod
    def defaults(cls) -> RenderingConfiguration:
        return cls()

    def copy(self, **changes) -> RenderingConfiguration:
        return replace(self, **changes)
