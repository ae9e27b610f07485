"""Numeric text and padding under a RenderingConfiguration.

Numbers are produced as (lead, body) pairs: lead holds the sign and any base
prefix, body the digits. Keeping them apart is what internal alignment needs.
"""

from __future__ import annotations

import math

from streamfmt.state import RenderingConfiguration
from streamfmt.types import Alignment, FloatStyle, NumericBase

_FLOAT_TYPES: dict[FloatStyle, str] = {
    FloatStyle.UNSET: "g",
    FloatStyle.GENERAL: "g",
    FloatStyle.FIXED: "f",
    FloatStyle.SCIENTIFIC: "e",
}


def integer_parts(value: int, cfg: RenderingConfiguration) -> tuple[str, str]:
    negative = value < 0
    magnitude = -value if negative else value
    prefix = ""
    if cfg.base is NumericBase.HEXADECIMAL:
        digits = format(magnitude, "X" if cfg.uppercase else "x")
        if cfg.show_base and value != 0:
            prefix = "0X" if cfg.uppercase else "0x"
    elif cfg.base is NumericBase.OCTAL:
        digits = format(magnitude, "o")
        if cfg.show_base and value != 0:
            prefix = "0"
    else:
        digits = format(magnitude, "d")
    if negative:
        sign = "-"
    elif cfg.show_sign and cfg.base is NumericBase.DECIMAL:
        sign = "+"
    else:
        sign = ""
    return sign + prefix, digits


def float_parts(value: float, cfg: RenderingConfiguration) -> tuple[str, str]:
    # -0.0 keeps its sign, nan never gets one
    negative = math.copysign(1.0, value) < 0 and not math.isnan(value)
    spec = f"{'#' if cfg.show_point else ''}.{cfg.precision}{_FLOAT_TYPES[cfg.float_style]}"
    body = format(abs(value), spec)
    if cfg.uppercase:
        body = body.upper()
    if negative:
        sign = "-"
    elif cfg.show_sign:
        sign = "+"
    else:
        sign = ""
    return sign, body


def pad(lead: str, body: str, cfg: RenderingConfiguration, numeric: bool = True) -> str:
    """Pad lead + body to cfg.width with cfg.fill.

    Internal alignment puts the fill between lead and body; for text that is
    not a number it behaves like right alignment.
    """
    gap = cfg.width - len(lead) - len(body)
    if gap <= 0:
        return lead + body
    fill = cfg.fill * gap
    if cfg.alignment is Alignment.LEFT:
        return lead + body + fill
    if cfg.alignment is Alignment.INTERNAL and numeric:
        return lead + fill + body
    return fill + lead + body
