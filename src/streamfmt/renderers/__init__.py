"""Render capability: the FormatArg protocol and the default value renderer."""

from streamfmt.renderers.base import FormatArg
from streamfmt.renderers.value import ValueArg, make_format_list

__all__ = [
    "FormatArg",
    "ValueArg",
    "make_format_list",
]
