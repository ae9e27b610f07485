"""streamfmt: printf-style format strings rendered through pluggable value formatters."""

from streamfmt.api import format, format_to, printf, printfln, vformat
from streamfmt.config import ErrorPolicy, FormatSettings
from streamfmt.errors import (
    FormatStringError,
    InvalidCharacterCode,
    MalformedDirectiveStart,
    MissingVariableArgument,
    NotEnoughConversionSpecifiers,
    NotEnoughFormatArguments,
    TooFewFormatArguments,
    TooManyConversionSpecifiers,
    UnsupportedConversion,
    UnterminatedDirective,
    VariableArgumentNotInteger,
)
from streamfmt.renderers import FormatArg, ValueArg, make_format_list
from streamfmt.sink import Sink, StreamSink, StringSink
from streamfmt.state import RenderingConfiguration
from streamfmt.types import Alignment, FloatStyle, NumericBase

__all__ = [
    "Alignment",
    "ErrorPolicy",
    "FloatStyle",
    "FormatArg",
    "FormatSettings",
    "FormatStringError",
    "InvalidCharacterCode",
    "MalformedDirectiveStart",
    "MissingVariableArgument",
    "NotEnoughConversionSpecifiers",
    "NotEnoughFormatArguments",
    "NumericBase",
    "RenderingConfiguration",
    "Sink",
    "StreamSink",
    "StringSink",
    "TooFewFormatArguments",
    "TooManyConversionSpecifiers",
    "UnsupportedConversion",
    "UnterminatedDirective",
    "ValueArg",
    "VariableArgumentNotInteger",
    "format",
    "format_to",
    "make_format_list",
    "printf",
    "printfln",
    "vformat",
]
