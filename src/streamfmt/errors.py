"""Format string errors and the hook every failure is reported through.

All errors derive from FormatStringError, a ValueError, and carry the index in
the format string at which they were detected.
"""

from __future__ import annotations

from streamfmt.config import ErrorPolicy
from streamfmt.logging import get_logger

log = get_logger(__name__)

__all__ = [
    "FormatStringError",
    "InvalidCharacterCode",
    "MalformedDirectiveStart",
    "MissingVariableArgument",
    "NotEnoughConversionSpecifiers",
    "NotEnoughFormatArguments",
    "TooFewFormatArguments",
    "TooManyConversionSpecifiers",
    "UnsupportedConversion",
    "UnterminatedDirective",
    "VariableArgumentNotInteger",
    "report_error",
]


class FormatStringError(ValueError):
    """Raised when a format string and its arguments do not agree.

    Attributes:
        position: Index in the format string where the problem was found,
            or None when it is not tied to a single location.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class MalformedDirectiveStart(FormatStringError):
    """A directive was expected but the cursor is not at '%'."""


class UnsupportedConversion(FormatStringError):
    """The conversion character is %a, %A, %n or not recognised."""

    def __init__(self, message: str, conversion: str, position: int | None = None) -> None:
        super().__init__(message, position)
        self.conversion = conversion


class UnterminatedDirective(FormatStringError):
    """The format string ended inside a directive."""


class VariableArgumentNotInteger(FormatStringError):
    """A '*' width or precision argument has no integer value."""


class InvalidCharacterCode(FormatStringError):
    """A %c argument is not a valid Unicode code point."""


class TooFewFormatArguments(FormatStringError):
    """The format string asks for more arguments than were supplied."""


class MissingVariableArgument(TooFewFormatArguments):
    """A '*' width or precision was requested with no argument left."""


class TooManyConversionSpecifiers(TooFewFormatArguments):
    """Directives remain in the format string after the last argument."""


NotEnoughConversionSpecifiers = MalformedDirectiveStart
NotEnoughFormatArguments = TooFewFormatArguments


def report_error(exc: FormatStringError, policy: ErrorPolicy = ErrorPolicy.RAISE) -> None:
    """Hand a failure to the configured policy. Never returns normally.

    Args:
        exc: The error detected while formatting.
        policy: RAISE re-raises exc; ABORT exits the process with its message.

    Raises:
        FormatStringError: Under ErrorPolicy.RAISE.
        SystemExit: Under ErrorPolicy.ABORT.
    """
    if policy is ErrorPolicy.ABORT:
        log.critical("format error, aborting", error=str(exc), kind=type(exc).__name__, position=exc.position)
        raise SystemExit(f"streamfmt: {exc}") from exc
    log.debug("format error", error=str(exc), kind=type(exc).__name__, position=exc.position)
    raise exc
