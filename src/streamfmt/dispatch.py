"""Dispatch loop — walk the format string and render each argument in turn."""

from __future__ import annotations

from collections.abc import Sequence

from streamfmt.config import DEFAULT_SETTINGS, FormatSettings
from streamfmt.errors import FormatStringError, TooFewFormatArguments, TooManyConversionSpecifiers, report_error
from streamfmt.logging import get_logger
from streamfmt.parsers.directive import Directive, parse_directive
from streamfmt.parsers.literal import scan_literal
from streamfmt.renderers.base import FormatArg
from streamfmt.sink import Sink

log = get_logger(__name__)


def _render_directive(sink: Sink, directive: Directive, arg: FormatArg) -> None:
    sink.apply(directive.config)
    if not directive.space_pad_positive:
        arg.render(sink, directive.conversion, directive.truncate_at)
        return
    # No configuration flag means "space where '+' would go": render with the
    # sign forced on, then swap every '+' for a space.
    scratch = sink.isolated(show_sign=True)
    arg.render(scratch, directive.conversion, directive.truncate_at)
    sink.write(scratch.getvalue().replace("+", " "))


def _run(sink: Sink, fmt: str, args: Sequence[FormatArg], settings: FormatSettings) -> None:
    num_args = len(args)
    pos = 0
    arg_index = 0
    while arg_index < num_args:
        pos = scan_literal(sink, fmt, pos)
        if pos >= len(fmt) and not settings.strict_arguments:
            log.debug("unused arguments", unused=num_args - arg_index)
            break
        directive = parse_directive(fmt, pos, args, arg_index)
        arg_index = directive.arg_index
        if arg_index >= num_args:
            raise TooFewFormatArguments("Not enough format arguments", directive.start)
        log.debug(
            "directive",
            conversion=directive.conversion,
            start=directive.start,
            arg_index=arg_index,
            width=directive.config.width,
            precision=directive.config.precision,
        )
        _render_directive(sink, directive, args[arg_index])
        pos = directive.end
        arg_index += 1

    pos = scan_literal(sink, fmt, pos)
    if pos < len(fmt):
        raise TooManyConversionSpecifiers("Too many conversion specifiers in format string", pos)


def vformat(sink: Sink, fmt: str, args: Sequence[FormatArg], settings: FormatSettings | None = None) -> None:
    """Format args according to fmt and write the result to sink.

    The sink's configuration is the same after the call as before it, whether
    the call succeeds or fails. Text written before a failure stays written.

    Args:
        sink: Output target.
        fmt: printf-style format string.
        args: One FormatArg per logical argument, '*' values included.
        settings: Error policy and argument strictness; defaults when None.

    Raises:
        FormatStringError: Through the error hook, under ErrorPolicy.RAISE.
        SystemExit: Through the error hook, under ErrorPolicy.ABORT.
    """
    settings = settings if settings is not None else DEFAULT_SETTINGS
    ambient = sink.snapshot()
    try:
        _run(sink, fmt, args, settings)
    except FormatStringError as exc:
        report_error(exc, settings.error_policy)
    finally:
        sink.restore(ambient)
