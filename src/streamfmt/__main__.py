"""CLI entry point for streamfmt."""

import codecs
import logging
import sys

import click

from streamfmt.api import format as format_text
from streamfmt.config import FormatSettings
from streamfmt.errors import FormatStringError
from streamfmt.logging import configure_logging
from streamfmt.renderers.value import ValueArg
from streamfmt.sink import Sink


def unescape(s: str) -> str:
    """Process backslash escapes such as \\n, \\t and \\x41."""
    return codecs.decode(s.encode("latin-1", "backslashreplace"), "unicode_escape")


def coerce_arg(arg: str) -> int | float | str:
    """Turn a command-line word into the value printf would see."""
    for convert in (int, lambda s: int(s, 0), float):
        try:
            return convert(arg)
        except ValueError:
            continue
    return arg


class WordArg:
    """A command-line word: printed as typed by %s and %c, as a number elsewhere."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.number = coerce_arg(text)

    def render(self, sink: Sink, conversion: str, truncate_at: int | None = None) -> None:
        if conversion == "s":
            ValueArg(self.text).render(sink, conversion, truncate_at)
        elif conversion == "c":
            ValueArg(self.text[:1]).render(sink, conversion, truncate_at)
        else:
            ValueArg(self.number).render(sink, conversion, truncate_at)

    def to_int(self) -> int:
        return ValueArg(self.number).to_int()


@click.command(context_settings={"ignore_unknown_options": True})
@click.argument("fmt", metavar="FORMAT")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.option("--newline", "-n", "newline", is_flag=True, help="Append a newline to the output")
@click.option("--strict", "strict", is_flag=True, help="Treat arguments left over after the last directive as an error")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log each directive to stderr")
def main(fmt: str, args: tuple[str, ...], newline: bool, strict: bool, output: str | None, verbose: bool) -> None:
    """Format and print ARGS according to a printf-style FORMAT."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING, sys.stderr)

    try:
        text = unescape(fmt)
    except UnicodeDecodeError as e:
        click.echo(f"format error: bad escape sequence: {e.reason}", err=True)
        sys.exit(1)

    values = [WordArg(a) for a in args]
    try:
        rendered = format_text(text, *values, settings=FormatSettings(strict_arguments=strict))
    except FormatStringError as e:
        click.echo(f"format error: {e}", err=True)
        sys.exit(1)

    if newline:
        rendered += "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
