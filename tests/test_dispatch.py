"""Tests for streamfmt.dispatch — the per-directive loop and its error paths."""

import pytest

from streamfmt.config import ErrorPolicy, FormatSettings
from streamfmt.dispatch import vformat
from streamfmt.errors import (
    FormatStringError,
    InvalidCharacterCode,
    MalformedDirectiveStart,
    MissingVariableArgument,
    TooFewFormatArguments,
    TooManyConversionSpecifiers,
    UnsupportedConversion,
    UnterminatedDirective,
)
from streamfmt.renderers.value import make_format_list
from streamfmt.sink import Sink, StringSink
from streamfmt.state import RenderingConfiguration
from streamfmt.types import Alignment


def run(fmt: str, *values, settings: FormatSettings | None = None) -> str:
    sink = StringSink()
    vformat(sink, fmt, make_format_list(*values), settings)
    return sink.getvalue()


class RecordingArg:
    """FormatArg that reports what the dispatch loop handed it."""

    def __init__(self, text: str = "v", as_int: int = 0) -> None:
        self.text = text
        self.as_int = as_int
        self.calls: list[tuple[str, int, int | None, bool]] = []

    def render(self, sink: Sink, conversion: str, truncate_at: int | None = None) -> None:
        self.calls.append((conversion, sink.config.width, truncate_at, sink.config.show_sign))
        sink.write(self.text)

    def to_int(self) -> int:
        return self.as_int


# ─── Basic directives ────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "fmt,values,expected",
    [
        ("%%d", (), "%d"),
        ("%5d", (42,), "   42"),
        ("%-5d|", (42,), "42   |"),
        ("%05d", (-3,), "-0003"),
        ("% d", (7,), " 7"),
        ("%+d", (7,), "+7"),
        ("%+ d", (7,), "+7"),
        ("% +d", (7,), "+7"),
        ("%.3d", (5,), "005"),
        ("%x", (255,), "ff"),
        ("%X", (255,), "FF"),
        ("%#x", (255,), "0xff"),
        ("%.2s", ("hello",), "he"),
        ("%*d", (3, 9), "  9"),
    ],
)
def test_printf_behaviour(fmt, values, expected):
    assert run(fmt, *values) == expected


def test_literal_text_around_directives():
    assert run("a=%d, b=%s.", 1, "two") == "a=1, b=two."


def test_no_arguments_literal_only():
    assert run("100%% literal") == "100% literal"


def test_empty_format_no_arguments():
    assert run("") == ""


# ─── Space-padded positives ──────────────────────────────────────────────────


def test_space_flag_negative_number_unchanged():
    assert run("% d", -7) == "-7"


def test_space_flag_with_zero_fill():
    assert run("% 05d", 7) == " 0007"


def test_space_flag_on_float():
    assert run("% .2f", 1.5) == " 1.50"


def test_space_flag_replaces_every_plus():
    assert run("% s", "a+b") == "a b"


def test_space_flag_renders_with_sign_forced_on():
    arg = RecordingArg("+1")
    sink = StringSink()
    vformat(sink, "[% 4d]", [arg])
    assert sink.getvalue() == "[ 1]"
    assert arg.calls == [("d", 4, None, True)]


# ─── Variable width and precision ───────────────────────────────────────────


def test_negative_variable_width_left_aligns():
    assert run("%*d|", -4, 7) == "7   |"


def test_variable_width_and_precision():
    assert run("%*.*f|", 8, 2, 3.14159) == "    3.14|"


def test_variable_precision_on_integer():
    assert run("%.*d", 3, 5) == "005"


def test_variable_precision_on_string():
    assert run("%.*s", 2, "hello") == "he"


def test_custom_arg_supplies_width():
    width = RecordingArg(as_int=6)
    value = RecordingArg("x")
    sink = StringSink()
    vformat(sink, "%*s", [width, value])
    assert sink.getvalue() == "x"
    assert width.calls == []
    assert value.calls == [("s", 6, None, False)]


def test_directive_arguments_follow_star_arguments():
    assert run("%*d|%s", 3, 1, "end") == "  1|end"


# ─── Argument/directive count agreement ──────────────────────────────────────


def test_two_directives_one_argument():
    with pytest.raises(TooFewFormatArguments) as exc_info:
        run("%d %d", 1)
    assert isinstance(exc_info.value, TooManyConversionSpecifiers)
    assert exc_info.value.position == 3


def test_directive_with_no_arguments():
    with pytest.raises(TooManyConversionSpecifiers):
        run("%d")


def test_star_width_takes_the_only_argument():
    with pytest.raises(TooFewFormatArguments) as exc_info:
        run("%*d", 3)
    assert type(exc_info.value) is TooFewFormatArguments


def test_star_precision_with_no_argument_left():
    with pytest.raises(MissingVariableArgument):
        run("%*.*d", 3)


def test_extra_arguments_are_ignored_by_default():
    assert run("%d!", 1, 2, 3) == "1!"


def test_extra_arguments_rejected_when_strict():
    with pytest.raises(MalformedDirectiveStart):
        run("%d!", 1, 2, settings=FormatSettings(strict_arguments=True))


def test_strict_accepts_exact_match():
    assert run("%d-%d", 1, 2, settings=FormatSettings(strict_arguments=True)) == "1-2"


@pytest.mark.parametrize(
    "fmt,error",
    [
        ("%a", UnsupportedConversion),
        ("%A", UnsupportedConversion),
        ("%n", UnsupportedConversion),
        ("%q", UnsupportedConversion),
        ("%", UnterminatedDirective),
        ("abc%-5", UnterminatedDirective),
    ],
)
def test_malformed_directives(fmt, error):
    with pytest.raises(error):
        run(fmt, 1.0)


def test_all_errors_are_value_errors():
    with pytest.raises(ValueError):
        run("%d %d", 1)


# ─── Partial output and ambient state ────────────────────────────────────────


def test_text_before_failure_stays_written():
    sink = StringSink()
    with pytest.raises(FormatStringError):
        vformat(sink, "%d and %d", make_format_list(1))
    assert sink.getvalue() == "1 and "


AMBIENT = RenderingConfiguration(width=12, fill="*", alignment=Alignment.LEFT, precision=2, show_sign=True)


@pytest.mark.parametrize(
    "fmt,values",
    [
        ("%05d|%-8s|%+.3e", (1, "x", 2.0)),
        ("%d %d", (1,)),
        ("%*.*d", (3,)),
        ("%a", (1.0,)),
        ("% d", (4,)),
    ],
)
def test_ambient_configuration_is_restored(fmt, values):
    sink = StringSink(AMBIENT.copy())
    before = sink.snapshot()
    try:
        vformat(sink, fmt, make_format_list(*values))
    except FormatStringError:
        pass
    assert sink.config is before
    assert sink.config == AMBIENT


def test_ambient_configuration_does_not_leak_into_directives():
    sink = StringSink(AMBIENT.copy())
    vformat(sink, "[%d]", make_format_list(5))
    assert sink.getvalue() == "[5]"


def test_repeated_calls_are_identical():
    sink = StringSink(AMBIENT.copy())
    args = make_format_list(-3, "abc", 2.5)
    vformat(sink, "%05d %-4s %.1f\n", args)
    vformat(sink, "%05d %-4s %.1f\n", args)
    first, second = sink.getvalue().splitlines()
    assert first == second == "-0003 abc  2.5"


# ─── Error policy ────────────────────────────────────────────────────────────


def test_abort_policy_exits():
    sink = StringSink()
    with pytest.raises(SystemExit) as exc_info:
        vformat(sink, "%d %d", make_format_list(1), FormatSettings(error_policy=ErrorPolicy.ABORT))
    assert "Too many conversion specifiers" in str(exc_info.value.code)


def test_abort_policy_still_restores_ambient():
    sink = StringSink(AMBIENT.copy())
    with pytest.raises(SystemExit):
        vformat(sink, "%n", make_format_list(0), FormatSettings(error_policy=ErrorPolicy.ABORT))
    assert sink.config == AMBIENT


def test_ambient_object_itself_is_put_back():
    ambient = AMBIENT.copy()
    sink = StringSink(ambient)
    vformat(sink, "%-6.2f|%#x", make_format_list(1.0, 10))
    assert sink.config is ambient


def test_sink_base_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Sink()


# ─── %c code points ──────────────────────────────────────────────────────────


@pytest.mark.parametrize("code", [-1, 0x110000])
def test_char_out_of_range_is_a_format_error(code):
    sink = StringSink()
    with pytest.raises(InvalidCharacterCode):
        vformat(sink, "[%c]", make_format_list(code))
    assert sink.getvalue() == "["


def test_char_out_of_range_aborts_under_abort_policy():
    sink = StringSink()
    with pytest.raises(SystemExit) as exc_info:
        vformat(sink, "%c", make_format_list(-1), FormatSettings(error_policy=ErrorPolicy.ABORT))
    assert "not a valid code point" in str(exc_info.value.code)
