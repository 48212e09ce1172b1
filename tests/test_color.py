import io

from wasmkit.color import Color, ColorCode


class _Terminal(io.StringIO):
    def isatty(self):
        return True


class _Closed:
    def isatty(self):
        raise ValueError("closed")


def test_codes_through_enabled_color():
    color = Color(_Terminal())
    assert color.maybe_code(ColorCode.RED) == "\x1b[31m"
    assert color.maybe_code(ColorCode.DEFAULT) == "\x1b[0m"


def test_supports_color():
    assert Color.supports_color(_Terminal()) is True
    assert Color.supports_color(io.StringIO()) is False
    assert Color.supports_color(_Closed()) is False
    assert Color.supports_color(object()) is False


def test_default_color_is_disabled():
    color = Color()
    assert color.enabled is False
    assert color.maybe_code(ColorCode.BOLD) == ""


def test_enabled_on_terminal_writes_codes():
    out = _Terminal()
    color = Color(out)
    assert color.enabled is True
    color.write(ColorCode.GREEN)
    color.write(ColorCode.DEFAULT)
    assert out.getvalue() == ColorCode.GREEN.value + ColorCode.DEFAULT.value
    assert color.maybe_code(ColorCode.CYAN) == ColorCode.CYAN.value


def test_explicitly_disabled_writes_nothing():
    out = _Terminal()
    color = Color(out, enabled=False)
    color.write(ColorCode.RED)
    assert out.getvalue() == ""
    assert color.maybe_code(ColorCode.RED) == ""


def test_non_terminal_writes_nothing():
    out = io.StringIO()
    Color(out).write(ColorCode.BLUE)
    assert out.getvalue() == ""