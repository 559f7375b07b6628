#
# SI Scale - Tools Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from siscale.tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class AnyUserClass:
    """A simple class for testing user-defined types"""
    pass


class BrokenRepr:
    def __repr__(self):
        raise RuntimeError("boom")


# Tests ----------------------------------------------------------------------------------------------------------------

class TestFmtType:

    @pytest.mark.parametrize(
        "obj, expected",
        [
            (42, "<type: int>"),
            (int, "<type: int>"),
            ("kilo", "<type: str>"),
            (None, "<type: NoneType>"),
            (AnyUserClass(), "<type: AnyUserClass>"),
        ],
        ids=["instance", "type", "str", "none", "user-class"],
    )
    def test_fmt_type(self, obj, expected):
        assert fmt_type(obj) == expected

    def test_truncated(self):
        out = fmt_type(AnyUserClass, max_repr=5)
        assert out == "<type: An...>"


class TestFmtValue:

    @pytest.mark.parametrize(
        "value, expected",
        [
            (42, "<int: 42>"),
            ("kilo", "<str: 'kilo'>"),
            (1.5, "<float: 1.5>"),
            (None, "<NoneType: None>"),
        ],
        ids=["int", "str", "float", "none"],
    )
    def test_fmt_value(self, value, expected):
        assert fmt_value(value) == expected

    def test_escapes_closing_bracket(self):
        assert fmt_value("a>b") == "<str: 'a\\>b'>"

    def test_broken_repr(self):
        out = fmt_value(BrokenRepr())
        assert out.startswith("<BrokenRepr: ")
        assert "repr failed: RuntimeError" in out

    def test_truncates_quoted_repr(self):
        out = fmt_value("x" * 50, max_repr=10)
        assert out == "<str: 'xxxxxx'...>"

    def test_no_truncation_when_unlimited(self):
        text = "y" * 300
        assert fmt_value(text, max_repr=0) == f"<str: '{text}'>"
