#
# SI Scale - Preset Tests
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from siscale.base import Base
from siscale.constraint import UNIT_AND_ABOVE, UNIT_AND_BELOW
from siscale.helpers import (
    bibytes, bibytes1, bibytes2, number_, scale_fn, seconds, seconds3, sibytes, sibytes1, sibytes2, sibytes_,
)


# Tests ----------------------------------------------------------------------------------------------------------------

class TestPresets:
    """Tests for the unit presets."""

    @pytest.mark.parametrize('x, expected', [
        pytest.param(1234.5678, "1234.5678 s", id='no_kilo'),
        pytest.param(12.4e-7, "1.24 µs", id='micro'),
        pytest.param(12e-7, "1.2 µs", id='micro_short'),
        pytest.param(1.0, "1 s", id='whole'),
    ])
    def test_seconds(self, x, expected):
        assert seconds(x) == expected

    @pytest.mark.parametrize('x, expected', [
        pytest.param(1234.5678, "1234.568 s", id='no_kilo'),
        pytest.param(12.4e-7, "1.240 µs", id='micro'),
        pytest.param(12e-7, "1.200 µs", id='micro_short'),
        pytest.param(1.0, "1.000 s", id='whole'),
    ])
    def test_seconds3(self, x, expected):
        assert seconds3(x) == expected

    def test_seconds_below_yocto(self):
        text = seconds(1e-30)
        assert text.startswith("0.000001")
        assert text.endswith(" ys")
        assert "e" not in text

    def test_padding_applies_to_text(self):
        assert f"result is {seconds(12.4e-7):>10}" == "result is    1.24 µs"
        assert f"result is {seconds3(12.4e-7):>10}" == "result is   1.240 µs"
        assert f"result is {sibytes1(16):>10}" == "result is     16.0 B"

    @pytest.mark.parametrize('x, expected', [
        pytest.param(12_345_678, "12.3 MB", id='mega'),
        pytest.param(16, "16.0 B", id='unit'),
        pytest.param(0.12, "0.1 B", id='no_milli'),
        pytest.param(2.3e12, "2.3 TB", id='tera'),
    ])
    def test_sibytes1(self, x, expected):
        assert sibytes1(x) == expected

    def test_sibytes(self):
        assert sibytes(1_234_567) == "1.234567 MB"
        assert sibytes2(2.3e12) == "2.30 TB"
        assert sibytes_(1_234_567) == "1_234_567 B"
        assert sibytes_(0.00001234) == "0.000_012_34 B"

    @pytest.mark.parametrize('x, expected', [
        pytest.param(12_345_678, "11.8 MiB", id='mebi'),
        pytest.param(16 * 1024, "16.0 kiB", id='kibi'),
        pytest.param(16, "16.0 B", id='unit'),
        pytest.param(0.12, "0.1 B", id='no_milli'),
    ])
    def test_bibytes1(self, x, expected):
        assert bibytes1(x) == expected

    def test_bibytes(self):
        assert bibytes(1.25 * 2 ** 20) == "1.25 MiB"
        assert bibytes(16) == "16 B"
        assert bibytes2(1.25 * 2 ** 20) == "1.25 MiB"

    @pytest.mark.parametrize('x, expected', [
        pytest.param(1515, "1_515", id='int'),
        pytest.param(1.234567, "1.234_567", id='fraction'),
        pytest.param(-1_234_567, "-1_234_567", id='negative'),
        pytest.param(12, "12", id='short'),
        pytest.param(0.00001234, "0.000_012_34", id='small'),
        pytest.param(-0.0, "-0", id='negative_zero'),
    ])
    def test_number_(self, x, expected):
        assert number_(x) == expected

    def test_names(self):
        assert seconds.__name__ == "seconds"
        assert bibytes1.__name__ == "bibytes1"
        assert "1_515" in number_.__doc__


class TestScaleFn:
    """Tests for scale_fn()."""

    def test_custom_unit(self):
        bits_per_sec = scale_fn(base=Base.B1024, constraint=UNIT_AND_ABOVE, fmt=".2f",
                                grouping="_", unit="bit/s")
        assert bits_per_sec(2.1 * 1024) == "2.10 kibit/s"
        assert bits_per_sec(2) == "2.00 bit/s"
        assert bits_per_sec.__name__ == "scaled"
        assert bits_per_sec.__doc__ is None

    def test_grouping_on_unit(self):
        hertz = scale_fn(base=1000, constraint=UNIT_AND_BELOW, fmt=".1f", grouping="_", unit="Hz",
                         name="hertz", doc="Frequency.")
        assert hertz(123_456.0) == "123_456.0 Hz"
        assert hertz.__name__ == hertz.__qualname__ == "hertz"
        assert hertz.__doc__ == "Frequency."

    def test_bare_drops_unit(self):
        plain = scale_fn(base="decimal", constraint=UNIT_AND_ABOVE, fmt=".1f", unit="B", bare=True)
        assert plain(2500) == "2.5"

    def test_invalid_unit(self):
        with pytest.raises(TypeError, match="unit must be a str"):
            scale_fn(base=Base.B1000, constraint=UNIT_AND_ABOVE, fmt=None, unit=None)

    def test_invalid_options_fail_early(self):
        with pytest.raises(ValueError, match="grouping must be"):
            scale_fn(base=Base.B1000, constraint=UNIT_AND_ABOVE, fmt=None, grouping="--", unit="B")
        with pytest.raises(ValueError, match="base expected one of"):
            scale_fn(base=10, constraint=UNIT_AND_ABOVE, fmt=None, unit="B")

    def test_invalid_input(self):
        with pytest.raises(TypeError):
            seconds("1.0")
