"""
Render scaled values as grouped, prefix-suffixed text.

The renderer formats the mantissa, optionally inserts thousands groupings and appends
the prefix symbol; the unit itself ("B", "s") is always appended by the caller.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import ScaleConf
from .tools import fmt_type, fmt_value

if TYPE_CHECKING:
    from .value import ScaledValue

_DIGITS = frozenset("0123456789")


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class RenderOptions:
    """
    Rendering controls for scaled values.

    Attributes:
        fmt: Mantissa number format, either a format spec (".3f", ">8.2f") or a template
             with a single replacement field ("{:.3f}"). None renders the shortest
             round-trip digits in positional notation and shows whole numbers as
             integers: 16.0 -> "16", 1.234e-05 -> "0.00001234".
        grouping: Thousands grouping character, e.g. "_" renders 1234.5678 as "1_234.567_8".
        bare: Render the mantissa only, without separator and prefix symbol.

    Examples:
        >>> RenderOptions(fmt=".1f")
        RenderOptions(fmt='.1f', grouping=None, bare=False)
        >>> RenderOptions(grouping="__")
        Traceback (most recent call last):
            ...
        ValueError: grouping must be a single character, but found <str: '__'>
    """
    fmt: str | None = None
    grouping: str | None = None
    bare: bool = False

    def __post_init__(self):
        if not isinstance(self.fmt, (str, type(None))):
            raise TypeError(f"fmt must be str | None, but got {fmt_type(self.fmt)}")
        if self.grouping is not None:
            if not isinstance(self.grouping, str):
                raise TypeError(f"grouping must be str | None, but got {fmt_type(self.grouping)}")
            if len(self.grouping) != 1:
                raise ValueError(f"grouping must be a single character, but found {fmt_value(self.grouping)}")

    def mantissa_str(self, mantissa: float) -> str:
        """Format the mantissa with fmt, before grouping."""
        if self.fmt is None:
            if not math.isfinite(mantissa):
                return f"{mantissa}"
            # whole floats as ints, keeping the sign of -0.0
            if mantissa.is_integer():
                return f"{mantissa:.0f}"
            # shortest round-trip digits, never in exponent notation
            return format(Decimal(repr(float(mantissa))), "f")
        if "{" in self.fmt:
            return self.fmt.format(mantissa)
        return format(mantissa, self.fmt)


# Methods --------------------------------------------------------------------------------------------------------------

def render(value: "ScaledValue", options: RenderOptions | None = None) -> str:
    """
    Format a scaled value's mantissa and prefix, but not the unit itself.

    Args:
        value: The scaled value.
        options: Mantissa format, grouping character and bare mode; defaults to RenderOptions().

    Returns:
        "<mantissa> <prefix>[i]" where "i" marks a non-unit prefix on the binary base,
        or the mantissa alone in bare mode. A unit prefix still gets the separator so
        that the caller's unit reads "16.0 B".

    Examples:
        >>> from siscale import build, Base, UNIT_AND_ABOVE
        >>> render(build(16 * 1024, Base.B1024, UNIT_AND_ABOVE), RenderOptions(fmt=".1f")) + "B"
        '16.0 kiB'
        >>> render(build(1234.5678, constraint=UNIT_AND_BELOW), RenderOptions(fmt=".5f", grouping="_")) + "s"
        '1_234.567_80 s'
    """
    options = options or RenderOptions()

    number = options.mantissa_str(value.mantissa)
    if options.grouping is not None:
        number = separated_float(number, options.grouping)

    if options.bare:
        return number

    infix = "" if value.prefix.is_unit else value.base.infix
    return f"{number}{ScaleConf.SEPARATOR}{value.prefix.symbol}{infix}"


def separated_float(text: str, separator: str) -> str:
    """
    Insert thousands separators into rendered number text.

    The integer part is grouped from the decimal point leftwards and the fractional part
    from the decimal point rightwards. Non-digit characters such as signs, padding or
    exponents pass through untouched.

    Examples:
        >>> separated_float("1234567.1234567", "_")
        '1_234_567.123_456_7'
        >>> separated_float("--1234567.1234567++", "_")
        '--1_234_567.123_456_7++'
    """
    idx = text.find(".")
    if idx < 0:
        idx = len(text)
    return separate_thousands_backward(text[:idx], separator) + separate_thousands_forward(text[idx:], separator)


def separate_thousands_backward(text: str, separator: str) -> str:
    """Group digits right-to-left: "  123456.." -> "  123_456.."."""
    return _separate_thousands(reversed(text), separator)[::-1]


def separate_thousands_forward(text: str, separator: str) -> str:
    """Group digits left-to-right: ".1234567--" -> ".123_456_7--"."""
    return _separate_thousands(text, separator)


def _separate_thousands(chars, separator: str) -> str:
    output = []
    pos = 0
    for ch in chars:
        if ch in _DIGITS:
            # no separator before the first digit of a run
            if pos > 1 and pos % 3 == 0:
                output.append(separator)
            pos += 1
        output.append(ch)
    return "".join(output)
