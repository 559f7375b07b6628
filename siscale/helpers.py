"""
Preset formatting functions for common units.

Presets parse a number into a ScaledValue with a fixed base and constraint and render it
with a fixed mantissa format, so that call sites stay terse:

    >>> seconds3(12.3e-7)
    '1.230 µs'
    >>> bibytes1(12_345_678)
    '11.8 MiB'

Naming convention: the name is the unit, a number suffix gives the decimals of the
mantissa and a "_" suffix means thousands grouping. Build your own with scale_fn().
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .base import Base
from .constraint import Constraint, UNIT_AND_ABOVE, UNIT_AND_BELOW, UNIT_ONLY
from .formatting import RenderOptions, render
from .numeric import ScaleConf
from .tools import fmt_type
from .value import ScaledValue


# Methods --------------------------------------------------------------------------------------------------------------

def scale_fn(
        *,
        base: Base | int | str,
        constraint: Constraint,
        fmt: str | None,
        unit: str,
        grouping: str | None = None,
        bare: bool = False,
        name: str | None = None,
        doc: str | None = None,
) -> Callable[..., str]:
    """
    Create a formatting function for a unit.

    Args:
        base: Base.B1000 or Base.B1024 (or 1000, 1024, "decimal", "binary").
        constraint: Usable prefixes, e.g. UNIT_AND_ABOVE for bytes.
        fmt: Mantissa format, see RenderOptions.fmt.
        unit: Unit appended after the prefix, e.g. "bit/s".
        grouping: Optional thousands grouping character.
        bare: Render the number only, without prefix and unit.
        name: Function __name__, "scaled" by default.
        doc: Function docstring.

    Returns:
        A function f(x) -> str accepting any number-like x.

    Example:
        >>> bits_per_sec = scale_fn(base=Base.B1024, constraint=UNIT_AND_ABOVE,
        ...                         fmt=".2f", grouping="_", unit="bit/s")
        >>> bits_per_sec(2.1 * 1024)
        '2.10 kibit/s'
        >>> bits_per_sec(2)
        '2.00 bit/s'
    """
    if not isinstance(unit, str):
        raise TypeError(f"unit must be a str, but got {fmt_type(unit)}")

    base = Base.parse(base)
    options = RenderOptions(fmt=fmt, grouping=grouping, bare=bare)

    def scaled(x) -> str:
        value = ScaledValue.build(x, base, constraint)
        if options.bare:
            return render(value, options)
        return f"{render(value, options)}{unit}"

    scaled.__name__ = scaled.__qualname__ = name or "scaled"
    scaled.__doc__ = doc
    return scaled


# @formatter:off

number_ = scale_fn(base=Base.B1000, constraint=UNIT_ONLY, fmt=None, unit="",
                   grouping=ScaleConf.GROUPING, bare=True, name="number_",
                   doc="Number with thousands groupings and no scaling: 1515 -> '1_515'.")

seconds = scale_fn(base=Base.B1000, constraint=UNIT_AND_BELOW, fmt=None, unit="s", name="seconds",
                   doc="Seconds, never above unit scale: 1.234567e-6 -> '1.234567 µs', 16e-3 -> '16 ms'.")

seconds3 = scale_fn(base=Base.B1000, constraint=UNIT_AND_BELOW, fmt=".3f", unit="s", name="seconds3",
                    doc="Seconds with 3 decimals: 1.234567e-6 -> '1.235 µs', 16e-3 -> '16.000 ms'.")

sibytes = scale_fn(base=Base.B1000, constraint=UNIT_AND_ABOVE, fmt=None, unit="B", name="sibytes",
                   doc="Bytes on base 1000: 1234567 -> '1.234567 MB'.")

sibytes_ = scale_fn(base=Base.B1000, constraint=UNIT_ONLY, fmt=None, unit="B",
                    grouping=ScaleConf.GROUPING, name="sibytes_",
                    doc="Bytes with thousands groupings and no scaling: 1234567 -> '1_234_567 B'.")

sibytes1 = scale_fn(base=Base.B1000, constraint=UNIT_AND_ABOVE, fmt=".1f", unit="B", name="sibytes1",
                    doc="Bytes on base 1000 with 1 decimal: 2.3e12 -> '2.3 TB'.")

sibytes2 = scale_fn(base=Base.B1000, constraint=UNIT_AND_ABOVE, fmt=".2f", unit="B", name="sibytes2",
                    doc="Bytes on base 1000 with 2 decimals: 2.3e12 -> '2.30 TB'.")

bibytes = scale_fn(base=Base.B1024, constraint=UNIT_AND_ABOVE, fmt=None, unit="B", name="bibytes",
                   doc="Bytes on base 1024: 1.25 * 2**20 -> '1.25 MiB'.")

bibytes1 = scale_fn(base=Base.B1024, constraint=UNIT_AND_ABOVE, fmt=".1f", unit="B", name="bibytes1",
                    doc="Bytes on base 1024 with 1 decimal: 16 * 1024 -> '16.0 kiB'.")

bibytes2 = scale_fn(base=Base.B1024, constraint=UNIT_AND_ABOVE, fmt=".2f", unit="B", name="bibytes2",
                    doc="Bytes on base 1024 with 2 decimals: 1.25 * 2**20 -> '1.25 MiB'.")

# @formatter:on
