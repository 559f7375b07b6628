"""
Scaled values: a mantissa with an SI prefix and a base.

A ScaledValue is built once from a raw number and consumed by the renderer or converted
back to a float. It is designed for **one-way formatting**, rendered strings are never
parsed back; store the original number if you need it later.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .base import Base
from .constraint import Constraint, UNCONSTRAINED
from .formatting import RenderOptions, render
from .numeric import OnLossy, std_float
from .prefix import Prefix, UNIT
from .tools import fmt_type


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class ScaledValue:
    """
    A number represented as mantissa × base^(prefix.exponent / 3).

    Attributes:
        mantissa: Scaled coefficient, usually in [1, 1000) unless the constraint clamps the prefix.
        prefix: Selected SI prefix.
        base: Radix between adjacent prefixes, 1000 or 1024.

    Examples:
        >>> ScaledValue.build(0.5)
        ScaledValue(mantissa=500.0, prefix=Prefix(exponent=-3, symbol='m', name='milli'), base=<Base.B1000: 1000>)
        >>> str(ScaledValue.build(1300))
        '1.3 k'
        >>> f"{ScaledValue.build(3.4e-12):>8.2f}F"
        '    3.40 pF'
        >>> float(ScaledValue.build(-1.5e28))
        -1.5e+28
    """
    mantissa: float
    prefix: Prefix = UNIT
    base: Base = Base.B1000

    def __post_init__(self):
        if not isinstance(self.mantissa, float):
            raise TypeError(f"float mantissa required, but got {fmt_type(self.mantissa)}")
        if not isinstance(self.prefix, Prefix):
            raise TypeError(f"Prefix required, but got {fmt_type(self.prefix)}")
        object.__setattr__(self, "base", Base.parse(self.base))

    @classmethod
    def build(
            cls,
            x,
            base: Base | int | str = Base.B1000,
            constraint: Constraint = UNCONSTRAINED,
            *,
            on_lossy: OnLossy = "ignore",
            stacklevel: int = 2,
    ) -> Self:
        """
        Scale a number to the closest usable prefix.

        Args:
            x: Number to scale; int, float, Decimal, Fraction or a NumPy-like scalar.
               Integers beyond 2**53 may lose precision as float64.
            base: Base.B1000 (default), Base.B1024, or their radix/scale names.
            constraint: Usable prefixes; the full yocto..yotta range by default.
            on_lossy: Policy for integers not exactly representable as float64,
                      one of "ignore", "warn", "raise".
            stacklevel: Frame LossyConversionWarning is attributed to, counted from this call.

        Returns:
            ScaledValue with mantissa = x / base.pow(prefix.exponent).

        Raises:
            TypeError: If x is not number-like or constraint is not a Constraint.

        Note:
            Magnitudes beyond the usable range never fail, they clamp to the extreme
            prefix: ScaledValue.build(-1.5e28) has mantissa -1.5e4 and the yotta prefix.
            Infinities saturate at the largest usable prefix with an infinite mantissa.
        """
        if not isinstance(constraint, Constraint):
            raise TypeError(f"Constraint required, but got {fmt_type(constraint)}")
        base = Base.parse(base)

        x = std_float(x, on_lossy=on_lossy, stacklevel=stacklevel + 1)
        if math.isinf(x):
            exponent = constraint.bounds[1]
        else:
            exponent = base.exponent_for(x)
        prefix = constraint.resolve(exponent)
        mantissa = x / base.pow(prefix.exponent)
        return cls(mantissa=mantissa, prefix=prefix, base=base)

    def signum(self) -> float:
        """Sign of the mantissa: 1.0, -1.0 (also for -0.0), or nan for nan."""
        if math.isnan(self.mantissa):
            return math.nan
        return math.copysign(1.0, self.mantissa)

    def to_float(self) -> float:
        """The original number: mantissa × base.pow(prefix.exponent), up to float rounding."""
        return self.mantissa * self.base.pow(self.prefix.exponent)

    def __float__(self) -> float:
        return self.to_float()

    def __format__(self, format_spec: str) -> str:
        if not format_spec:
            return str(self)
        return render(self, RenderOptions(fmt=format_spec))

    def __str__(self) -> str:
        if self.prefix.is_unit:
            return f"{self.mantissa}"
        return f"{self.mantissa} {self.prefix}"


# Methods --------------------------------------------------------------------------------------------------------------

def build(
        x,
        base: Base | int | str = Base.B1000,
        constraint: Constraint = UNCONSTRAINED,
        *,
        on_lossy: OnLossy = "ignore",
) -> ScaledValue:
    """Scale a number, see ScaledValue.build()."""
    return ScaledValue.build(x, base, constraint, on_lossy=on_lossy, stacklevel=3)


def to_number(value: ScaledValue) -> float:
    """Convert a scaled value back to a float."""
    return value.to_float()


def sign(value: ScaledValue) -> float:
    """IEEE sign of the mantissa of a scaled value."""
    return value.signum()
