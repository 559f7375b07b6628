#
# SI Scale Base
#

# Standard library -----------------------------------------------------------------------------------------------------
import math
from enum import IntEnum, unique
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import ScaleConf
from .tools import fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Base(IntEnum):
    """
    Multiplicative radix between adjacent prefixes.

    B1000 means 1k = 1000 (SI decimal), B1024 means 1k = 1024 (binary, rendered as "ki").
    Prefix exponents stay on the decimal grid (multiples of 3) for both bases, so
    pow(exponent) is radix ** (exponent / 3).

    Examples:
        >>> Base.B1000.exponent_for(0.00234)
        -3
        >>> Base.B1024.exponent_for(2048)
        3
        >>> Base.B1024.pow(6)
        1048576.0
    """
    B1000 = 1000
    B1024 = 1024

    @property
    def infix(self) -> str:
        """Marker between a non-unit prefix symbol and the unit: "i" for binary, "" otherwise."""
        return ScaleConf.BINARY_INFIX if self.is_binary else ""

    @property
    def is_binary(self) -> bool:
        return self is Base.B1024

    @property
    def radix(self) -> int:
        return int(self)

    @classmethod
    def parse(cls, value: "Base | int | str") -> Self:
        """
        Get a base from its radix (1000, 1024) or scale name ("decimal", "binary").

        Raises:
            ValueError: If value does not name a supported base.
        """
        if isinstance(value, Base):
            return value
        if isinstance(value, str):
            names = {"decimal": cls.B1000, "binary": cls.B1024}
            if value.lower() in names:
                return names[value.lower()]
        elif isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                pass
        raise ValueError(f"base expected one of 1000, 1024, 'decimal', 'binary' but found {fmt_value(value)}")

    def exponent_for(self, x: float) -> int:
        """
        Get the prefix grid exponent of x, the largest multiple of 3 with base^(exponent/3) <= |x|.

        Zero (including -0.0) and non-finite values give 0, no logarithm is taken for them.
        Floating point jitter at exact powers of the base is accepted as-is.
        """
        if x == 0 or not math.isfinite(x):
            return 0

        if self is Base.B1000:
            return math.floor(math.log10(abs(x)) / 3) * 3
        else:
            return math.floor(math.log2(abs(x)) / 10) * 3

    def pow(self, exponent: int) -> float:
        """Scaling factor base^(exponent/3) for a prefix exponent."""
        return float(self.radix) ** (exponent // 3)
