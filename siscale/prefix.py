#
# SI Scale Prefix Table
#

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

class PrefixParseError(ValueError):
    """
    Unrecognized prefix name, symbol or exponent.

    Attributes:
        text: The offending input exactly as provided by the caller.
    """

    def __init__(self, text, message: str | None = None):
        self.text = text
        super().__init__(message or f"unknown SI prefix {fmt_value(text)}")


@dataclass(frozen=True, order=True)
class Prefix:
    """
    Order-of-magnitude marker from the SI prefix table.

    Prefixes are ordered and compared by exponent only. The exponent is always a
    multiple of 3 in [-24, 24], so that base.pow(exponent) gives the scaling factor
    for both the decimal (1000) and the binary (1024) base.

    Attributes:
        exponent: Power of ten of the marker: -3 for milli, 3 for kilo.
        symbol: Display symbol, empty for the unit marker.
        name: Lowercase long name, e.g. "kilo".

    Examples:
        >>> str(KILO)
        'k'
        >>> Prefix.parse("Mega") is MEGA
        True
        >>> Prefix.from_exponent(-6).name
        'micro'
    """
    exponent: int
    symbol: str = field(compare=False)
    name: str = field(compare=False)

    def __post_init__(self):
        if not isinstance(self.exponent, int) or isinstance(self.exponent, bool):
            raise TypeError(f"int exponent required, but got {fmt_type(self.exponent)}")
        if self.exponent % 3 != 0:
            raise ValueError(f"prefix exponent must be a multiple of 3, got {fmt_value(self.exponent)}")

    def __str__(self) -> str:
        return self.symbol

    @property
    def is_unit(self) -> bool:
        """True for the zero-exponent marker, i.e. no scaling."""
        return self.exponent == 0

    @classmethod
    def parse(cls, text: "str | Prefix") -> Self:
        """
        Parse a prefix symbol or name.

        Accepts the symbol ("k"), the lowercase name ("kilo") or the capitalized name
        ("Kilo"). The unit marker is "" or "unit"/"Unit"; micro also accepts the Greek
        letter mu "μ" next to the micro sign "µ".

        Raises:
            PrefixParseError: For any other input.
        """
        if isinstance(text, Prefix):
            return text
        if not isinstance(text, str):
            raise PrefixParseError(text, f"prefix symbol or name must be a str, got {fmt_type(text)}")
        try:
            return _BY_TEXT[text]
        except KeyError:
            raise PrefixParseError(text) from None

    @classmethod
    def from_exponent(cls, exponent: int) -> Self:
        """
        Get the prefix with the given exponent.

        Raises:
            PrefixParseError: If exponent is not a multiple of 3 in [-24, 24].
        """
        try:
            return _BY_EXPONENT[exponent]
        except (KeyError, TypeError):
            raise PrefixParseError(
                exponent,
                f"prefix exponent should be a multiple of 3 between {PREFIXES[0].exponent} "
                f"and {PREFIXES[-1].exponent}, got {fmt_value(exponent)}"
            ) from None


# @formatter:off

YOCTO = Prefix(-24, "y", "yocto")
ZEPTO = Prefix(-21, "z", "zepto")
ATTO  = Prefix(-18, "a", "atto")
FEMTO = Prefix(-15, "f", "femto")
PICO  = Prefix(-12, "p", "pico")
NANO  = Prefix( -9, "n", "nano")
MICRO = Prefix( -6, "µ", "micro")
MILLI = Prefix( -3, "m", "milli")
UNIT  = Prefix(  0, "",  "unit")
KILO  = Prefix(  3, "k", "kilo")
MEGA  = Prefix(  6, "M", "mega")
GIGA  = Prefix(  9, "G", "giga")
TERA  = Prefix( 12, "T", "tera")
PETA  = Prefix( 15, "P", "peta")
EXA   = Prefix( 18, "E", "exa")
ZETTA = Prefix( 21, "Z", "zetta")
YOTTA = Prefix( 24, "Y", "yotta")

PREFIXES: tuple[Prefix, ...] = (
    YOCTO, ZEPTO, ATTO, FEMTO, PICO, NANO, MICRO, MILLI,
    UNIT,
    KILO, MEGA, GIGA, TERA, PETA, EXA, ZETTA, YOTTA,
)

# @formatter:on

_BY_EXPONENT = MappingProxyType({p.exponent: p for p in PREFIXES})

_BY_TEXT = MappingProxyType({
    **{p.symbol: p for p in PREFIXES},
    **{p.name: p for p in PREFIXES},
    **{p.name.capitalize(): p for p in PREFIXES},
    "μ": MICRO,  # U+03BC, next to the micro sign U+00B5
})


# Module Sanity Checks -------------------------------------------------------------------------------------------------

if [p.exponent for p in PREFIXES] != list(range(-24, 25, 3)):
    raise AssertionError("Configuration Error: PREFIXES must cover -24..24 in steps of 3 in ascending order.")

if len({p.symbol for p in PREFIXES}) != len(PREFIXES):
    raise AssertionError("Configuration Error: prefix symbols must be unique.")
