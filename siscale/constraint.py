#
# SI Scale Prefix Constraints
#

# Standard library -----------------------------------------------------------------------------------------------------
import bisect
from dataclasses import dataclass, field
from enum import StrEnum, unique
from typing import Iterable, Self

# Local ----------------------------------------------------------------------------------------------------------------
from .prefix import Prefix, PREFIXES, UNIT
from .tools import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off
@unique
class ConstraintKind(StrEnum):
    """
    Policies restricting which prefixes may be selected.

    Attributes:
        NONE: All prefixes from yocto to yotta - 1.2 ks, 3.4 µs
        UNIT_ONLY: Never scale - 1234 B
        UNIT_AND_ABOVE: Unit and larger prefixes - 16 GB, never 4.3 µB
        UNIT_AND_BELOW: Unit and smaller prefixes - 1.3 µs, never 16 Gs
        CUSTOM: Explicit ascending list of usable prefixes
    """
    NONE = "none"
    UNIT_ONLY = "unit_only"
    UNIT_AND_ABOVE = "unit_and_above"
    UNIT_AND_BELOW = "unit_and_below"
    CUSTOM = "custom"
# @formatter:on


@dataclass(frozen=True)
class Constraint:
    """
    Constraint on the SI prefixes a scaled value may use.

    Keeps values in unsurprising scales: seconds are never shown as kiloseconds
    with UNIT_AND_BELOW, and bytes never as millibytes with UNIT_AND_ABOVE.

    Use the module constants UNCONSTRAINED, UNIT_ONLY, UNIT_AND_ABOVE, UNIT_AND_BELOW,
    or Constraint.custom() for an explicit prefix list.

    Attributes:
        kind: Constraint policy; a ConstraintKind or its string value.
        prefixes: Usable prefixes for the CUSTOM kind, strictly ascending; empty otherwise.

    Examples:
        >>> UNIT_AND_BELOW.resolve(6)
        Prefix(exponent=0, symbol='', name='unit')
        >>> Constraint.custom(["m", "", "k"]).resolve(24).name
        'kilo'

    Raises:
        ValueError: If kind is unknown, or the CUSTOM prefix list is empty or not strictly ascending.
    """
    kind: ConstraintKind = ConstraintKind.NONE
    prefixes: tuple[Prefix, ...] = field(default=(), repr=False)

    # Exponents of prefixes, cached for bisection
    _exponents: tuple[int, ...] = field(init=False, default=(), repr=False, compare=False)

    def __post_init__(self):
        try:
            object.__setattr__(self, "kind", ConstraintKind(self.kind))
        except ValueError:
            raise ValueError(f"constraint kind expected one of {[k.value for k in ConstraintKind]} "
                             f"but found {fmt_value(self.kind)}") from None

        prefixes = tuple(Prefix.parse(p) for p in self.prefixes)

        if self.kind == ConstraintKind.CUSTOM:
            if not prefixes:
                raise ValueError("at least one prefix must be allowed in a custom constraint")
            for lower, upper in zip(prefixes, prefixes[1:]):
                if lower.exponent >= upper.exponent:
                    raise ValueError(f"custom constraint prefixes must be strictly ascending, "
                                     f"but {lower.name!r} comes before {upper.name!r}")
        elif prefixes:
            raise ValueError(f"prefixes are only allowed for the custom constraint, not {self.kind.value!r}")

        object.__setattr__(self, "prefixes", prefixes)
        object.__setattr__(self, "_exponents", tuple(p.exponent for p in prefixes))

    @classmethod
    def custom(cls, prefixes: Iterable[Prefix | str]) -> Self:
        """
        Create a constraint allowing only the given prefixes.

        Args:
            prefixes: Prefix records or prefix symbols/names, strictly ascending by exponent.
        """
        if isinstance(prefixes, (str, Prefix)) or not isinstance(prefixes, Iterable):
            raise TypeError(f"iterable of prefixes expected, but got {fmt_type(prefixes)}")
        return cls(kind=ConstraintKind.CUSTOM, prefixes=tuple(prefixes))

    @property
    def bounds(self) -> tuple[int, int]:
        """Smallest and largest usable prefix exponents."""
        if self.kind == ConstraintKind.UNIT_ONLY:
            return 0, 0
        elif self.kind == ConstraintKind.UNIT_AND_ABOVE:
            return 0, PREFIXES[-1].exponent
        elif self.kind == ConstraintKind.UNIT_AND_BELOW:
            return PREFIXES[0].exponent, 0
        elif self.kind == ConstraintKind.CUSTOM:
            return self._exponents[0], self._exponents[-1]
        return PREFIXES[0].exponent, PREFIXES[-1].exponent

    def resolve(self, exponent: int) -> Prefix:
        """
        Get the closest usable prefix at or below the grid exponent.

        Exponents outside the usable range clamp to the extreme usable prefix; a custom
        constraint returns its smallest prefix for exponents below it, otherwise the
        largest prefix with exponent <= the given one. Off-grid exponents round down
        to a multiple of 3.
        """
        if self.kind == ConstraintKind.UNIT_ONLY:
            return UNIT

        if self.kind == ConstraintKind.CUSTOM:
            idx = bisect.bisect_right(self._exponents, exponent)
            return self.prefixes[max(idx - 1, 0)]

        lower, upper = self.bounds
        clamped = min(max(exponent, lower), upper)
        return Prefix.from_exponent(clamped - clamped % 3)

    def __contains__(self, prefix: Prefix) -> bool:
        """True if the prefix is usable under this constraint."""
        if self.kind == ConstraintKind.CUSTOM:
            return prefix in self.prefixes
        lower, upper = self.bounds
        return lower <= prefix.exponent <= upper


# @formatter:off
UNCONSTRAINED  = Constraint(ConstraintKind.NONE)
UNIT_ONLY      = Constraint(ConstraintKind.UNIT_ONLY)
UNIT_AND_ABOVE = Constraint(ConstraintKind.UNIT_AND_ABOVE)
UNIT_AND_BELOW = Constraint(ConstraintKind.UNIT_AND_BELOW)
# @formatter:on
