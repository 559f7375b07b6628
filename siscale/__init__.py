"""
Format numbers with SI prefixes: "1.24 µs", "16.0 kiB", "12.3 MB".

Low-level API: build() a ScaledValue with a Base and a Constraint, then render() it
with RenderOptions. High-level API: presets in siscale.helpers and scale_fn().
"""

from .base import Base
from .constraint import Constraint, ConstraintKind, UNCONSTRAINED, UNIT_AND_ABOVE, UNIT_AND_BELOW, UNIT_ONLY
from .formatting import RenderOptions, render, separated_float
from .helpers import scale_fn
from .numeric import LossyConversionWarning, ScaleConf, std_float
from .prefix import Prefix, PrefixParseError, PREFIXES
from .value import ScaledValue, build, sign, to_number

__all__ = [
    "Base",
    "Constraint",
    "ConstraintKind",
    "LossyConversionWarning",
    "PREFIXES",
    "Prefix",
    "PrefixParseError",
    "RenderOptions",
    "ScaleConf",
    "ScaledValue",
    "UNCONSTRAINED",
    "UNIT_AND_ABOVE",
    "UNIT_AND_BELOW",
    "UNIT_ONLY",
    "build",
    "render",
    "scale_fn",
    "separated_float",
    "sign",
    "std_float",
    "to_number",
]
