"""
Convert numeric types from Python stdlib and third-party libraries to float64.

Scaling works on IEEE 754 doubles only, so every number-like input is reduced to a
Python float before an exponent is computed.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
import warnings
from typing import Literal

# Local ----------------------------------------------------------------------------------------------------------------
from .tools import fmt_type, fmt_value


class ScaleConf:
    """
    Default configuration constants for scaling and rendering.

    Attributes:
        BINARY_INFIX: Marker appended to a prefix symbol on the binary base, "k" -> "ki".
        GROUPING: Default thousands grouping character used by presets.
        LOSSLESS_INT_LIMIT: Integers with a larger magnitude may lose precision as float64.
        SEPARATOR: String between the rendered mantissa and the prefix symbol.
    """
    BINARY_INFIX = "i"
    GROUPING = "_"
    LOSSLESS_INT_LIMIT = 2 ** 53
    SEPARATOR = " "


class LossyConversionWarning(RuntimeWarning):
    """Integer input could not be represented exactly as float64."""


OnLossy = Literal["ignore", "warn", "raise"]


def std_float(value, *, on_lossy: OnLossy = "ignore", stacklevel: int = 2) -> float:
    """
    Convert a number-like value to a Python float.

    Parameters
    ----------
    value : various
        int, float, Decimal, Fraction, or a third-party scalar implementing
        __index__, .item() or __float__ (NumPy scalars, 0-d arrays).

    on_lossy : {"ignore", "warn", "raise"}, default "ignore"
        What to do when an integer magnitude beyond 2**53 does not survive the
        conversion exactly:

        - "ignore": accept the nearest float64 silently
        - "warn": emit LossyConversionWarning and accept the nearest float64
        - "raise": raise ValueError

    stacklevel : int, default 2
        Passed to warnings.warn for LossyConversionWarning, counted from the
        std_float call: 2 attributes the warning to the direct caller, wrappers
        add one per frame they introduce.

    Returns
    -------
    float
        inf, -inf and nan pass through unchanged. Integers too large for float64
        overflow to inf/-inf, the same as Decimal or Fraction values beyond range.

    Raises
    ------
    TypeError
        For bool, None, str and other non-numeric types.
    ValueError
        For an invalid on_lossy mode, or a lossy integer when on_lossy="raise".

    Examples
    --------
    >>> std_float(3)
    3.0
    >>> std_float(Decimal("1.5"))
    1.5
    >>> std_float(10 ** 400)
    inf
    >>> std_float(2 ** 53 + 1, on_lossy="raise")
    Traceback (most recent call last):
        ...
    ValueError: integer <int: 9007199254740993> is not representable as float64 ...
    """
    if on_lossy not in ("ignore", "warn", "raise"):
        raise ValueError(f"on_lossy expected one of 'ignore', 'warn', 'raise' but found {fmt_value(on_lossy)}")

    # bool is an int subclass but is never a magnitude
    if isinstance(value, bool) or value is None:
        raise TypeError(f"numeric value expected, but got {fmt_type(value)}")

    # float subclasses such as numpy.float64 are narrowed to the builtin
    if isinstance(value, float):
        return float(value)

    if isinstance(value, int):
        return _int_to_float(value, on_lossy=on_lossy, stacklevel=stacklevel + 1)

    # NumPy integers and other exact integer types; 0-d float arrays define __index__ but refuse it
    if hasattr(value, "__index__"):
        try:
            as_int = operator.index(value)
        except (TypeError, ValueError):
            pass
        else:
            return _int_to_float(as_int, on_lossy=on_lossy, stacklevel=stacklevel + 1)

    # Array and tensor scalars
    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)) and not isinstance(result, bool):
            return std_float(result, on_lossy=on_lossy, stacklevel=stacklevel + 1)

    # Decimal, Fraction, NumPy floats
    if hasattr(value, "__float__"):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, .item() or __float__"
    )


def _int_to_float(value: int, *, on_lossy: OnLossy, stacklevel: int) -> float:
    try:
        result = float(value)
    except OverflowError:
        result = math.inf if value > 0 else -math.inf

    if abs(value) <= ScaleConf.LOSSLESS_INT_LIMIT or on_lossy == "ignore":
        return result

    if math.isinf(result) or int(result) != value:
        message = f"integer {fmt_value(value)} is not representable as float64, nearest is {result!r}"
        if on_lossy == "raise":
            raise ValueError(message)
        warnings.warn(message, LossyConversionWarning, stacklevel=stacklevel)

    return result
