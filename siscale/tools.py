"""
Formatting helpers for exception and warning messages.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def fmt_type(obj: Any, *, max_repr: int = 120) -> str:
    """Format type information of an object or a type for exception messages.

    Examples:
        >>> fmt_type(42)
        '<type: int>'
        >>> fmt_type(int)
        '<type: int>'
    """
    target_type = obj if isinstance(obj, type) else type(obj)
    try:
        type_name = target_type.__name__
    except AttributeError:
        type_name = str(target_type)
    return f"<type: {_truncate(type_name, max_repr)}>"


def fmt_value(x: Any, *, max_repr: int = 120) -> str:
    """
    Format a single value as a type–value pair for exception and warning messages.

    Broken __repr__ methods are handled gracefully, inner ">" is escaped to keep the
    wrapper brackets unambiguous, and long representations are truncated.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("kilo")
        "<str: 'kilo'>"
    """
    t = type(x).__name__
    try:
        base_repr = repr(x)
    except Exception as e:
        base_repr = f"<{t} object (repr failed: {type(e).__name__})>"

    base_repr = base_repr.replace(">", "\\>")
    return f"<{t}: {_truncate(base_repr, max_repr)}>"


def _truncate(s: str, limit: int, ellipsis: str = "...") -> str:
    if limit <= 0 or len(s) <= limit:
        return s
    keep = max(limit - len(ellipsis), 1)
    # Keep the closing quote outside the ellipsis for quoted reprs
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        return f"{s[:keep]}{s[0]}{ellipsis}"
    return f"{s[:keep]}{ellipsis}"
