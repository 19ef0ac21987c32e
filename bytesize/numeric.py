"""
Standardize numeric inputs and bound them to the signed 64-bit byte count storage.

Unit constructors and scalar arithmetic accept any integer or floating-point value, from Python
stdlib or third-party libraries. This module normalizes them to plain int or float and performs the
single, final truncation into the stored integer.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import math
import operator
from typing import Protocol, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .utils import fmt_type

# @formatter:off
I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1
U64_MAX = 2 ** 64 - 1
# @formatter:on


@runtime_checkable
class SupportsFloat(Protocol):
    """Protocol for duck-typed numeric conversion."""

    def __float__(self) -> float: ...


# Methods --------------------------------------------------------------------------------------------------------------

def std_numeric(value) -> int | float:
    """
    Convert a numeric value to a standard Python int or float.

    Detection priority:
        1. Python int/float - returned unchanged
        2. __index__() - exact int (NumPy integers)
        3. .item() - array or tensor scalars, respecting the returned type
        4. Integer-valued Decimal/Fraction - exact int
        5. __float__() - float (fractional Decimal/Fraction, NumPy floats)

    Args:
        value: Numeric value to convert.

    Returns:
        int for integral inputs, float otherwise. inf and nan pass through unchanged.

    Raises:
        TypeError: For bool, None, str and any type without a numeric protocol.

    Examples:
        >>> std_numeric(42)
        42
        >>> std_numeric(Decimal("2.0"))
        2
        >>> std_numeric(Fraction(1, 4))
        0.25
        >>> std_numeric(True)
        Traceback (most recent call last):
            ...
        TypeError: boolean values not supported as a size, got True
    """
    # bool is a subclass of int, reject it before the fast path
    if isinstance(value, bool):
        raise TypeError(f"boolean values not supported as a size, got {value}")

    if isinstance(value, (int, float)):
        return value

    if isinstance(value, (str, bytes, type(None))):
        raise TypeError(f"numeric value expected, got {fmt_type(value)}")

    if hasattr(value, "__index__"):
        try:
            return operator.index(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to int via __index__: {e}") from e

    if hasattr(value, "item") and callable(value.item):
        try:
            result = value.item()
        except (TypeError, ValueError, AttributeError):
            result = None
        if isinstance(result, (int, float)):
            return std_numeric(result)

    if type(value).__name__ in ("Decimal", "Fraction"):
        try:
            as_int = int(value)
            if value == as_int:
                return as_int
        except (TypeError, ValueError, OverflowError):
            # inf/nan Decimals, handled by __float__ below
            pass

    if isinstance(value, SupportsFloat):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise TypeError(f"cannot convert {fmt_type(value)} to float: {e}") from e

    raise TypeError(
        f"unsupported numeric type: {fmt_type(value)}. "
        f"Expected int, float, or types implementing __index__, __float__ or .item()"
    )


def to_int64(value: int | float) -> int:
    """
    Truncate a value toward zero into the signed 64-bit range.

    Out-of-range values saturate at the nearest bound, nan maps to 0. This mirrors a float-to-int
    cast and keeps every stored byte count representable as a signed 64-bit integer.

    Examples:
        >>> to_int64(12.9)
        12
        >>> to_int64(-0.5)
        0
        >>> to_int64(2 ** 64)
        9223372036854775807
        >>> to_int64(float("nan"))
        0
    """
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if math.isinf(value):
            return I64_MAX if value > 0 else I64_MIN
        value = math.trunc(value)

    return max(I64_MIN, min(I64_MAX, int(value)))


def is_int64(value: int) -> bool:
    """True if an int fits the signed 64-bit range."""
    return I64_MIN <= value <= I64_MAX
