"""
Strongly-typed byte size value.

Size wraps a signed 64-bit integer count of bytes. It can be created from any integer or
floating-point number of bytes or of any decimal (KB .. EB) or binary (KiB .. EiB) unit, compared,
added, scaled, formatted as human-readable text and parsed back from it.

    >>> Size.from_bytes(1_340_249)
    Size(1340249 bytes)
    >>> str(Size.from_bytes(1_340_249))
    '1.28 MiB'
    >>> Size.from_mib(2) + Size.from_kib(200) == Size.from_mb(2.301_952)
    True
    >>> Size.from_str("12.34 KB").bytes
    12340
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .fmt import format_bytes
from .numeric import std_numeric, to_int64
from .parse import parse_bytes
from .units import Base, Style, Unit


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True, order=True)
class Size:
    """
    An immutable byte size.

    Construction from a byte count is exact for integers. Unit constructors multiply the value by the
    unit multiplier first and truncate toward zero last, so no rounding error compounds. Values
    beyond the signed 64-bit range saturate at its bounds.

    Attributes:
        bytes: Total number of bytes, in [-2**63, 2**63 - 1].

    Examples:
        >>> Size.from_kib(4) == Size.from_bytes(4096)
        True
        >>> Size.from_kb(7) < Size.from_kib(7)
        True
        >>> Size.from_gb(4.2) / 2 == Size.from_gb(2.1)
        True
    """
    bytes: int = 0

    def __post_init__(self):
        object.__setattr__(self, "bytes", to_int64(std_numeric(self.bytes)))

    # ----- Construction -----

    @classmethod
    def from_unit(cls, value, unit: Unit) -> Self:
        """
        Create a Size from a number of units.

        Integers are multiplied exactly, floats in floating point; the product is truncated toward
        zero into the signed 64-bit range.
        """
        return cls(_scale(std_numeric(value), Unit(unit).multiplier))

    @classmethod
    def from_bytes(cls, value) -> Self:
        return cls(value)

    @classmethod
    def from_kilobytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.KILOBYTE)

    @classmethod
    def from_megabytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.MEGABYTE)

    @classmethod
    def from_gigabytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.GIGABYTE)

    @classmethod
    def from_terabytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.TERABYTE)

    @classmethod
    def from_petabytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.PETABYTE)

    @classmethod
    def from_exabytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.EXABYTE)

    @classmethod
    def from_kibibytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.KIBIBYTE)

    @classmethod
    def from_mebibytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.MEBIBYTE)

    @classmethod
    def from_gibibytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.GIBIBYTE)

    @classmethod
    def from_tebibytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.TEBIBYTE)

    @classmethod
    def from_pebibytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.PEBIBYTE)

    @classmethod
    def from_exbibytes(cls, value) -> Self:
        return cls.from_unit(value, Unit.EXBIBYTE)

    # Abbreviated aliases
    from_kb = from_kilobytes
    from_mb = from_megabytes
    from_gb = from_gigabytes
    from_tb = from_terabytes
    from_pb = from_petabytes
    from_eb = from_exabytes

    from_kib = from_kibibytes
    from_mib = from_mebibytes
    from_gib = from_gibibytes
    from_tib = from_tebibytes
    from_pib = from_pebibytes
    from_eib = from_exbibytes

    @classmethod
    def from_str(cls, text: str) -> Self:
        """
        Parse a size string such as "1234", "12.34 KB" or "12.34 kIloByte".

        Raises:
            ParseSizeError: If the number is malformed or the unit is unknown.
        """
        return cls(parse_bytes(text))

    parse = from_str

    # ----- Display -----

    def format(
            self,
            base: Base | str | None = None,
            style: Style | str | None = None,
            scale: int | None = None,
    ) -> str:
        """
        Format as human-readable text.

        Args:
            base: Unit family, defaults to binary units.
            style: Unit spelling, defaults to Style.DEFAULT.
            scale: Fixed number of decimal digits, defaults to the bracket precision.

        Examples:
            >>> Size.from_mib(1.907349).format(base=Base.BASE10, style=Style.FULL)
            '2.00 Megabytes'
        """
        return format_bytes(self.bytes, base=base, style=style, scale=scale)

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.bytes} bytes)"

    # ----- Conversion -----

    def __int__(self) -> int:
        return self.bytes

    def __bool__(self) -> bool:
        return self.bytes != 0

    # ----- Arithmetic -----

    def __add__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return type(self)(to_int64(self.bytes + other.bytes))

    def __sub__(self, other):
        if not isinstance(other, Size):
            return NotImplemented
        return type(self)(to_int64(self.bytes - other.bytes))

    def __mul__(self, other):
        scalar = _scalar(other)
        if scalar is None:
            return NotImplemented
        return type(self)(_scale(self.bytes, scalar))

    __rmul__ = __mul__

    def __truediv__(self, other):
        scalar = _scalar(other)
        if scalar is None:
            return NotImplemented
        if isinstance(scalar, int):
            if scalar == 0:
                raise ZeroDivisionError("Size division by zero")
            # Exact integer division truncating toward zero
            quotient = abs(self.bytes) // abs(scalar)
            return type(self)(quotient if (self.bytes < 0) == (scalar < 0) else -quotient)
        return type(self)(to_int64(self.bytes / scalar))

    def __neg__(self):
        return type(self)(to_int64(-self.bytes))

    def __pos__(self):
        return self

    def __abs__(self):
        return type(self)(to_int64(abs(self.bytes)))


# Methods --------------------------------------------------------------------------------------------------------------

def _scale(value: int | float, multiplier: int | float) -> int:
    """Multiply then truncate, exact when both operands are integers."""
    return to_int64(value * multiplier)


def _scalar(value) -> int | float | None:
    """Standardize an arithmetic operand, None if it is not a numeric scalar."""
    if isinstance(value, Size):
        return None
    try:
        return std_numeric(value)
    except TypeError:
        return None
