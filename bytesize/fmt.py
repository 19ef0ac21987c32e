"""
Human-readable text formatting of byte counts.

format_bytes() renders a signed byte count as text like "1.28 MiB" or "42 bytes": the magnitude is
classified into a bracket of rules.py, divided by the bracket unit, printed with the bracket
precision and followed by the unit spelled in the requested Style.

SizeFormatter is a reusable, immutable formatter for many raw byte counts that must all be
rendered in the same manner. Prefer Size.format() when the value is already a Size.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, replace
from typing import Self

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import I64_MAX, I64_MIN
from .rules import FormatRule, classify
from .units import Base, Style, Unit, unit_text
from .utils import fmt_type, fmt_value


class SizeConf:
    """
    Default configuration constants for size formatting.

    Attributes:
        DEFAULT_BASE: Unit family used when no base is requested, binary units.
        DEFAULT_STYLE: Unit spelling used when no style is requested.
        DEFAULT_SCALE: Decimal digits override, None keeps the per-bracket precision.
    """
    DEFAULT_BASE = Base.BASE2
    DEFAULT_STYLE = Style.DEFAULT
    DEFAULT_SCALE = None


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class SizeFormatter:
    """
    Standalone byte count formatter configured with base, style and scale.

    Configuration follows the builder pattern via the with_* methods, each returning a new formatter.

    Attributes:
        base: Unit family, binary (KiB, MiB) or decimal (KB, MB). Defaults to SizeConf.DEFAULT_BASE.
        style: Unit spelling. Defaults to SizeConf.DEFAULT_STYLE.
        scale: Number of decimal digits for every non-byte bracket. None keeps the bracket precision
            of 2, 1 or 0 digits.

    Examples:
        >>> formatter = SizeFormatter().with_base(Base.BASE10).with_style(Style.ABBREVIATED)
        >>> [formatter.format(n) for n in (1024, 2048, 4096)]
        ['1.02 KB', '2.05 KB', '4.10 KB']
    """
    base: Base | None = None
    style: Style | None = None
    scale: int | None = None

    def __post_init__(self):
        base = SizeConf.DEFAULT_BASE if self.base is None else self.base
        style = SizeConf.DEFAULT_STYLE if self.style is None else self.style
        scale = SizeConf.DEFAULT_SCALE if self.scale is None else self.scale

        object.__setattr__(self, "base", Base(base))
        object.__setattr__(self, "style", Style(style))
        object.__setattr__(self, "scale", _validate_scale(scale))

    def with_base(self, base: Base | str) -> Self:
        """Return a formatter using the given unit family."""
        return replace(self, base=base)

    def with_style(self, style: Style | str) -> Self:
        """Return a formatter using the given unit spelling."""
        return replace(self, style=style)

    def with_scale(self, scale: int | None) -> Self:
        """Return a formatter with a fixed number of decimal digits, None restores bracket precision."""
        return replace(self, scale=scale)

    def format(self, bytes_: int) -> str:
        """Format a signed byte count per this formatter configuration."""
        return format_bytes(bytes_, base=self.base, style=self.style, scale=self.scale)


# Methods --------------------------------------------------------------------------------------------------------------

def format_bytes(
        bytes_: int,
        base: Base | str | None = None,
        style: Style | str | None = None,
        scale: int | None = None,
) -> str:
    """
    Format a signed 64-bit byte count as human-readable text.

    Negative counts are prefixed with "-" and formatted by magnitude. The magnitude of -2**63 is not
    representable as a signed 64-bit integer, it is approximated by 2**63 - 1.

    Args:
        bytes_: Byte count in [-2**63, 2**63 - 1].
        base: Unit family. Defaults to SizeConf.DEFAULT_BASE.
        style: Unit spelling. Defaults to SizeConf.DEFAULT_STYLE.
        scale: Decimal digits for non-byte brackets. Defaults to SizeConf.DEFAULT_SCALE.

    Returns:
        Formatted text, the number and the unit separated by a space.

    Raises:
        TypeError: If bytes_ is not an int.
        ValueError: If bytes_ is out of range, or base, style or scale is invalid.

    Examples:
        >>> format_bytes(1_340_249)
        '1.28 MiB'
        >>> format_bytes(1_340_249, base=Base.BASE10, style=Style.FULL_LOWERCASE)
        '1.34 megabytes'
        >>> format_bytes(-1000, base="base10")
        '-1.00 KB'
        >>> format_bytes(1)
        '1 byte'
    """
    if not isinstance(bytes_, int) or isinstance(bytes_, bool):
        raise TypeError(f"byte count must be an int, but found {fmt_type(bytes_)}")
    if not I64_MIN <= bytes_ <= I64_MAX:
        raise ValueError(f"byte count must fit a signed 64-bit integer, but found {fmt_value(bytes_)}")

    base = SizeConf.DEFAULT_BASE if base is None else Base(base)
    style = SizeConf.DEFAULT_STYLE if style is None else Style(style)
    scale = _validate_scale(SizeConf.DEFAULT_SCALE if scale is None else scale)

    sign = ""
    magnitude = bytes_
    if bytes_ < 0:
        sign = "-"
        magnitude = I64_MAX if bytes_ == I64_MIN else -bytes_

    rule = classify(magnitude, base)
    number = format_number(magnitude, rule, scale)
    return f"{sign}{number} {format_unit(rule.unit, number, style)}"


def format_number(magnitude: int, rule: FormatRule, scale: int | None = None) -> str:
    """
    Render the numeric part of a nonnegative byte count for its rule.

    The byte bracket prints the integer count, other brackets divide in floating point by the unit
    multiplier and print `scale` digits, or the rule precision if scale is None.
    """
    if rule.is_bytes:
        return f"{magnitude}"

    precision = rule.precision if scale is None else scale
    return f"{magnitude / rule.unit.multiplier:.{precision}f}"


def format_unit(unit: Unit, number: str, style: Style | str) -> str:
    """
    Spell a unit for the displayed number.

    Style.DEFAULT resolves to FULL_LOWERCASE for bytes and ABBREVIATED otherwise. Full styles are
    singular only when the displayed number is exactly "1"; abbreviated styles never pluralize.

    Examples:
        >>> format_unit(Unit.BYTE, "1", Style.DEFAULT)
        'byte'
        >>> format_unit(Unit.KILOBYTE, "1.00", Style.FULL)
        'Kilobytes'
        >>> format_unit(Unit.KILOBYTE, "1.00", Style.ABBREVIATED_LOWERCASE)
        'kb'
    """
    style = Style(style)
    if style is Style.DEFAULT:
        style = Style.FULL_LOWERCASE if unit is Unit.BYTE else Style.ABBREVIATED

    text = unit_text(unit)
    match style:
        case Style.ABBREVIATED:
            return text.abbreviated
        case Style.ABBREVIATED_LOWERCASE:
            return text.abbreviated_lowercase
        case Style.FULL:
            spelled = text.full
        case Style.FULL_LOWERCASE:
            spelled = text.full_lowercase
        case _:
            raise ValueError(f"unsupported style: {fmt_value(style)}")

    return spelled if number == "1" else f"{spelled}s"


def _validate_scale(scale: int | None) -> int | None:
    """Scale must be None or a nonnegative int."""
    if scale is None:
        return None
    if not isinstance(scale, int) or isinstance(scale, bool):
        raise TypeError(f"scale must be an int or None, but found {fmt_type(scale)}")
    if scale < 0:
        raise ValueError(f"scale must be >= 0, got {scale}")
    return scale
