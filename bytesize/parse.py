"""
Parse human-written size strings into byte counts.

Supports any mix of the following formats, with or without whitespace between number and unit:

    1234
    1234 b / kb / mb / ... / eb
    1234 B / KB / KiB / MiB / ...
    12.34 GB
    1234 byte / kilobyte / terabyte / ...
    1234 bytes / kilobytes / terabytes / ...
    12.34 Kibibytes / MegaBytes / ...
    0.423e3kb

Units are case-insensitive and tolerate a single plural "s".
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from typing import Literal

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import to_int64
from .units import Unit
from .utils import fmt_type, fmt_value

logger = logging.getLogger(__name__)

# Float literal: decimal digits with optional fraction and exponent, or inf/infinity/nan
_NUMBER_RE = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

# @formatter:off
UNIT_SUFFIXES = frozendict({
    "":         Unit.BYTE,
    "b":        Unit.BYTE,
    "byte":     Unit.BYTE,

    "kb":       Unit.KILOBYTE,  "kilobyte": Unit.KILOBYTE,
    "mb":       Unit.MEGABYTE,  "megabyte": Unit.MEGABYTE,
    "gb":       Unit.GIGABYTE,  "gigabyte": Unit.GIGABYTE,
    "tb":       Unit.TERABYTE,  "terabyte": Unit.TERABYTE,
    "pb":       Unit.PETABYTE,  "petabyte": Unit.PETABYTE,
    "eb":       Unit.EXABYTE,   "exabyte":  Unit.EXABYTE,

    "kib":      Unit.KIBIBYTE,  "kibibyte": Unit.KIBIBYTE,
    "mib":      Unit.MEBIBYTE,  "mebibyte": Unit.MEBIBYTE,
    "gib":      Unit.GIBIBYTE,  "gibibyte": Unit.GIBIBYTE,
    "tib":      Unit.TEBIBYTE,  "tebibyte": Unit.TEBIBYTE,
    "pib":      Unit.PEBIBYTE,  "pebibyte": Unit.PEBIBYTE,
    "eib":      Unit.EXBIBYTE,  "exbibyte": Unit.EXBIBYTE,
})
# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

class ParseSizeError(ValueError):
    """
    Raised when a string cannot be parsed as a size.

    Attributes:
        text: The input that failed to parse.
        reason: "number" for a malformed numeric literal, "unit" for an unrecognized unit suffix.
    """

    def __init__(self, text: str, reason: Literal["number", "unit"], detail: str = ""):
        self.text = text
        self.reason = reason
        message = f"Error parsing Size from {fmt_value(text)}"
        super().__init__(f"{message}: {detail}" if detail else message)


# Methods --------------------------------------------------------------------------------------------------------------

def split_size_text(text: str) -> tuple[str, str]:
    """
    Split trimmed size text into its numeric literal and unit suffix.

    The split falls after the rightmost character that is not an ASCII letter. Exponent markers
    inside the number are thus kept in the literal as long as a digit or sign follows them. If the
    text has no such character, all of it is the numeric literal and the unit is empty.

    Examples:
        >>> split_size_text("12.34 KB")
        ('12.34', 'KB')
        >>> split_size_text("423E-3mb")
        ('423E-3', 'mb')
        >>> split_size_text("1234")
        ('1234', '')
    """
    text = text.strip()
    for idx in range(len(text) - 1, -1, -1):
        char = text[idx]
        if not (char.isascii() and char.isalpha()):
            return text[:idx + 1].rstrip(), text[idx + 1:]
    return text, ""


def unit_multiplier(suffix: str) -> int:
    """
    Return the multiplier of a unit suffix, case-insensitive and tolerating one trailing "s".

    Raises:
        KeyError: If the suffix is not a recognized unit.

    Examples:
        >>> unit_multiplier("KiB")
        1024
        >>> unit_multiplier("Megabytes")
        1000000
    """
    suffix = suffix.lower()
    if suffix.endswith("s"):
        suffix = suffix[:-1]
    return UNIT_SUFFIXES[suffix].multiplier


def parse_bytes(text: str) -> int:
    """
    Parse a size string into a signed 64-bit byte count.

    The number is read as a float, multiplied by the unit multiplier and truncated toward zero.

    Args:
        text: Size text such as "1234", "12.34 KB" or "12.34 kIloByte".

    Returns:
        Byte count, truncated toward zero and saturated to the signed 64-bit range.

    Raises:
        TypeError: If text is not a str.
        ParseSizeError: If the number is malformed or the unit is unknown.

    Examples:
        >>> parse_bytes("12.34 KB")
        12340
        >>> parse_bytes("0.423e3kb")
        423000
        >>> parse_bytes("1234 XB")
        Traceback (most recent call last):
            ...
        bytesize.parse.ParseSizeError: Error parsing Size from <str: '1234 XB'>: unknown unit 'XB'
    """
    if not isinstance(text, str):
        raise TypeError(f"size text must be a str, but found {fmt_type(text)}")

    num_str, unit = split_size_text(text)

    if not _NUMBER_RE.fullmatch(num_str):
        logger.debug("Malformed number %r in size text %r", num_str, text)
        raise ParseSizeError(text, "number", f"invalid number {num_str!r}")
    number = float(num_str)

    try:
        multiplier = unit_multiplier(unit)
    except KeyError:
        logger.debug("Unknown unit %r in size text %r", unit, text)
        raise ParseSizeError(text, "unit", f"unknown unit {unit!r}") from None

    return to_int64(number * multiplier)
