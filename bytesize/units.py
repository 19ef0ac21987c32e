#
# Bytesize Units Catalog
#

# Standard library -----------------------------------------------------------------------------------------------------
from enum import Enum, StrEnum, unique
from typing import NamedTuple

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# @formatter:off

# Base-10 byte constants
BYTE = 1
KILOBYTE = 1000 * BYTE
MEGABYTE = 1000 * KILOBYTE
GIGABYTE = 1000 * MEGABYTE
TERABYTE = 1000 * GIGABYTE
PETABYTE = 1000 * TERABYTE
EXABYTE = 1000 * PETABYTE

B = BYTE
KB = KILOBYTE
MB = MEGABYTE
GB = GIGABYTE
TB = TERABYTE
PB = PETABYTE
EB = EXABYTE

# Base-2 byte constants
KIBIBYTE = 1 << 10
MEBIBYTE = 1 << 20
GIBIBYTE = 1 << 30
TEBIBYTE = 1 << 40
PEBIBYTE = 1 << 50
EXBIBYTE = 1 << 60

KiB = KIBIBYTE
MiB = MEBIBYTE
GiB = GIBIBYTE
TiB = TEBIBYTE
PiB = PEBIBYTE
EiB = EXBIBYTE

# @formatter:on


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class Base(StrEnum):
    """
    Unit families used to express a size as text.

    Attributes:
        BASE2 (str)  : Binary units, each 1024 times the preceding one - KiB, MiB, GiB
        BASE10 (str) : Decimal units, each 1000 times the preceding one - KB, MB, GB

    Note:
        New bases are added by declaring a member here and registering its rule table in rules.RULES.
    """
    BASE2 = "base2"
    BASE10 = "base10"


# @formatter:off
@unique
class Style(StrEnum):
    """
    Spelling of the unit that follows a formatted size.

    Attributes:
        DEFAULT (str)               : FULL_LOWERCASE for bytes, ABBREVIATED otherwise - 42 bytes, 1.29 GiB
        ABBREVIATED (str)           : 1024 KB, 1.29 GiB
        ABBREVIATED_LOWERCASE (str) : 1024 kb, 1.29 gib
        FULL (str)                  : 1024 Kilobytes, 1.29 Gibibytes
        FULL_LOWERCASE (str)        : 1024 kilobytes, 1.29 gibibytes
    """
    DEFAULT = "default"
    ABBREVIATED = "abbreviated"
    ABBREVIATED_LOWERCASE = "abbreviated_lowercase"
    FULL = "full"
    FULL_LOWERCASE = "full_lowercase"
# @formatter:on


class UnitText(NamedTuple):
    """The four spellings of a unit."""
    full_lowercase: str
    full: str
    abbreviated_lowercase: str
    abbreviated: str


@unique
class Unit(Enum):
    """
    Units of byte sizes for all supported bases.

    The byte unit is shared by both bases. Each unit maps to its multiplier and spellings by lookup,
    see Unit.multiplier and Unit.text.
    """
    BYTE = "byte"

    KILOBYTE = "kilobyte"
    MEGABYTE = "megabyte"
    GIGABYTE = "gigabyte"
    TERABYTE = "terabyte"
    PETABYTE = "petabyte"
    EXABYTE = "exabyte"

    KIBIBYTE = "kibibyte"
    MEBIBYTE = "mebibyte"
    GIBIBYTE = "gibibyte"
    TEBIBYTE = "tebibyte"
    PEBIBYTE = "pebibyte"
    EXBIBYTE = "exbibyte"

    @property
    def base(self) -> Base | None:
        """Unit family, None for the byte unit which belongs to both."""
        if self is Unit.BYTE:
            return None
        return _UNIT_BASES[self]

    @property
    def multiplier(self) -> int:
        """Number of bytes in one unit."""
        return _UNIT_MULTIPLIERS[self]

    @property
    def text(self) -> UnitText:
        """Spellings of the unit, see unit_text()."""
        return unit_text(self)

    @classmethod
    def units(cls, base: Base | str) -> tuple["Unit", ...]:
        """Non-byte units of a base in ascending order."""
        return _BASE_UNITS[Base(base)]


# Methods --------------------------------------------------------------------------------------------------------------

def unit_text(unit: Unit) -> UnitText:
    """
    Return the (full_lowercase, full, abbreviated_lowercase, abbreviated) spellings of a unit.

    Examples:
        >>> unit_text(Unit.MEBIBYTE)
        UnitText(full_lowercase='mebibyte', full='Mebibyte', abbreviated_lowercase='mib', abbreviated='MiB')
    """
    return _UNIT_TEXT[unit]


# @formatter:off
_UNIT_TEXT = frozendict({
    Unit.BYTE:     UnitText("byte",     "Byte",     "b",   "B"),

    Unit.KILOBYTE: UnitText("kilobyte", "Kilobyte", "kb",  "KB"),
    Unit.MEGABYTE: UnitText("megabyte", "Megabyte", "mb",  "MB"),
    Unit.GIGABYTE: UnitText("gigabyte", "Gigabyte", "gb",  "GB"),
    Unit.TERABYTE: UnitText("terabyte", "Terabyte", "tb",  "TB"),
    Unit.PETABYTE: UnitText("petabyte", "Petabyte", "pb",  "PB"),
    Unit.EXABYTE:  UnitText("exabyte",  "Exabyte",  "eb",  "EB"),

    Unit.KIBIBYTE: UnitText("kibibyte", "Kibibyte", "kib", "KiB"),
    Unit.MEBIBYTE: UnitText("mebibyte", "Mebibyte", "mib", "MiB"),
    Unit.GIBIBYTE: UnitText("gibibyte", "Gibibyte", "gib", "GiB"),
    Unit.TEBIBYTE: UnitText("tebibyte", "Tebibyte", "tib", "TiB"),
    Unit.PEBIBYTE: UnitText("pebibyte", "Pebibyte", "pib", "PiB"),
    Unit.EXBIBYTE: UnitText("exbibyte", "Exbibyte", "eib", "EiB"),
})

_UNIT_MULTIPLIERS = frozendict({
    Unit.BYTE:     BYTE,

    Unit.KILOBYTE: KILOBYTE,
    Unit.MEGABYTE: MEGABYTE,
    Unit.GIGABYTE: GIGABYTE,
    Unit.TERABYTE: TERABYTE,
    Unit.PETABYTE: PETABYTE,
    Unit.EXABYTE:  EXABYTE,

    Unit.KIBIBYTE: KIBIBYTE,
    Unit.MEBIBYTE: MEBIBYTE,
    Unit.GIBIBYTE: GIBIBYTE,
    Unit.TEBIBYTE: TEBIBYTE,
    Unit.PEBIBYTE: PEBIBYTE,
    Unit.EXBIBYTE: EXBIBYTE,
})

_BASE_UNITS = frozendict({
    Base.BASE10: (Unit.KILOBYTE, Unit.MEGABYTE, Unit.GIGABYTE, Unit.TERABYTE, Unit.PETABYTE, Unit.EXABYTE),
    Base.BASE2:  (Unit.KIBIBYTE, Unit.MEBIBYTE, Unit.GIBIBYTE, Unit.TEBIBYTE, Unit.PEBIBYTE, Unit.EXBIBYTE),
})

_UNIT_BASES = frozendict({unit: base for base, units in _BASE_UNITS.items() for unit in units})
# @formatter:on


# Module Sanity Checks -------------------------------------------------------------------------------------------------

# Every unit must be spelled and scaled.
if set(_UNIT_TEXT) != set(Unit) or set(_UNIT_MULTIPLIERS) != set(Unit):
    raise AssertionError("Configuration Error: unit text and multiplier tables must cover every Unit.")

# Multipliers must strictly increase within a base.
for _units in _BASE_UNITS.values():
    _multipliers = [BYTE] + [_UNIT_MULTIPLIERS[u] for u in _units]
    if _multipliers != sorted(set(_multipliers)):
        raise AssertionError("Configuration Error: unit multipliers must strictly increase within a base.")
