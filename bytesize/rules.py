"""
Magnitude classification rules for formatting byte counts.

Each base has an ordered table of 17 FormatRule brackets covering [0, 2**64 - 1]. A bracket is the
half-open range of byte counts that share the same display unit and decimal precision:

    bytes                   0 digits   [0, 1 KB)
    KB .. PB (each unit)    2 digits   [1, 10) units
                            1 digit    [10, 100) units
                            0 digits   [100, 1000) units
    EB                      0 digits   [1 EB, 2**64 - 1)   sentinel

A byte count equal to a threshold belongs to the next bracket, so exactly 1000 bytes in base-10
display as "1.00 KB" and not as "1000 bytes".
"""

# Standard library -----------------------------------------------------------------------------------------------------
from bisect import bisect_right
from dataclasses import dataclass

# Third-party ----------------------------------------------------------------------------------------------------------
from frozendict import frozendict

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import U64_MAX
from .units import Base, Unit
from .utils import fmt_type, fmt_value


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class FormatRule:
    """
    A magnitude bracket: byte counts below `less_than` display in `unit` with `precision` digits.

    Attributes:
        less_than: Exclusive upper bound of the bracket in bytes.
        precision: Number of decimal digits of the displayed value.
        unit: Display unit of the bracket.
    """
    less_than: int
    precision: int
    unit: Unit

    @property
    def is_bytes(self) -> bool:
        """True for the byte bracket, which always renders the integer count."""
        return self.unit is Unit.BYTE


# Methods --------------------------------------------------------------------------------------------------------------

def build_rules(base: Base | str) -> tuple[FormatRule, ...]:
    """
    Build the ordered rule table of a base.

    The byte bracket comes first, followed by three brackets at 2, 1 and 0 digits for every unit but
    the largest one, and a sentinel bracket at the largest unit with 0 digits.
    """
    units = Unit.units(base)
    rules = [FormatRule(less_than=units[0].multiplier, precision=0, unit=Unit.BYTE)]

    for unit, next_unit in zip(units, units[1:]):
        rules.append(FormatRule(less_than=10 * unit.multiplier, precision=2, unit=unit))
        rules.append(FormatRule(less_than=100 * unit.multiplier, precision=1, unit=unit))
        rules.append(FormatRule(less_than=next_unit.multiplier, precision=0, unit=unit))

    rules.append(FormatRule(less_than=U64_MAX, precision=0, unit=units[-1]))
    return tuple(rules)


def classify(bytes_: int, base: Base | str = Base.BASE2) -> FormatRule:
    """
    Select the display rule for a nonnegative byte count.

    Picks the rule with the smallest threshold strictly greater than `bytes_`; a count equal to a
    threshold promotes to the following rule.

    Args:
        bytes_: Byte count in [0, 2**64 - 1].
        base: Unit family, Base member or its string value.

    Returns:
        The matching FormatRule. Never fails for counts in range, the table ends with a sentinel.

    Raises:
        TypeError: If bytes_ is not an int.
        ValueError: If bytes_ is out of range or base is unknown.

    Examples:
        >>> classify(999, Base.BASE10)
        FormatRule(less_than=1000, precision=0, unit=<Unit.BYTE: 'byte'>)
        >>> classify(1000, Base.BASE10).unit
        <Unit.KILOBYTE: 'kilobyte'>
    """
    if not isinstance(bytes_, int) or isinstance(bytes_, bool):
        raise TypeError(f"byte count must be an int, but found {fmt_type(bytes_)}")
    if not 0 <= bytes_ <= U64_MAX:
        raise ValueError(f"byte count must be in range [0, 2**64 - 1], but found {fmt_value(bytes_)}")

    base = Base(base)
    index = bisect_right(THRESHOLDS[base], bytes_)
    # Only 2**64 - 1 itself passes the sentinel
    return RULES[base][min(index, len(RULES[base]) - 1)]


# Rule Tables ----------------------------------------------------------------------------------------------------------

BASE10_RULES = build_rules(Base.BASE10)
BASE2_RULES = build_rules(Base.BASE2)

RULES = frozendict({
    Base.BASE10: BASE10_RULES,
    Base.BASE2: BASE2_RULES,
})

THRESHOLDS = frozendict({base: tuple(rule.less_than for rule in rules) for base, rules in RULES.items()})


# Module Sanity Checks -------------------------------------------------------------------------------------------------

for _base, _rules in RULES.items():
    if len(_rules) != 17:
        raise AssertionError(f"Configuration Error: {_base} must define 17 format rules, found {len(_rules)}.")
    if list(THRESHOLDS[_base]) != sorted(set(THRESHOLDS[_base])):
        raise AssertionError(f"Configuration Error: {_base} thresholds must strictly increase.")
