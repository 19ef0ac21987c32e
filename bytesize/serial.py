"""
Serialization of Size values to and from plain data.

A Size serializes to its byte count as a plain integer, never as a structure, so payloads from
other languages and APIs that carry sizes as numbers or size strings deserialize directly:

    >>> json.dumps({"name": "Hello.txt", "size": Size.from_kb(12)}, cls=SizeJSONEncoder)
    '{"name": "Hello.txt", "size": 12000}'
    >>> json.loads('{"size": "12.92 gigabytes"}', object_hook=size_object_hook("size"))
    {'size': Size(12920000000 bytes)}
"""

# Standard library -----------------------------------------------------------------------------------------------------
import json
import logging
import math
from typing import Any, Callable

# Local ----------------------------------------------------------------------------------------------------------------
from .numeric import I64_MAX, I64_MIN, is_int64
from .size import Size
from .utils import fmt_type

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

class SizeJSONEncoder(json.JSONEncoder):
    """JSON encoder writing Size values as their byte count."""

    def default(self, o: Any) -> Any:
        if isinstance(o, Size):
            return size_to_serial(o)
        return super().default(o)


# Methods --------------------------------------------------------------------------------------------------------------

def size_to_serial(size: Size) -> int:
    """Return the plain integer byte count of a Size."""
    if not isinstance(size, Size):
        raise TypeError(f"Size expected, but found {fmt_type(size)}")
    return size.bytes


def size_from_serial(value: int | float | str | Size) -> Size:
    """
    Create a Size from a deserialized value.

    Args:
        value: Byte count as int or float, size text like "12.92 gigabytes", or a Size.

    Returns:
        The Size. Floats are truncated toward zero.

    Raises:
        TypeError: If value is a bool or of an unsupported type.
        ValueError: If a number lies outside the signed 64-bit range or is not finite.
        ParseSizeError: If a string is not a valid size.

    Examples:
        >>> size_from_serial(1234)
        Size(1234 bytes)
        >>> size_from_serial(2 ** 64 - 1)
        Traceback (most recent call last):
            ...
        ValueError: int size 18446744073709551615 is out of range
    """
    if isinstance(value, Size):
        return value

    if isinstance(value, bool):
        raise TypeError(f"an integer or a floating point number representing size in bytes expected, "
                        f"but found {fmt_type(value)}")

    if isinstance(value, int):
        if not is_int64(value):
            logger.debug("Rejected out of range int size %d", value)
            raise ValueError(f"int size {value} is out of range")
        return Size(value)

    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value) or not I64_MIN <= value <= I64_MAX:
            logger.debug("Rejected out of range float size %r", value)
            raise ValueError(f"float size {value} is out of range")
        return Size(value)

    if isinstance(value, str):
        return Size.from_str(value)

    raise TypeError(f"an integer or a floating point number representing size in bytes expected, "
                    f"but found {fmt_type(value)}")


def size_object_hook(*keys: str) -> Callable[[dict], dict]:
    """
    Build a json object_hook converting the values of the named keys into Size.

    Keys absent from a decoded object are left alone, so the hook applies to nested objects too.
    """
    names = frozenset(keys)

    def hook(obj: dict) -> dict:
        return {k: size_from_serial(v) if k in names else v for k, v in obj.items()}

    return hook
