"""
Bytesize utilities shared across the package.

Contains the type/value formatters used in exception messages, kept here to avoid circular imports.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Any


# Methods --------------------------------------------------------------------------------------------------------------

def class_name(obj: Any, fully_qualified: bool = False) -> str:
    """
    Get the class name of an object or a class.

    Builtins are never module-qualified, so both `class_name(10)` and `class_name(int)` return 'int'.

    Examples:
        >>> class_name(2.5)
        'float'
        >>> class_name(Size, fully_qualified=True)
        'bytesize.size.Size'
    """
    cls = obj if isinstance(obj, type) else obj.__class__
    if fully_qualified and cls.__module__ != "builtins":
        return f"{cls.__module__}.{cls.__qualname__}"
    return cls.__name__


def fmt_type(obj: Any) -> str:
    """
    Format type information for exception messages.

    Examples:
        >>> fmt_type("1 KB")
        '<str>'
        >>> fmt_type(None)
        '<NoneType>'
    """
    return f"<{class_name(obj)}>"


def fmt_value(obj: Any, max_repr: int = 80) -> str:
    """
    Format a single value as a type-value pair for exception messages.

    Long reprs are truncated with an ellipsis; broken __repr__ methods never propagate.

    Examples:
        >>> fmt_value(42)
        '<int: 42>'
        >>> fmt_value("12..34 MB")
        "<str: '12..34 MB'>"
    """
    try:
        repr_ = repr(obj)
    except Exception as e:
        repr_ = f"<{class_name(obj)} object (repr failed: {class_name(e)})>"

    if len(repr_) > max_repr:
        repr_ = repr_[:max(max_repr - 3, 0)] + "..."

    return f"<{class_name(obj)}: {repr_}>"
