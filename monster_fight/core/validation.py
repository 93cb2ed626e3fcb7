"""
Input validation helpers for the fight loop and the resolver.

The ``require_*`` helpers raise on invalid input after recording it through
catchery, so that bad arguments show up in the error log even when the
caller swallows the exception.
"""

from enum import Enum
from typing import Any, NoReturn, Optional, TypeVar

from catchery import log_critical

E = TypeVar("E", bound=Enum)


def _reject(
    param_name: str,
    reason: str,
    value: Any,
    context: Optional[dict[str, Any]],
    **details: Any,
) -> NoReturn:
    log_critical(
        f"Invalid {param_name}: {reason}",
        {**(context or {}), "param_name": param_name, "value": value, **details},
    )
    raise ValueError(f"Invalid {param_name}: {reason}")


def require_enum_type(
    value: Any,
    enum_class: type[E],
    param_name: str,
    context: Optional[dict[str, Any]] = None,
) -> E:
    """
    Checks that a value is a member of ``enum_class``.

    Strings naming a member are rejected too, callers convert them first.

    Raises:
        ValueError: If the value is not a member.

    """
    if not isinstance(value, enum_class):
        _reject(
            param_name,
            f"expected a {enum_class.__name__}, got {type(value).__name__}",
            value,
            context,
            expected_type=enum_class.__name__,
            actual_type=type(value).__name__,
        )
    return value


def require_int_at_least(
    value: Any,
    param_name: str,
    min_val: int,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """
    Checks that a value is an integer no smaller than ``min_val``.

    Booleans are rejected even though they are integers.

    Raises:
        ValueError: If the value is not an integer or is too small.

    """
    if not isinstance(value, int) or isinstance(value, bool) or value < min_val:
        _reject(
            param_name,
            f"expected an integer >= {min_val}, got {value!r}",
            value,
            context,
            min_val=min_val,
        )
    return value
