"""Three-way comparison outcomes shared by the ordered structures."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable, Optional, Union


class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def from_result(cls, value: Any) -> Optional["Ordering"]:
        """
        Normalise the result of a comparator.

        Parameters
        ----------
        value : Any
            ``None`` for unordered values, an ``Ordering``, or a number
            whose sign gives the ordering (as returned by cmp-style
            functions). A number without a sign (NaN) or a value that
            cannot be compared with zero means unordered.

        Returns
        -------
        Optional[Ordering]
            The ordering, or None when the values are unordered.

        Raises
        ------
        TypeError
            If `value` is a bool, which usually means a comparator
            returned ``a < b`` instead of a three-way result.
        """
        if value is None:
            return None
        if isinstance(value, Ordering):
            return value
        if isinstance(value, bool):
            raise TypeError(
                f"Comparator returned {value!r}; expected an Ordering, "
                "a signed number or None"
            )
        try:
            if value < 0:
                return cls.LESS
            if value > 0:
                return cls.GREATER
            if value == 0:
                return cls.EQUAL
        except TypeError:
            return None
        return None


Comparator = Callable[[Any, Any], Union[Ordering, int, None]]


def natural_order(left: Any, right: Any) -> Optional[Ordering]:
    """Compare two values with Python's rich comparison operators.

    Returns None when neither ``==``, ``<`` nor ``>`` holds (NaN,
    incomparable sets) or when the operands refuse to be compared.
    """
    try:
        if left == right:
            return Ordering.EQUAL
        if left < right:
            return Ordering.LESS
        if left > right:
            return Ordering.GREATER
    except TypeError:
        return None
    return None
