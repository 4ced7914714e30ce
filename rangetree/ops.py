from math import gcd
from typing import Any, Callable, Iterable, NamedTuple, TypeVar

from .exceptions import IdentityViolation

T = TypeVar("T")

inf = float("inf")


def bit_or(x: Any, y: Any) -> Any:
    return x | y


def bit_and(x: Any, y: Any) -> Any:
    return x & y


def max2(x: Any, y: Any) -> Any:
    """Binary version of `max`. Returns `x` on ties, like the builtin."""

    return y if y > x else x


def min2(x: Any, y: Any) -> Any:
    """Binary version of `min`. Returns `x` on ties, like the builtin."""

    return y if y < x else x


class Aggregate(NamedTuple):
    """A merge function together with its right identity.
    Can be unpacked into the `RangeTree` initializer.
    """

    func: Callable[[Any, Any], Any]
    initializer: Any


# Only idempotent merges give meaningful combine-assign range updates.
MAX = Aggregate(max2, -inf)
MIN = Aggregate(min2, inf)
BIT_OR = Aggregate(bit_or, 0)
BIT_AND = Aggregate(bit_and, -1)
# gcd(x, 0) == abs(x), so 0 is only an identity for non-negative values
GCD = Aggregate(gcd, 0)


def check_right_identity(func: Callable[[T, T], T], initializer: T, values: Iterable[T]) -> None:
    """Raises `IdentityViolation` if `func(x, initializer) != x` for any `x` in `values`."""

    for x in values:
        if func(x, initializer) != x:
            raise IdentityViolation(f"func({x!r}, {initializer!r}) != {x!r}", value=x)
