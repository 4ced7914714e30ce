from typing import Any, Tuple, Type, Union

# values, input errors


class IntervalError(ValueError):
    """Raised when a closed interval `[lo, hi]` is inverted or does not lie
    within the index range of the tree.
    """

    def __init__(self, lo: int, hi: int, size: int) -> None:
        ValueError.__init__(self, f"Interval [{lo}, {hi}] out of range [0, {size - 1}]")
        self.lo = lo
        self.hi = hi
        self.size = size


class IdentityViolation(ValueError):
    """Raised when the merge function does not treat the initializer as a right identity,
    ie. `func(x, initializer) != x` for some value `x`.
    Such a pair would silently corrupt every query answer.
    """

    def __init__(self, *args, value=None):
        super().__init__(*args)
        self.value = value


def assert_type(name: str, value: Any, types: Union[Type[Any], Tuple[Type[Any], ...]]) -> None:

    if not isinstance(value, types):
        if not isinstance(types, tuple):
            types = (types,)
        raise TypeError(
            "{} must be one of these types: {}. Not: {}".format(name, ", ".join(map(str, types)), type(value))
        )


def assert_index(name: str, idx: int, size: int) -> None:

    assert_type(name, idx, int)
    if not 0 <= idx < size:
        raise IndexError(f"{name} {idx} out of range [0, {size - 1}]")


def assert_interval(lo: int, hi: int, size: int) -> None:

    assert_type("lo", lo, int)
    assert_type("hi", hi, int)
    if not 0 <= lo <= hi < size:
        raise IntervalError(lo, hi, size)
