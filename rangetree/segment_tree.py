import logging
from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, Sequence, Type, TypeVar, overload

from .exceptions import assert_index, assert_interval, assert_type
from .ops import MAX, MIN, check_right_identity
from .typing import OrderableT

T = TypeVar("T")
RangeTreeT = TypeVar("RangeTreeT", bound="RangeTree")

logger = logging.getLogger(__name__)


class RangeTree(Generic[T]):

    """Segment tree with lazy propagation over a fixed number of elements.

    Supports range queries `query(lo, hi)` which return `func` folded over all elements
    in the closed interval `[lo, hi]`, and range updates `update(lo, hi, value)`. Both run in O(log n).

    An update descends like a query. Inner nodes which lie fully inside `[lo, hi]` combine
    `value` into all their elements (`x = func(x, value)`) and defer it to their children.
    A leaf the descent reaches is overwritten with `value`, so `update(idx, value)` sets
    a single element.

    `initializer` must be a right identity of `func`: `func(x, initializer) == x`.
    It doubles as the "nothing pending" marker of the lazy buffer.

    Range updates are only meaningful for idempotent merges like min, max, bitwise or/and
    or gcd. With `max` an update raises every element in the range to at least `value`,
    except for the leaves reached directly, which are set to `value`.
    With a summing merge pending values would be added once per node and compound.

    The tree is stored implicitly: node `i` has the children `2i+1` and `2i+2`.
    """

    tree: List[T]
    lazy: List[T]

    def __init__(
        self,
        size: int,
        func: Callable[[T, T], T],
        initializer: T,
        arr: Optional[Sequence[T]] = None,
        check_identity: bool = False,
    ) -> None:
        """Creates a tree for `size` elements.
        If `arr` is not given all elements are `initializer` until `build()` is called.
        If `check_identity` is True, `build()` verifies `func(x, initializer) == x`
        for all initial values.
        """

        assert_type("size", size, int)
        if size <= 0:
            raise ValueError(f"size must be positive, not {size}")

        self.n = size
        self.func = func
        self.initializer = initializer
        self.check_identity = check_identity
        self.initialized = False

        self.tree = [initializer] * (size << 2)
        self.lazy = [initializer] * (size << 2)

        if arr is not None:
            self.build(arr)
        else:
            logger.debug("Created empty %s of size %d", self.__class__.__name__, size)

    @classmethod
    def from_iterable(cls: Type[RangeTreeT], iterable: Iterable, *args: Any, **kwargs: Any) -> RangeTreeT:
        """Creates a tree holding the values of `iterable`.
        Remaining arguments are passed through to the initializer.
        """

        arr = list(iterable)
        return cls(len(arr), *args, arr=arr, **kwargs)

    def build(self, arr: Sequence[T]) -> None:
        """Replaces all elements with the values of `arr` and drops all pending updates.
        `arr` is only read during the call.
        """

        if len(arr) != self.n:
            raise ValueError(f"Expected {self.n} initial values, got {len(arr)}")

        if self.check_identity:
            check_right_identity(self.func, self.initializer, arr)

        self.lazy[:] = [self.initializer] * len(self.lazy)
        self._build(arr, 0, 0, self.n - 1)
        self.initialized = True

        logger.debug("Built %s of size %d", self.__class__.__name__, self.n)

    def _build(self, arr: Sequence[T], node: int, lo: int, hi: int) -> None:
        if lo == hi:
            self.tree[node] = arr[lo]
            return

        mid = (lo + hi) // 2
        left = node * 2 + 1
        right = node * 2 + 2
        self._build(arr, left, lo, mid)
        self._build(arr, right, mid + 1, hi)
        self.tree[node] = self.func(self.tree[left], self.tree[right])

    def _apply(self, node: int, leaf: bool, value: T) -> None:
        # leaves never hold pending values
        self.tree[node] = self.func(self.tree[node], value)
        if not leaf:
            self.lazy[node] = self.func(self.lazy[node], value)

    def _push(self, node: int, lo: int, mid: int, hi: int) -> None:
        pending = self.lazy[node]
        if pending != self.initializer:
            self._apply(node * 2 + 1, lo == mid, pending)
            self._apply(node * 2 + 2, mid + 1 == hi, pending)
            self.lazy[node] = self.initializer

    def _query(self, node: int, lo: int, hi: int, x: int, y: int) -> T:
        # [x, y] always overlaps [lo, hi]
        if x <= lo and hi <= y:
            return self.tree[node]

        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)

        if y <= mid:
            return self._query(node * 2 + 1, lo, mid, x, y)
        elif x > mid:
            return self._query(node * 2 + 2, mid + 1, hi, x, y)
        else:
            return self.func(
                self._query(node * 2 + 1, lo, mid, x, y),
                self._query(node * 2 + 2, mid + 1, hi, x, y),
            )

    def _update(self, node: int, lo: int, hi: int, x: int, y: int, value: T) -> None:
        # a leaf reached by the descent is overwritten, covered inner nodes are combined
        if lo == hi:
            self.tree[node] = value
            return

        if x <= lo and hi <= y:
            self._apply(node, False, value)
            return

        mid = (lo + hi) // 2
        left = node * 2 + 1
        right = node * 2 + 2
        self._push(node, lo, mid, hi)

        if x <= mid:
            self._update(left, lo, mid, x, y, value)
        if y > mid:
            self._update(right, mid + 1, hi, x, y, value)

        self.tree[node] = self.func(self.tree[left], self.tree[right])

    def _collect(self, node: int, lo: int, hi: int, out: List[T]) -> None:
        if lo == hi:
            out.append(self.tree[node])
            return

        mid = (lo + hi) // 2
        self._push(node, lo, mid, hi)
        self._collect(node * 2 + 1, lo, mid, out)
        self._collect(node * 2 + 2, mid + 1, hi, out)

    def size(self) -> int:
        return self.n

    def at(self, idx: int) -> T:
        assert_index("idx", idx, self.n)
        return self._query(0, 0, self.n - 1, idx, idx)

    def query(self, lo: int, hi: int) -> T:
        """Returns `func` folded over all elements in the closed interval `[lo, hi]`."""

        assert_interval(lo, hi, self.n)
        return self._query(0, 0, self.n - 1, lo, hi)

    @overload
    def update(self, idx: int, value: T) -> None:
        pass

    @overload
    def update(self, lo: int, hi: int, value: T) -> None:
        pass

    def update(self, *args):
        """update(idx, value) or update(lo, hi, value)

        Applies `value` to the closed interval `[lo, hi]`. Inner nodes fully covered by the
        interval combine it into their elements, `x = func(x, value)`. Leaves reached by the
        descent are overwritten. For a single index this is always an overwrite.
        """

        if len(args) == 2:
            idx, value = args
            assert_index("idx", idx, self.n)
            lo = hi = idx
        elif len(args) == 3:
            lo, hi, value = args
            assert_interval(lo, hi, self.n)
        else:
            raise TypeError(f"update() takes 2 or 3 arguments ({len(args)} given)")

        self._update(0, 0, self.n - 1, lo, hi, value)

    def modify(self, idx: int, value: T) -> None:
        """Sets the element at `idx` to `value`, regardless of its current value
        or of range updates still pending above it. Same as `update(idx, value)`.
        """

        assert_index("idx", idx, self.n)
        self._update(0, 0, self.n - 1, idx, idx, value)

    def to_list(self) -> List[T]:
        """Returns all elements in index order. Runs in O(n)."""

        out: List[T] = []
        self._collect(0, 0, self.n - 1, out)
        return out

    def __len__(self) -> int:
        return self.n

    def __getitem__(self, idx: int) -> T:
        return self.at(idx)

    def __setitem__(self, idx: int, value: T) -> None:
        self.modify(idx, value)

    def __iter__(self) -> Iterator[T]:
        return iter(self.to_list())


class MaxRangeTree(RangeTree[OrderableT]):

    """Range tree answering maximum queries. `update(lo, hi, value)` raises all
    elements in `[lo, hi]` to at least `value`.
    """

    def __init__(
        self,
        size: int,
        arr: Optional[Sequence[OrderableT]] = None,
        initializer: Any = MAX.initializer,
        check_identity: bool = False,
    ) -> None:
        RangeTree.__init__(self, size, MAX.func, initializer, arr, check_identity)

    def max(self, lo: int, hi: int) -> OrderableT:
        return self.query(lo, hi)


class MinRangeTree(RangeTree[OrderableT]):

    """Range tree answering minimum queries. `update(lo, hi, value)` lowers all
    elements in `[lo, hi]` to at most `value`.
    """

    def __init__(
        self,
        size: int,
        arr: Optional[Sequence[OrderableT]] = None,
        initializer: Any = MIN.initializer,
        check_identity: bool = False,
    ) -> None:
        RangeTree.__init__(self, size, MIN.func, initializer, arr, check_identity)

    def min(self, lo: int, hi: int) -> OrderableT:
        return self.query(lo, hi)
