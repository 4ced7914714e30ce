from functools import wraps
from itertools import product, zip_longest
from typing import Any, Callable, Iterable, Optional, Sequence
from unittest import TestCase

from .segment_tree import RangeTree


class MyTestCase(TestCase):
    def assertIterEqual(self, first: Iterable, second: Iterable, msg: Optional[str] = None) -> None:
        for i, (a, b) in enumerate(zip_longest(first, second)):
            if msg:
                msg = " : " + str(msg)
            self.assertEqual(a, b, msg=f"in iteration index {i}: {msg}")

    def assertAllEqual(self, args: Iterable, msg: Optional[str] = None) -> None:
        it = iter(args)
        first = next(it)
        for second in it:
            self.assertEqual(first, second, msg)

    def assertTreeEqual(self, tree: RangeTree, truth: Sequence, msg: Optional[str] = None) -> None:
        """Checks every element by point query first, then by a full traversal.
        Point queries leave pending updates in place, so both code paths are exercised.
        """

        self.assertEqual(len(truth), len(tree), msg)
        self.assertIterEqual((tree.at(i) for i in range(len(tree))), truth, msg)
        self.assertIterEqual(tree.to_list(), truth, msg)

    def assertQueriesEqual(
        self, tree: RangeTree, truth: Sequence, func: Callable[[Any, Any], Any], msg: Optional[str] = None
    ) -> None:
        """Compares every possible interval query against a naive fold of `truth`."""

        for lo in range(len(truth)):
            acc = truth[lo]
            for hi in range(lo, len(truth)):
                if hi > lo:
                    acc = func(acc, truth[hi])
                self.assertEqual(acc, tree.query(lo, hi), msg=f"query({lo}, {hi}) {msg or ''}")


# also called: parameterize
def parametrize(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in args_list:
                with self.subTest(str(args)[:1000]):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator


def parametrize_product(*args_list: tuple) -> Callable[[Callable], Callable]:
    def decorator(func):
        @wraps(func)
        def inner(self):
            for args in product(*args_list):
                with self.subTest(str(args)):
                    if func(self, *args) is not None:
                        raise AssertionError

        return inner

    return decorator
