from functools import reduce
from typing import Callable, Iterable, TypeVar

A = TypeVar('A')
B = TypeVar('B')


def fold_right(xs: Iterable[A], z: B, f: Callable[[A, B], B]) -> B:
    """f(x0, f(x1, ... f(xn, z))). Runs from the end, without recursion."""
    return reduce(lambda acc, x: f(x, acc), reversed(tuple(xs)), z)


def fold_left(xs: Iterable[A], z: B, f: Callable[[B, A], B]) -> B:
    return reduce(f, xs, z)
