from functools import reduce
from typing import Any, Callable


def identity(x: Any) -> Any:
    return x


def compose(*funcs: Callable) -> Callable:
    """
    compose(f, g, h)(x) == f(g(h(x))).
    Functions are applied right to left; compose() is identity.
    """
    return reduce(lambda f, g: lambda x: f(g(x)), funcs, identity)


def pipe(x: Any, *funcs: Callable) -> Any:
    """pipe(x, f, g) == g(f(x)): left to right."""
    return reduce(lambda acc, f: f(acc), funcs, x)
