from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Tuple, TypeVar, Union

from fpcore.option import NONE, Option, Some

E = TypeVar('E')
F = TypeVar('F')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')


class Either(Generic[E, A]):
    """A value of type A (Right) or an error of type E (Left).

    Right-biased: map, flat_map and or_else act on Right and hand a Left
    back untouched.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Either is closed to Left and Right")

    def __new__(cls, *args, **kwargs):
        if cls is Either:
            raise TypeError("Either cannot be built directly, use Left and Right")
        return super().__new__(cls)

    def is_right(self) -> bool:
        return isinstance(self, Right)

    def is_left(self) -> bool:
        return isinstance(self, Left)

    def map(self, f: Callable[[A], B]) -> "Either[E, B]":
        if isinstance(self, Right):
            return Right(f(self.value))
        return self

    def flat_map(self, f: Callable[[A], "Either[F, B]"]) -> "Either[Union[E, F], B]":
        if isinstance(self, Right):
            return f(self.value)
        return self

    def map_left(self, f: Callable[[E], F]) -> "Either[F, A]":
        if isinstance(self, Left):
            return Left(f(self.value))
        return self

    def or_else(self, alt: Callable[[], "Either[F, B]"]) -> "Either[F, Union[A, B]]":
        if isinstance(self, Right):
            return self
        return alt()

    def get_or_else(self, on_left: Callable[[], B]) -> Union[A, B]:
        if isinstance(self, Right):
            return self.value
        return on_left()

    def fold(self, on_left: Callable[[E], C], on_right: Callable[[A], C]) -> C:
        if isinstance(self, Right):
            return on_right(self.value)
        return on_left(self.value)

    def to_option(self) -> Option[A]:
        """Right(a) -> Some(a); the Left payload is dropped."""
        if isinstance(self, Right):
            return Some(self.value)
        return NONE

    def to_validated(self):
        from fpcore.validated import Invalid, Valid
        if isinstance(self, Right):
            return Valid(self.value)
        return Invalid((self.value,))


@dataclass(frozen=True)
class Left(Either[E, A]):
    value: E


@dataclass(frozen=True)
class Right(Either[E, A]):
    value: A


def left(value: E) -> Either[E, A]:
    return Left(value)


def right(value: A) -> Either[E, A]:
    return Right(value)


def map2(ea: Either[E, A], eb: Either[E, B], f: Callable[[A, B], C]) -> Either[E, C]:
    """Fail-fast: the left operand's Left wins when both fail."""
    return ea.flat_map(lambda a: eb.map(lambda b: f(a, b)))


def traverse(xs: Iterable[A], f: Callable[[A], Either[E, B]]) -> Either[E, Tuple[B, ...]]:
    """Right of all results in order, or the first Left in scan order.

    f is not applied past the first failure. Empty input gives Right(()).
    """
    out = []
    for x in xs:
        fx = f(x)
        if isinstance(fx, Left):
            return fx
        out.append(fx.value)
    return Right(tuple(out))


def sequence(xs: Iterable[Either[E, A]]) -> Either[E, Tuple[A, ...]]:
    return traverse(xs, lambda ea: ea)
