from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, Tuple, TypeVar, Union

from fpcore.either import Either, Left, Right

E = TypeVar('E')
F = TypeVar('F')
A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')

Errors = Tuple[E, ...]


class Validated(Generic[E, A]):
    """Like Either, but Invalid keeps every error seen, in order.

    Errors accumulate only through map2, traverse and sequence. and_then
    stops at the first Invalid since the next step needs the value.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Validated is closed to Valid and Invalid")

    def __new__(cls, *args, **kwargs):
        if cls is Validated:
            raise TypeError("Validated cannot be built directly, use Valid and Invalid")
        return super().__new__(cls)

    def is_valid(self) -> bool:
        return isinstance(self, Valid)

    def map(self, f: Callable[[A], B]) -> "Validated[E, B]":
        if isinstance(self, Valid):
            return Valid(f(self.value))
        return self

    def map_errors(self, f: Callable[[E], F]) -> "Validated[F, A]":
        if isinstance(self, Invalid):
            return Invalid(tuple(f(e) for e in self.errors))
        return self

    def and_then(self, f: Callable[[A], "Validated[E, B]"]) -> "Validated[E, B]":
        if isinstance(self, Valid):
            return f(self.value)
        return self

    def get_or_else(self, on_invalid: Callable[[], B]) -> Union[A, B]:
        if isinstance(self, Valid):
            return self.value
        return on_invalid()

    def fold(self, on_invalid: Callable[[Errors], C], on_valid: Callable[[A], C]) -> C:
        if isinstance(self, Valid):
            return on_valid(self.value)
        return on_invalid(self.errors)

    def to_either(self) -> Either[Errors, A]:
        if isinstance(self, Valid):
            return Right(self.value)
        return Left(self.errors)


@dataclass(frozen=True)
class Valid(Validated[E, A]):
    value: A


@dataclass(frozen=True)
class Invalid(Validated[E, A]):
    errors: Errors

    def __post_init__(self):
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Invalid needs at least one error")


def valid(value: A) -> Validated[E, A]:
    return Valid(value)


def invalid(error: E, *more: E) -> Validated[E, A]:
    return Invalid((error,) + more)


def _concat(xs: Errors, ys: Errors) -> Errors:
    return xs + ys


def map2(va: Validated[E, A], vb: Validated[E, B], f: Callable[[A, B], C],
         combine: Optional[Callable[[Errors, Errors], Errors]] = None) -> Validated[E, C]:
    """Valid(f(a, b)) when both are valid, otherwise every error from both sides.

    combine merges the two error tuples when both sides fail; the default
    keeps the left side's errors first.
    """
    if isinstance(va, Valid) and isinstance(vb, Valid):
        return Valid(f(va.value, vb.value))
    if isinstance(va, Invalid) and isinstance(vb, Invalid):
        return Invalid((combine or _concat)(va.errors, vb.errors))
    return va if isinstance(va, Invalid) else vb


def traverse(xs: Iterable[A], f: Callable[[A], Validated[E, B]]) -> Validated[E, Tuple[B, ...]]:
    """Apply f to every element and collect all errors in input order."""
    values = []
    errors = []
    for x in xs:
        fx = f(x)
        if isinstance(fx, Valid):
            values.append(fx.value)
        else:
            errors.extend(fx.errors)
    if errors:
        return Invalid(tuple(errors))
    return Valid(tuple(values))


def sequence(xs: Iterable[Validated[E, A]]) -> Validated[E, Tuple[A, ...]]:
    return traverse(xs, lambda va: va)
