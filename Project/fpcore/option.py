from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, Optional, Tuple, TypeVar, Union

A = TypeVar('A')
B = TypeVar('B')
C = TypeVar('C')
E = TypeVar('E')


class Option(Generic[A]):
    """Zero or one value of type A.

    Closed: the only variants are Some and Nothing. Combinators are written
    once here and dispatch on the variant.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError("Option is closed to Some and Nothing")

    def __new__(cls, *args, **kwargs):
        if cls is Option:
            raise TypeError("Option cannot be built directly, use Some and Nothing")
        return super().__new__(cls)

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_none(self) -> bool:
        return not self.is_some()

    def map(self, f: Callable[[A], B]) -> "Option[B]":
        if isinstance(self, Some):
            return Some(f(self.value))
        return NONE

    def flat_map(self, f: Callable[[A], "Option[B]"]) -> "Option[B]":
        # map gives Option[Option[B]]; get_or_else peels one layer off
        return self.map(f).get_or_else(lambda: NONE)

    def filter(self, p: Callable[[A], bool]) -> "Option[A]":
        return self.flat_map(lambda a: Some(a) if p(a) else NONE)

    def get_or_else(self, on_empty: Callable[[], B]) -> Union[A, B]:
        """Contained value, or on_empty() when absent. on_empty runs only then."""
        if isinstance(self, Some):
            return self.value
        return on_empty()

    def or_else(self, alt: Callable[[], "Option[B]"]) -> "Option[Union[A, B]]":
        return self.map(Some).get_or_else(alt)

    def fold(self, on_empty: Callable[[], B], on_value: Callable[[A], B]) -> B:
        return self.map(on_value).get_or_else(on_empty)

    def to_either(self, on_empty: Callable[[], E]):
        """Some(a) -> Right(a), Nothing -> Left(on_empty())."""
        from fpcore.either import Left, Right
        if isinstance(self, Some):
            return Right(self.value)
        return Left(on_empty())

    def __iter__(self) -> Iterator[A]:
        if isinstance(self, Some):
            yield self.value


@dataclass(frozen=True)
class Some(Option[A]):
    value: A


@dataclass(frozen=True)
class Nothing(Option[A]):
    pass


NONE: Option = Nothing()


def some(value: A) -> Option[A]:
    return Some(value)


def none() -> Option:
    return NONE


def from_nullable(value: Optional[A]) -> Option[A]:
    return NONE if value is None else Some(value)


def lift(f: Callable[[A], B]) -> Callable[[Option[A]], Option[B]]:
    return lambda oa: oa.map(f)


def map2(oa: Option[A], ob: Option[B], f: Callable[[A, B], C]) -> Option[C]:
    """Some(f(a, b)) when both are present. ob is not consulted if oa is absent."""
    return oa.flat_map(lambda a: ob.map(lambda b: f(a, b)))


def traverse(xs: Iterable[A], f: Callable[[A], Option[B]]) -> Option[Tuple[B, ...]]:
    """Map f over xs and collect, in one pass.

    Stops at the first absent result; f is not applied to the rest.
    An empty input gives Some(()).
    """
    out = []
    for x in xs:
        fx = f(x)
        if not isinstance(fx, Some):
            return NONE
        out.append(fx.value)
    return Some(tuple(out))


def sequence(xs: Iterable[Option[A]]) -> Option[Tuple[A, ...]]:
    return traverse(xs, lambda oa: oa)
