from typing import Sequence

from fpcore import either, option, validated
from fpcore.boundary import Failure, attempt, attempt_either
from fpcore.domain import Age, Employee, Name, Person
from fpcore.either import Either, Left, Right
from fpcore.folds import fold_left
from fpcore.option import NONE, Option, Some, from_nullable
from fpcore.validated import Validated


def lookup_by_name(employees: Sequence[Employee], name: str) -> Option[Employee]:
    return from_nullable(next((e for e in employees if e.name == name), None))


def department_of(employees: Sequence[Employee], name: str) -> Option[str]:
    return lookup_by_name(employees, name).map(lambda e: e.department)


def manager_of(employees: Sequence[Employee], name: str) -> Option[str]:
    return lookup_by_name(employees, name).flat_map(lambda e: e.manager)


def mean(xs: Sequence[float]) -> Option[float]:
    """Arithmetic mean; NONE for an empty sequence instead of ZeroDivisionError."""
    if not xs:
        return NONE
    return Some(fold_left(xs, 0.0, lambda acc, x: acc + x) / len(xs))


def variance(xs: Sequence[float]) -> Option[float]:
    """Population variance: mean of (x - m) ** 2."""
    return mean(xs).flat_map(lambda m: mean([(x - m) ** 2 for x in xs]))


def parse_int(s) -> Option[int]:
    """Whole number from text or an int. Floats and bools are not truncated: NONE."""
    if isinstance(s, int) and not isinstance(s, bool):
        return Some(s)
    if not isinstance(s, str):
        return NONE
    return attempt(lambda: int(s))


def insurance_rate_quote(age: int, tickets: int) -> float:
    if age < 0 or tickets < 0:
        raise ValueError(f"negative input: age={age}, tickets={tickets}")
    base = 100.0 + 25.0 * tickets
    return base * 1.5 if age < 25 else base


def parse_insurance_rate_quote(age: str, tickets: str) -> Option[float]:
    """Quote from raw form strings; NONE if a field is not a number or is negative."""
    return option.map2(
        parse_int(age), parse_int(tickets), lambda a, t: (a, t)
    ).flat_map(lambda at: attempt(lambda: insurance_rate_quote(*at)))


def parse_insurance_rate_quote_either(age: str, tickets: str) -> Either[Failure, float]:
    """Same as parse_insurance_rate_quote, but the Left says what went wrong."""
    return either.map2(
        attempt_either(lambda: int(age)),
        attempt_either(lambda: int(tickets)),
        lambda a, t: (a, t),
    ).flat_map(lambda at: attempt_either(lambda: insurance_rate_quote(*at)))


def mk_name(name) -> Either[str, Name]:
    if name is None or not str(name).strip():
        return Left("Name is empty.")
    return Right(Name(str(name).strip()))


def mk_age(age: int) -> Either[str, Age]:
    if age < 0 or age > 150:
        return Left("Age is out of range.")
    return Right(Age(age))


def mk_person(name, age: int) -> Either[str, Person]:
    """Fail-fast: only the first problem is reported."""
    return either.map2(mk_name(name), mk_age(age), Person)


def mk_person_validated(name, age: int) -> Validated[str, Person]:
    """Reports the name and the age problem together."""
    return validated.map2(mk_name(name).to_validated(), mk_age(age).to_validated(), Person)
