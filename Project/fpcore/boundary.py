"""Turning raised exceptions into values.

This is the one place in fpcore where exceptions are caught. Everything
downstream works with Option / Either values instead.
"""

from dataclasses import dataclass, field
from functools import wraps
from typing import Callable, TypeVar

from fpcore.either import Either, Left, Right
from fpcore.logger import get_logger
from fpcore.option import NONE, Option, Some

A = TypeVar('A')

log = get_logger(__name__)


@dataclass(frozen=True)
class Failure:
    """What is kept of an exception once it becomes a Left."""
    kind: str
    message: str
    error: Exception = field(compare=False, repr=False)

    @staticmethod
    def from_exception(exc: Exception) -> "Failure":
        kind = type(exc).__name__
        message = str(exc) or f"{kind} raised with no message"
        return Failure(kind, message, exc)

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


def attempt(thunk: Callable[[], A]) -> Option[A]:
    """Some(thunk()), or NONE if it raises."""
    try:
        return Some(thunk())
    except Exception as e:
        log.debug("attempt: %s: %s", type(e).__name__, e)
        return NONE


def attempt_either(thunk: Callable[[], A]) -> Either[Failure, A]:
    """Right(thunk()), or Left(Failure) describing what it raised."""
    try:
        return Right(thunk())
    except Exception as e:
        failure = Failure.from_exception(e)
        log.debug("attempt_either: %s", failure)
        return Left(failure)


def safe(fn: Callable[..., A]) -> Callable[..., Either[Failure, A]]:
    """Decorator: calls return Either instead of raising."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        return attempt_either(lambda: fn(*args, **kwargs))
    return wrapper
