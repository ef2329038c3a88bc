from dataclasses import dataclass

from fpcore.option import NONE, Option


@dataclass(frozen=True)
class Employee:
    name: str
    department: str
    manager: Option[str] = NONE  # name of the manager, if any


@dataclass(frozen=True)
class Name:
    value: str


@dataclass(frozen=True)
class Age:
    value: int


@dataclass(frozen=True)
class Person:
    name: Name
    age: Age


@dataclass(frozen=True)
class Quote:
    # raw strings as typed into a form, parsed later
    age: str
    tickets: str
