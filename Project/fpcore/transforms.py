import json
from functools import reduce
from typing import Sequence

from fpcore.boundary import Failure, attempt_either
from fpcore.domain import Employee, Person, Quote
from fpcore.either import Either
from fpcore.logger import get_logger
from fpcore.option import from_nullable
from fpcore.service import mean, variance

log = get_logger(__name__)


def load_seed(path) -> tuple:
    """Read employees, raw forms and raw quotes from a JSON seed file.

    Missing files and bad JSON raise; use load_seed_either to get a value.
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    employees = tuple(map(
        lambda e: Employee(e["name"], e["department"], from_nullable(e.get("manager"))),
        data.get("employees", []),
    ))
    forms = tuple(dict(form) for form in data.get("forms", []))
    quotes = tuple(Quote(str(q["age"]), str(q["tickets"])) for q in data.get("quotes", []))

    log.info("loaded seed %s: %d employees, %d forms, %d quotes",
             path, len(employees), len(forms), len(quotes))
    return employees, forms, quotes


def load_seed_either(path) -> Either[Failure, tuple]:
    return attempt_either(lambda: load_seed(path))


def age_stats(persons: Sequence[Person]) -> dict:
    ages = tuple(map(lambda p: p.age.value, persons))
    if not ages:
        return {}

    return {
        "count": len(ages),
        "min": reduce(min, ages),
        "max": reduce(max, ages),
        "mean": mean(ages).get_or_else(lambda: 0.0),
        "variance": variance(ages).get_or_else(lambda: 0.0),
    }


def departments(employees: Sequence[Employee]) -> dict:
    """department -> tuple of employee names, in input order."""
    return reduce(
        lambda acc, e: {**acc, e.department: acc.get(e.department, ()) + (e.name,)},
        employees,
        {},
    )
