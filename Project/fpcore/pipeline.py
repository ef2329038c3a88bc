from typing import Mapping, Sequence, Tuple

from fpcore import either, validated
from fpcore.domain import Age, Person
from fpcore.either import Either
from fpcore.logger import get_logger
from fpcore.service import mk_age, mk_name, parse_int
from fpcore.validated import Validated

log = get_logger(__name__)


def parse_age(raw) -> Either[str, Age]:
    return parse_int(raw).to_either(lambda: f"Age {raw!r} is not a whole number.").flat_map(mk_age)


def validate_form(form: Mapping) -> Validated[str, Person]:
    """A raw {"name", "age"} form as a Person, with every problem listed."""
    return validated.map2(
        mk_name(form.get("name")).to_validated(),
        parse_age(form.get("age")).to_validated(),
        Person,
    )


def process_form(form: Mapping) -> dict:
    """Validates one form and reports the outcome as a plain dict."""
    result = validate_form(form).fold(
        lambda errors: {"status": "error", "errors": list(errors)},
        lambda person: {"status": "ok", "person": person,
                        "name": person.name.value, "age": person.age.value},
    )
    if result["status"] == "ok":
        log.info("form accepted: %s", result["name"])
    else:
        log.info("form rejected: %s", "; ".join(result["errors"]))
    return result


def validate_forms(forms: Sequence[Mapping]) -> Validated[str, Tuple[Person, ...]]:
    """All forms as Persons, or every error across all forms tagged with its index."""
    return validated.traverse(
        enumerate(forms),
        lambda ix: validate_form(ix[1]).map_errors(lambda e: f"form {ix[0]}: {e}"),
    )


def admit_forms(forms: Sequence[Mapping]) -> Either[Tuple[str, ...], Tuple[Person, ...]]:
    """Fail-fast variant: stops at the first bad form and returns its errors."""
    return either.traverse(forms, lambda form: validate_form(form).to_either())
