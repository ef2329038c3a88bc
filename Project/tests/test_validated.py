import pytest
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
from fpcore import validated
from fpcore.either import Left, Right
from fpcore.validated import Invalid, Valid, Validated, invalid, valid


def add(x, y):
    return x + y


def test_map2_accumulates_both_sides():
    assert validated.map2(Valid(2), Valid(3), add) == Valid(5)
    assert validated.map2(Invalid(("a",)), Valid(3), add) == Invalid(("a",))
    assert validated.map2(Valid(2), Invalid(("b",)), add) == Invalid(("b",))
    assert validated.map2(Invalid(("a",)), Invalid(("b", "c")), add) == Invalid(("a", "b", "c"))


def test_map2_custom_combine():
    keep_last = lambda xs, ys: ys[-1:]
    assert validated.map2(invalid("a"), invalid("b"), add, combine=keep_last) == Invalid(("b",))


def test_and_then_cannot_accumulate():
    calls = []
    step = lambda x: calls.append(x) or invalid("second")
    assert invalid("first").and_then(step) == Invalid(("first",))
    assert calls == []
    assert valid(1).and_then(step) == Invalid(("second",))


def test_traverse_collects_all_errors_in_order():
    check = lambda n: valid(n) if n > 0 else invalid(f"{n} <= 0")
    assert validated.traverse([1, 2], check) == Valid((1, 2))
    assert validated.traverse([0, 1, -1], check) == Invalid(("0 <= 0", "-1 <= 0"))
    assert validated.sequence([]) == Valid(())


def test_invalid_needs_an_error():
    with pytest.raises(ValueError):
        Invalid(())
    assert Invalid(["a"]).errors == ("a",)


def test_helpers():
    assert valid(1).map(lambda x: x + 1) == Valid(2)
    assert invalid("a").map(lambda x: x + 1) == Invalid(("a",))
    assert invalid("a", "b").map_errors(str.upper) == Invalid(("A", "B"))
    assert invalid("a").get_or_else(lambda: 0) == 0
    assert valid(3).fold(len, str) == "3"
    assert invalid("a", "b").fold(len, str) == 2
    assert invalid("a", "b").to_either() == Left(("a", "b"))
    assert valid(1).to_either() == Right(1)
    assert valid(1).is_valid() and not invalid("a").is_valid()


def test_validated_base_cannot_be_built():
    with pytest.raises(TypeError):
        Validated()
