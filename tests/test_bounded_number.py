from __future__ import annotations

import pytest

from mrc_creator.workout.bounded_number import (
    BoundedNumber,
    InvalidNumberError,
    NegativeValueError,
    NotANumberError,
)


def test_create_valid_number() -> None:
    assert BoundedNumber(10.0).value == 10.0
    assert BoundedNumber(0).value == 0.0


def test_negative_number_is_rejected() -> None:
    with pytest.raises(NegativeValueError) as info:
        BoundedNumber(-1.0)

    assert info.value.value == -1.0
    assert isinstance(info.value, InvalidNumberError)


def test_nan_is_rejected() -> None:
    with pytest.raises(NotANumberError):
        BoundedNumber(float("nan"))


def test_text_has_two_fractional_digits() -> None:
    assert BoundedNumber(10.0).to_text() == "10.00"
    assert BoundedNumber(0.123).to_text() == "0.12"
    assert BoundedNumber(7.5).to_text() == "7.50"
    assert str(BoundedNumber(1234.5678)) == "1234.57"


def test_parse_trims_whitespace() -> None:
    assert BoundedNumber.parse("  42.5 \n") == BoundedNumber(42.5)


def test_parse_rejects_garbage() -> None:
    with pytest.raises(NotANumberError) as info:
        BoundedNumber.parse("30.0.00")

    assert info.value.text == "30.0.00"


def test_parse_rejects_non_finite_text() -> None:
    with pytest.raises(NotANumberError):
        BoundedNumber.parse("inf")


def test_parse_bubbles_negative_error() -> None:
    with pytest.raises(NegativeValueError):
        BoundedNumber.parse("-3")


def test_add() -> None:
    one, two, three = BoundedNumber(1.0), BoundedNumber(2.0), BoundedNumber(3.0)

    assert one + two == BoundedNumber(3.0)
    assert one + two == two + one
    assert (one + two) + three == one + (two + three)


def test_ordering_follows_value() -> None:
    assert BoundedNumber(1.0) < BoundedNumber(2.0)
    assert max(BoundedNumber(5.0), BoundedNumber(3.0)) == BoundedNumber(5.0)


def test_of_passes_existing_numbers_through() -> None:
    number = BoundedNumber(4.0)

    assert BoundedNumber.of(number) is number
    assert BoundedNumber.of(4) == number


@pytest.mark.parametrize("value", [float("inf"), float("-inf")])
def test_infinite_values_are_rejected(value: float) -> None:
    with pytest.raises(NotANumberError):
        BoundedNumber(value)
