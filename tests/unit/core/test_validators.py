"""Tests for ValidatorRegistry and the built-in validators"""

from datetime import date, timedelta

import pytest

from actionbind.validation import ValidatorRegistry


@pytest.mark.parametrize(
    "value,expected",
    [
        ("Boston", True),
        ("New York", True),
        ("Saint-Étienne", True),
        ("X", False),
        ("123", False),
        ("", False),
        (42, False),
    ],
)
def test_city_name(value, expected):
    assert ValidatorRegistry.validate("city_name", value) is expected


def test_booking_reference_requires_six_uppercase_alphanumerics():
    assert ValidatorRegistry.validate("booking_reference", "AB12CD")
    assert not ValidatorRegistry.validate("booking_reference", "ab12cd")
    assert not ValidatorRegistry.validate("booking_reference", "AB12")


def test_future_date_accepts_today_and_later():
    # Arrange
    tomorrow = date.today() + timedelta(days=1)
    yesterday = date.today() - timedelta(days=1)

    # Act & Assert
    assert ValidatorRegistry.validate("future_date", tomorrow)
    assert ValidatorRegistry.validate("future_date", tomorrow.isoformat())
    assert not ValidatorRegistry.validate("future_date", yesterday)


def test_validator_exceptions_count_as_invalid():
    # "abc" cannot be parsed as an int or an ISO date
    assert not ValidatorRegistry.validate("positive_integer", "abc")
    assert not ValidatorRegistry.validate("future_date", "next week")


def test_register_and_unregister_custom_validator():
    # Arrange
    @ValidatorRegistry.register("even_number")
    def validate_even(value: int) -> bool:
        return value % 2 == 0

    # Act & Assert
    try:
        assert ValidatorRegistry.is_registered("even_number")
        assert "even_number" in ValidatorRegistry.list_validators()
        assert ValidatorRegistry.validate("even_number", 4)
        assert not ValidatorRegistry.validate("even_number", 3)
    finally:
        ValidatorRegistry.unregister("even_number")

    assert not ValidatorRegistry.is_registered("even_number")


def test_get_unknown_validator_raises():
    with pytest.raises(ValueError, match="not registered"):
        ValidatorRegistry.get("does_not_exist")
