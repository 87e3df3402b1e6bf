"""Built-in parameter validators."""

import re
from datetime import date, datetime

from actionbind.validation.registry import ValidatorRegistry


@ValidatorRegistry.register("city_name")
def validate_city_name(value: str) -> bool:
    """Letters, spaces, dots, apostrophes and hyphens; at least two characters."""
    if not isinstance(value, str):
        return False
    value = value.strip()
    return len(value) > 1 and bool(re.fullmatch(r"[A-Za-zÀ-ÿ][A-Za-zÀ-ÿ .'\-]*", value))


@ValidatorRegistry.register("iata_code")
def validate_iata_code(value: str) -> bool:
    """Three uppercase letters."""
    return isinstance(value, str) and bool(re.fullmatch(r"[A-Z]{3}", value))


@ValidatorRegistry.register("booking_reference")
def validate_booking_reference(value: str) -> bool:
    """Six uppercase alphanumeric characters."""
    return isinstance(value, str) and bool(re.fullmatch(r"[A-Z0-9]{6}", value))


@ValidatorRegistry.register("future_date")
def validate_future_date(value: str | date) -> bool:
    """ISO date (or date object) that is today or later."""
    if isinstance(value, datetime):
        value = value.date()
    elif isinstance(value, str):
        value = date.fromisoformat(value.strip())
    elif not isinstance(value, date):
        return False
    return value >= date.today()


@ValidatorRegistry.register("positive_integer")
def validate_positive_integer(value: int | str) -> bool:
    return int(value) > 0
