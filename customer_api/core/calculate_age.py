"""Age Calculation - whole years between a birth date and a reference date."""

from datetime import date


def calculate_age(date_of_birth: date, today: date) -> int:
    """Completed years on `today`. A 29 February birthday counts on 1 March in common years."""
    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age
