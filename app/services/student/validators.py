"""
Field validation shared by the HTTP API and the console.

Each predicate is total: it returns a bool for any input and never raises.
`validate_student` checks the fields in a fixed order (name, email, age,
gender) and reports the first one that fails.
"""
import re
from typing import Any, Dict, Mapping, Optional

from app.core.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Optional sign and ASCII digits, with surrounding whitespace
INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")
GENDERS = ("M", "F", "O")
MIN_AGE = 1
MAX_AGE = 149

NAME_MESSAGE = "Name must be at least 2 characters long"
EMAIL_MESSAGE = "Invalid email format"
AGE_MESSAGE = f"Invalid age. Must be between {MIN_AGE} and {MAX_AGE}"
GENDER_MESSAGE = "Invalid gender. Must be M, F, or O"


def is_valid_name(value: Any) -> bool:
    return isinstance(value, str) and len(value) >= 2


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.fullmatch(value) is not None


def parse_int(value: Any) -> Optional[int]:
    """Parse an int or a base-10 integer string, else None."""
    # bool is an int subclass, but True is not a number here
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and INTEGER_PATTERN.fullmatch(value):
        return int(value.strip(), 10)
    return None


def is_valid_age(value: Any) -> bool:
    age = parse_int(value)
    return age is not None and 0 < age < 150


def is_valid_id(value: Any) -> bool:
    student_id = parse_int(value)
    return student_id is not None and student_id > 0


def is_valid_gender(value: Any) -> bool:
    return isinstance(value, str) and value.upper() in GENDERS


def validate_student(data: Any) -> Dict[str, Any]:
    """
    Validate the four writable fields and return them normalized.

    Age comes back as an int and gender upper-cased. Raises ValidationError
    for the first failing field; missing fields fail the same way.
    """
    if not isinstance(data, Mapping):
        raise ValidationError("body", "Student data must be an object with name, email, age and gender")

    name = data.get("name")
    if not is_valid_name(name):
        raise ValidationError("name", NAME_MESSAGE)

    email = data.get("email")
    if not is_valid_email(email):
        raise ValidationError("email", EMAIL_MESSAGE)

    age = data.get("age")
    if not is_valid_age(age):
        raise ValidationError("age", AGE_MESSAGE)

    gender = data.get("gender")
    if not is_valid_gender(gender):
        raise ValidationError("gender", GENDER_MESSAGE)

    return {
        "name": name,
        "email": email,
        "age": parse_int(age),
        "gender": gender.upper(),
    }
