"""Validation and normalization of user-supplied exercise and query fields.

Every validator here is pure: it either returns a normalized value or raises
one of the errors from ``services.exceptions``. Building the HTTP response is
left to the caller.
"""

import math
import re
from datetime import date
from typing import Any, Dict, NamedTuple, Optional, Union

from services.exceptions import InvalidFormatError, MissingFieldError

DESCRIPTION_MAX_LENGTH = 20

# BSON int64 range
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_NUMBER_PATTERN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

# Fixed English names so stored dates do not depend on the process locale.
_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTH_NAMES = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
_STORED_DATE_PATTERN = re.compile(
    r"^(?P<day>[A-Z][a-z]{2}) (?P<month>[A-Z][a-z]{2}) (?P<dom>\d{2}) (?P<year>\d{4})$"
)


class QueryFilter(NamedTuple):
    """Normalized log query parameters."""
    from_: Optional[date]
    to: Optional[date]
    limit: int


def format_date(value: date) -> str:
    """Render a date as ``"Mon Jan 01 2024"``."""
    return "{} {} {:02d} {:04d}".format(
        _DAY_NAMES[value.weekday()],
        _MONTH_NAMES[value.month - 1],
        value.day,
        value.year,
    )


def parse_date_string(value: Any) -> Optional[date]:
    """Read back a date stored by :func:`format_date`. Returns None if unreadable."""
    if not isinstance(value, str):
        return None
    match = _STORED_DATE_PATTERN.match(value.strip())
    if match is None or match.group("month") not in _MONTH_NAMES:
        return None
    try:
        return date(
            int(match.group("year")),
            _MONTH_NAMES.index(match.group("month")) + 1,
            int(match.group("dom")),
        )
    except ValueError:
        return None


def validate_username(value: Any) -> str:
    """Require a non-empty username."""
    if value is None or value == "":
        raise MissingFieldError("username", "Error: Username required")
    return str(value)


def validate_description(value: Any, max_length: int = DESCRIPTION_MAX_LENGTH) -> str:
    """Require a non-empty description no longer than ``max_length``."""
    if value is None or value == "":
        raise MissingFieldError(
            "description", "Error: Description required (field can not be empty)"
        )
    value = str(value)
    if len(value) > max_length:
        raise InvalidFormatError(
            "description",
            f"Error: Description must not exceed {max_length} characters",
        )
    return value


def validate_number(value: Any) -> Optional[Union[int, float]]:
    """
    Coerce a raw field into a number.

    Returns None for missing, blank, boolean or non-numeric input. Integral
    values are returned as ``int``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        number = value
    elif isinstance(value, str):
        text = value.strip()
        if not _NUMBER_PATTERN.fullmatch(text):
            return None
        number = float(text)
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    if number.is_integer():
        return int(number)
    return number


def validate_duration(value: Any) -> int:
    """Require a whole-number duration that fits a stored 64-bit integer."""
    duration = validate_number(value)
    if not isinstance(duration, int) or not INT64_MIN <= duration <= INT64_MAX:
        raise InvalidFormatError("duration", "Error: Duration must be a number")
    return duration


def validate_date(value: Any) -> Optional[date]:
    """Pick a ``YYYY-MM-DD`` date out of ``value``. Returns None if there is none."""
    if not isinstance(value, str):
        return None
    match = _DATE_PATTERN.search(value)
    if match is None:
        return None
    try:
        return date.fromisoformat(match.group(0))
    except ValueError:
        return None


def validate_date_for_exercise(value: Any, today: Optional[date] = None) -> str:
    """
    Normalize an exercise date to its stored text form.

    Missing or unparseable input falls back to today's date instead of
    being rejected.
    """
    today = today or date.today()
    if value is None:
        return format_date(today)
    parsed = validate_date(value)
    return format_date(parsed if parsed is not None else today)


def validate_date_into_literal(value: Any) -> Optional[date]:
    """Normalize a query date bound. None means no bound."""
    if value is None:
        return None
    return validate_date(value)


def validate_exercise_fields(
    description: Any,
    duration: Any,
    date_value: Any = None,
    max_length: int = DESCRIPTION_MAX_LENGTH,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """Validate the fields of a new exercise entry."""
    return {
        "description": validate_description(description, max_length),
        "duration": validate_duration(duration),
        "date": validate_date_for_exercise(date_value, today=today),
    }


def validate_req_query_props(from_: Any, to: Any, limit: Any) -> QueryFilter:
    """Normalize the from/to/limit query parameters of a log request."""
    number = validate_number(limit)
    if not isinstance(number, int) or number < 0:
        number = 0
    return QueryFilter(
        from_=validate_date_into_literal(from_),
        to=validate_date_into_literal(to),
        limit=number,
    )
