# normalization.py
"""
Turns a submitted employee payload into column values ready for insertion.

Required text fields must be non-blank after trimming; the first one that is
not raises ValidationError. Everything else is lenient: optional blanks become
None, and malformed dates or salaries are downgraded to None instead of being
rejected (see LENIENT_FIELDS).
"""
import math
import re
from datetime import date, datetime
from typing import Any, Dict, Optional

from .exceptions import ValidationError
from .schemas import EmployeeCreate

# Checked in this order; the first missing one is reported.
REQUIRED_FIELDS = ("first_name", "last_name", "nric", "email")

OPTIONAL_TEXT_FIELDS = (
    "phone", "address", "position", "department", "employment_type", "manager",
)

DATE_FIELDS = ("dob", "date_of_joining")

# Fields whose malformed input is silently stored as NULL.
LENIENT_FIELDS = DATE_FIELDS + ("salary",)

_ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
_DMY_DATE = re.compile(r"^([0-9]{2})/([0-9]{2})/([0-9]{4})$")
_INT_PREFIX = re.compile(r"^\s*([+-]?[0-9]+)")


def clean_text(value: Any) -> Optional[str]:
    """Trim a value; blank or missing becomes None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_date(value: Any) -> Optional[date]:
    """
    Accept YYYY-MM-DD or DD/MM/YYYY. Any other shape, or digits that do not
    make a real calendar date, gives None.
    """
    text = clean_text(value)
    if text is None:
        return None

    if _ISO_DATE.match(text):
        fmt = "%Y-%m-%d"
    elif _DMY_DATE.match(text):
        fmt = "%d/%m/%Y"
    else:
        return None

    try:
        return datetime.strptime(text, fmt).date()
    except ValueError:
        return None


def parse_int(value: Any) -> Optional[int]:
    """
    Integer-prefix parse: "5000.75" -> 5000, "12abc" -> 12, "abc" -> None.
    Never raises.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, int):
        return value

    match = _INT_PREFIX.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def normalize_employee(employee: EmployeeCreate) -> Dict[str, Any]:
    """Validate required fields and coerce the rest. Raises ValidationError."""
    raw = employee.model_dump()
    values: Dict[str, Any] = {}

    for field in REQUIRED_FIELDS:
        text = clean_text(raw.get(field))
        if text is None:
            raise ValidationError(field)
        values[field] = text

    for field in OPTIONAL_TEXT_FIELDS:
        values[field] = clean_text(raw.get(field))

    for field in DATE_FIELDS:
        values[field] = parse_date(raw.get(field))

    values["salary"] = parse_int(raw.get("salary"))
    return values
