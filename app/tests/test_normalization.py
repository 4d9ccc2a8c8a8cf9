# tests/test_normalization.py
import math
from datetime import date

import pytest

from app.exceptions import ValidationError
from app.normalization import (
    LENIENT_FIELDS,
    clean_text,
    normalize_employee,
    parse_date,
    parse_int,
)
from app.schemas import EmployeeCreate


@pytest.mark.parametrize("value, expected", [
    ("15/06/1990", date(1990, 6, 15)),
    ("1990-06-15", date(1990, 6, 15)),
    ("  01/01/2000 ", date(2000, 1, 1)),
    ("99/99/9999", None),
    ("not-a-date", None),
    ("1990-6-15", None),
    ("15-06-1990", None),
    ("29/02/2023", None),
    ("29/02/2024", date(2024, 2, 29)),
    ("", None),
    (None, None),
])
def test_parse_date(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize("value, expected", [
    ("5000.75", 5000),
    ("-12.9", -12),
    (" 42", 42),
    ("12abc", 12),
    ("abc", None),
    ("", None),
    (None, None),
    (7, 7),
    (3.99, 3),
    (math.inf, None),
    (math.nan, None),
    (True, None),
])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


def test_clean_text():
    assert clean_text("  Ada ") == "Ada"
    assert clean_text("   ") is None
    assert clean_text(None) is None


def test_lenient_fields_are_named():
    assert set(LENIENT_FIELDS) == {"dob", "date_of_joining", "salary"}


def test_normalize_employee():
    values = normalize_employee(EmployeeCreate(
        first_name=" Ada ",
        last_name="Lovelace",
        nric="S1234567A",
        email="ada@x.com",
        phone="",
        dob="15/06/1990",
        salary="abc",
        employment_type="Contract",
    ))
    assert values["first_name"] == "Ada"
    assert values["phone"] is None
    assert values["address"] is None
    assert values["dob"] == date(1990, 6, 15)
    assert values["date_of_joining"] is None
    assert values["salary"] is None
    assert values["employment_type"] == "Contract"


def test_first_missing_field_is_reported():
    with pytest.raises(ValidationError) as excinfo:
        normalize_employee(EmployeeCreate(first_name="Ada", nric="", email=""))
    assert excinfo.value.field == "last_name"
    assert str(excinfo.value) == "Missing required field: last_name"
