# app/schemas.py
from sqlmodel import SQLModel
from pydantic import ConfigDict, field_validator
from datetime import date
from typing import Optional, Union


TEXT_FIELDS = (
    "first_name", "last_name", "nric", "email", "phone", "dob", "address",
    "position", "department", "date_of_joining", "employment_type", "manager",
)


# Schema for creating an employee.
# Every field is optional at this layer: required-field checks happen in
# normalization so the caller gets "Missing required field: <name>" instead
# of a generic schema error.
class EmployeeCreate(SQLModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    nric: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    dob: Optional[str] = None
    address: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    date_of_joining: Optional[str] = None
    salary: Optional[Union[int, float, str]] = None
    employment_type: Optional[str] = None
    manager: Optional[str] = None

    @field_validator(*TEXT_FIELDS, mode="before")
    @classmethod
    def scalar_to_text(cls, v):
        """Accept numbers where text is expected (e.g. a numeric phone)."""
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("salary", mode="before")
    @classmethod
    def bool_salary_is_absent(cls, v):
        # otherwise lax int parsing turns true/false into 1/0
        if isinstance(v, bool):
            return None
        return v

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "nric": "S1234567A",
                "email": "ada@example.com",
                "phone": "91234567",
                "dob": "15/06/1990",
                "position": "Engineer",
                "department": "Engineering",
                "date_of_joining": "2021-03-01",
                "salary": 5000,
                "employment_type": "Full-time",
                "manager": "Charles Babbage"
            }
        }
    )


# Schema for reading an employee
class EmployeeRead(SQLModel):
    id: int
    first_name: str
    last_name: str
    nric: str
    email: str
    phone: Optional[str] = None
    dob: Optional[date] = None
    address: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None
    date_of_joining: Optional[date] = None
    salary: Optional[int] = None
    employment_type: Optional[str] = None
    manager: Optional[str] = None


class ErrorResponse(SQLModel):
    error: str


class HealthResponse(SQLModel):
    ok: bool = True
