# models.py
from sqlmodel import SQLModel, Field
from datetime import date
from typing import Optional


class Employee(SQLModel, table=True):
    __tablename__ = "employees"

    id: Optional[int] = Field(default=None, primary_key=True)
    first_name: str
    last_name: str
    # Identity string; uniqueness is not enforced by the database.
    nric: str = Field(index=True)
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
