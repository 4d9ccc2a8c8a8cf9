# crud.py
import logging
from typing import List, Optional

from sqlmodel import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from .exceptions import StorageError
from .models import Employee
from .normalization import normalize_employee
from .schemas import EmployeeCreate

logger = logging.getLogger(__name__)

# Columns the list filter searches in.
SEARCH_COLUMNS = (
    Employee.first_name,
    Employee.nric,
    Employee.email,
    Employee.position,
    Employee.department,
)


def _like_pattern(q: str) -> str:
    escaped = q.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


# --- Employee CRUD ---

async def create_employee(db: AsyncSession, employee: EmployeeCreate) -> Employee:
    """
    Validate and insert one employee, returning the stored row.

    ValidationError is raised before the database is touched; any database
    failure rolls back and is raised as StorageError.
    """
    values = normalize_employee(employee)
    db_employee = Employee(**values)

    try:
        db.add(db_employee)
        await db.commit()
        await db.refresh(db_employee)
    except SQLAlchemyError as err:
        await db.rollback()
        logger.exception("Insert error for employee email=%s", values["email"])
        raise StorageError("Failed to add employee") from err

    logger.info("Created employee id=%s", db_employee.id)
    return db_employee


async def get_all_employees(db: AsyncSession, q: Optional[str] = None) -> List[Employee]:
    statement = select(Employee)

    q = (q or "").strip()
    if q:
        pattern = _like_pattern(q)
        statement = statement.where(
            or_(*(column.ilike(pattern, escape="\\") for column in SEARCH_COLUMNS))
        )

    statement = statement.order_by(Employee.id.asc())

    try:
        result = await db.execute(statement)
    except SQLAlchemyError as err:
        logger.exception("Failed to fetch employees (q=%r)", q)
        raise StorageError("Failed to fetch employees") from err
    return result.scalars().all()


async def get_employee_by_id(db: AsyncSession, employee_id: int) -> Optional[Employee]:
    try:
        return await db.get(Employee, employee_id)
    except SQLAlchemyError as err:
        logger.exception("Failed to fetch employee id=%s", employee_id)
        raise StorageError("Failed to fetch employee") from err
