# main.py
import logging
import sys
from typing import List, Optional
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status, Depends
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from . import crud, schemas
from .config import settings
from .database import Database, get_async_session
from .exceptions import StorageError, ValidationError

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    database = Database(settings.database_url, echo=settings.sql_echo)
    app.state.database = database

    logger.info("Creating database tables...")
    await database.create_db_and_tables()
    logger.info("Database ready.")

    yield

    # uvicorn finishes in-flight requests before we get here
    await database.dispose()


app = FastAPI(
    title="HR Records API",
    description="List and create employee records.",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- Error mapping ---

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": str(exc)})


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    # The cause was already logged where it happened; the caller gets the generic message.
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Malformed request %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": "Invalid request"})


# --- API Endpoints ---

@app.get("/api/health", response_model=schemas.HealthResponse, tags=["Health"])
async def health_check():
    return {"ok": True}


@app.get(
    "/api/employees",
    response_model=List[schemas.EmployeeRead],
    responses={500: {"model": schemas.ErrorResponse}},
    tags=["Employees"],
)
async def list_employees_endpoint(
        q: Optional[str] = None,
        db: AsyncSession = Depends(get_async_session),
):
    """
    All employees ordered by id. `q` keeps only records whose first name, NRIC,
    email, position or department contains it (case-insensitive).
    """
    return await crud.get_all_employees(db=db, q=q)


@app.post(
    "/api/employees",
    response_model=schemas.EmployeeRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
    tags=["Employees"],
)
async def create_employee_endpoint(
        employee_input: schemas.EmployeeCreate,
        db: AsyncSession = Depends(get_async_session),
):
    """Create a new employee record. Dates may be YYYY-MM-DD or DD/MM/YYYY."""
    return await crud.create_employee(db=db, employee=employee_input)


@app.get(
    "/api/employees/{employee_id}",
    response_model=schemas.EmployeeRead,
    responses={404: {"model": schemas.ErrorResponse}, 500: {"model": schemas.ErrorResponse}},
    tags=["Employees"],
)
async def get_employee_endpoint(
        employee_id: int,
        db: AsyncSession = Depends(get_async_session),
):
    employee = await crud.get_employee_by_id(db, employee_id)
    if not employee:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Employee not found"})
    return employee
