# exceptions.py


class EmployeeServiceError(Exception):
    """Base class for failures reported by the employee service."""


class ValidationError(EmployeeServiceError):
    """A required field was missing or blank. Raised before any storage call."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class StorageError(EmployeeServiceError):
    """Reading from or writing to the database failed."""
