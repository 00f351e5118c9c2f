"""Shared FastAPI dependencies.

Wiring is plain constructor injection: each request gets a session, the
session goes into a repository, the repository goes into a service. Tests
swap any link through app.dependency_overrides.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.database import get_db_session
from employee_api.repositories.employee_repository import EmployeeRepository
from employee_api.services.employee_service import EmployeeService


def get_employee_repository(
    db: AsyncSession = Depends(get_db_session),
) -> EmployeeRepository:
    """Repository bound to the current request's session."""
    return EmployeeRepository(db)


def get_employee_service(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeService:
    """Service for the current request."""
    return EmployeeService(repository)
