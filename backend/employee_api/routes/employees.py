"""
Employee Directory — Employee Route Handlers
=============================================

What:  GET/POST /api/employees plus single-record lookups by id and by name.
How:   Each handler receives an EmployeeService from dependencies.py and does
       HTTP work only: status codes, absent → 404, duplicate → 409.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status

from employee_api.dependencies import get_employee_service
from employee_api.exceptions import DuplicateEmployeeError, NotFoundError
from employee_api.models.employee import Employee
from employee_api.schemas.employee import (
    EmployeeCreate,
    EmployeeResponse,
    ErrorResponse,
)
from employee_api.services.employee_service import EmployeeService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Employees"])


@router.get(
    "/employees",
    response_model=List[EmployeeResponse],
    responses={
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="List all employees",
    description="Returns every employee in the order they were created. No pagination.",
)
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeResponse]:
    employees = await service.get_all_employees()
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.post(
    "/employees",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"description": "Email already registered", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Create an employee",
)
async def create_employee(
    payload: EmployeeCreate,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    """
    Create an employee record.

    When an email is supplied it is checked with service.exists() first and a
    taken email is rejected with 409. Employees without an email are never
    deduplicated; two POSTs of {"name": "bob"} create two records.
    """
    if payload.email and await service.exists(payload.email):
        raise DuplicateEmployeeError(email=payload.email)

    employee = await service.save(Employee(name=payload.name, email=payload.email))
    logger.info("Created employee %s (%s)", employee.id, employee.name)
    return EmployeeResponse.model_validate(employee)


@router.get(
    "/employees/by-name/{name}",
    response_model=EmployeeResponse,
    responses={
        404: {"description": "No employee with that name", "model": ErrorResponse},
    },
    summary="Get an employee by name",
    description="Exact-match lookup. If several employees share the name, the earliest one is returned.",
)
async def get_employee_by_name(
    name: str,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    employee = await service.get_employee_by_name(name)
    if employee is None:
        raise NotFoundError(resource="employee", resource_id=name)
    return EmployeeResponse.model_validate(employee)


@router.get(
    "/employees/{employee_id}",
    response_model=EmployeeResponse,
    responses={
        404: {"description": "Employee not found", "model": ErrorResponse},
    },
    summary="Get an employee by id",
)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeResponse:
    employee = await service.get_employee_by_id(employee_id)
    if employee is None:
        raise NotFoundError(resource="employee", resource_id=str(employee_id))
    return EmployeeResponse.model_validate(employee)
