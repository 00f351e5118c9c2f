"""
Employee Directory — Employee Service
=======================================

What:  Domain operations on employee records, sitting between the routes and
       the repository.
How:   Receives its repository through the constructor; every call is one
       awaited round trip to the store.

Contract:
    - Lookups return None for a missing record. Whether absence is an error
      is the caller's decision (the HTTP layer maps it to 404).
    - exists(email) is a signal, not an error. save() does not call it;
      callers that need uniqueness check first.
    - No caching, no retries, no logging, no error translation. Store
      failures (sqlalchemy.exc.SQLAlchemyError) propagate unchanged.
"""

from typing import List, Optional

from employee_api.models.employee import Employee
from employee_api.repositories.base import EmployeeStore


class EmployeeService:
    """Stateless mediator over an EmployeeStore."""

    def __init__(self, repository: EmployeeStore):
        self.repository = repository

    async def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return await self.repository.find_by_id(employee_id)

    async def get_employee_by_name(self, name: str) -> Optional[Employee]:
        """First match wins when several employees share the name."""
        return await self.repository.find_by_name(name)

    async def get_all_employees(self) -> List[Employee]:
        return await self.repository.find_all()

    async def exists(self, email: str) -> bool:
        return await self.repository.exists_by_email(email)

    async def save(self, employee: Employee) -> Employee:
        """
        Persist an employee and return it with its assigned id.

        Note:
            exists() followed by save() is not atomic. Two concurrent creates
            with the same email can both pass the check.
        """
        return await self.repository.save(employee)
