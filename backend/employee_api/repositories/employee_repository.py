"""
Employee Directory — Employee Repository
==========================================

What:  SQLAlchemy implementation of the EmployeeStore contract.
Who:   Constructed per request by employee_api.dependencies, and directly by
       the persistence tests.

Query patterns:
    find_by_id:      SELECT ... WHERE id = :id                     (primary key)
    find_by_name:    SELECT ... WHERE name = :name ORDER BY id LIMIT 1
    find_all:        SELECT ... ORDER BY id                        (insertion order)
    exists_by_email: SELECT id ... WHERE email = :email LIMIT 1

The repository flushes but never commits. Database errors are not caught
here; they reach the caller as sqlalchemy.exc.SQLAlchemyError.
"""

import logging
from typing import List, Optional

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_api.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRepository:
    """Employee data access over a single AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        return await self._session.get(Employee, employee_id)

    async def find_by_name(self, name: str) -> Optional[Employee]:
        """Returns the earliest-inserted employee with this exact name, or None."""
        result = await self._session.execute(
            select(Employee)
            .where(Employee.name == name)
            .order_by(Employee.id)
            .limit(1)
        )
        return result.scalars().first()

    async def find_all(self) -> List[Employee]:
        result = await self._session.execute(select(Employee).order_by(Employee.id))
        return list(result.scalars().all())

    async def exists_by_email(self, email: str) -> bool:
        result = await self._session.execute(
            select(Employee.id).where(Employee.email == email).limit(1)
        )
        return result.scalar_one_or_none() is not None

    async def save(self, employee: Employee) -> Employee:
        """
        Insert or update an employee and return the persisted instance.

        New records (id is None) are added and get their id from the store on
        flush. Records that already carry an id are merged, so saving a
        detached copy updates the stored row instead of inserting a duplicate.
        The returned object may differ from the argument in the merge case.
        """
        if employee.id is None:
            self._session.add(employee)
        else:
            employee = await self._session.merge(employee)

        await self._session.flush()
        await self._session.refresh(employee)
        logger.debug("Saved employee id=%s name=%r", employee.id, employee.name)
        return employee

    # saveAndFlush-style alias used by test setup code; save() already flushes
    save_and_flush = save

    async def delete_all(self) -> None:
        """Removes every employee row. Intended for test teardown."""
        result = await self._session.execute(delete(Employee))
        await self._session.flush()
        logger.debug("Deleted %s employee rows", result.rowcount)

    async def count(self) -> int:
        result = await self._session.execute(select(func.count(Employee.id)))
        return result.scalar() or 0
