"""In-memory EmployeeStore used by the service unit tests.

Keeps records in a list, assigns ids from a counter, and records every call
as (method_name, args) so tests can assert on how the service used it.
"""
from datetime import datetime, timezone
from typing import Any, List, Optional, Tuple

from employee_api.models.employee import Employee


class InMemoryEmployeeRepository:
    """Satisfies employee_api.repositories.base.EmployeeStore."""

    def __init__(self):
        self.records: List[Employee] = []
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self._next_id = 1

    def called(self, method: str) -> List[Tuple[Any, ...]]:
        """Argument tuples of every recorded call to `method`."""
        return [args for name, args in self.calls if name == method]

    async def find_by_id(self, employee_id: int) -> Optional[Employee]:
        self.calls.append(("find_by_id", (employee_id,)))
        return next((e for e in self.records if e.id == employee_id), None)

    async def find_by_name(self, name: str) -> Optional[Employee]:
        self.calls.append(("find_by_name", (name,)))
        return next((e for e in self.records if e.name == name), None)

    async def find_all(self) -> List[Employee]:
        self.calls.append(("find_all", ()))
        return list(self.records)

    async def exists_by_email(self, email: str) -> bool:
        self.calls.append(("exists_by_email", (email,)))
        return any(e.email == email for e in self.records)

    async def save(self, employee: Employee) -> Employee:
        self.calls.append(("save", (employee,)))
        if employee.id is None:
            employee.id = self._next_id
            self._next_id += 1
            if employee.created_at is None:
                employee.created_at = datetime.now(timezone.utc)
            self.records.append(employee)
            return employee

        for index, existing in enumerate(self.records):
            if existing.id == employee.id:
                self.records[index] = employee
                return employee
        self.records.append(employee)
        self._next_id = max(self._next_id, employee.id + 1)
        return employee

    async def save_and_flush(self, employee: Employee) -> Employee:
        # No flush step in memory; same as save() apart from the recorded name
        self.calls.append(("save_and_flush", (employee,)))
        return await self.save(employee)

    async def delete_all(self) -> None:
        self.calls.append(("delete_all", ()))
        self.records.clear()

    async def count(self) -> int:
        self.calls.append(("count", ()))
        return len(self.records)
