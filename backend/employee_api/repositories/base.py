"""Storage contract the employee service depends on.

EmployeeRepository implements it over an AsyncSession; tests implement it
with an in-memory fake. The service only ever sees this protocol.
"""
from typing import List, Optional, Protocol

from employee_api.models.employee import Employee


class EmployeeStore(Protocol):
    """Narrow data-access interface for employee records."""

    async def find_by_id(self, employee_id: int) -> Optional[Employee]: ...

    async def find_by_name(self, name: str) -> Optional[Employee]: ...

    async def find_all(self) -> List[Employee]: ...

    async def exists_by_email(self, email: str) -> bool: ...

    async def save(self, employee: Employee) -> Employee: ...

    async def save_and_flush(self, employee: Employee) -> Employee: ...

    async def delete_all(self) -> None: ...

    async def count(self) -> int: ...
