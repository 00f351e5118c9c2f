# Repositories package init
from employee_api.repositories.base import EmployeeStore
from employee_api.repositories.employee_repository import EmployeeRepository

__all__ = ["EmployeeStore", "EmployeeRepository"]
