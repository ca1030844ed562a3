"""Persistence accessors."""

from employee_payroll.repositories.employee_repository import (
    EmployeeRepository,
    EmployeeStore,
)

__all__ = ["EmployeeRepository", "EmployeeStore"]
