"""ORM models."""

from employee_payroll.models.base import Base
from employee_payroll.models.employee import Employee

__all__ = ["Base", "Employee"]
