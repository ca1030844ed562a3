"""Payroll services."""

from employee_payroll.services.base_salary import BASE_SALARIES, BaseSalaryTable
from employee_payroll.services.payroll_service import JobTitlePayroll, PayrollService
from employee_payroll.services.results import Err, ErrorKind, Ok, Result

__all__ = [
    "BASE_SALARIES",
    "BaseSalaryTable",
    "Err",
    "ErrorKind",
    "JobTitlePayroll",
    "Ok",
    "PayrollService",
    "Result",
]
