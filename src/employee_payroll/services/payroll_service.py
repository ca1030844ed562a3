"""Payroll service - employee CRUD plus payroll aggregation rules."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import date

from dateutil.relativedelta import relativedelta

from employee_payroll.models import Employee
from employee_payroll.repositories import EmployeeStore
from employee_payroll.services.base_salary import BASE_SALARIES, BaseSalaryTable
from employee_payroll.services.results import Err, Ok, Result

logger = logging.getLogger(__name__)

JOB_TITLE_REQUIRED = "Job title must not be null or empty."


@dataclass(frozen=True)
class JobTitlePayroll:
    """Employees sharing a job title."""

    job_title: str
    employees: list[Employee] = field(default_factory=list)


class PayrollService:
    """Employee records and the payroll figures derived from them.

    Operations:
    - create / get_all / get_by_id / update / delete: record management
    - total_payroll: sum of base + individual salary over everyone
    - average_salary_by_department: mean individual salary (exact match)
    - group_by_department: department -> employee names
    - top_n_highest_paid: ranking by individual salary
    - payroll_by_job_title: employees holding a job title
    - employees_hired_in_last_n_months: recent hires
    - employees_by_department: names in a department (case-insensitive)

    Every operation re-reads the store and returns ``Ok`` or ``Err``. The
    service holds no mutable state of its own.
    """

    def __init__(
        self,
        store: EmployeeStore,
        base_salaries: BaseSalaryTable = BASE_SALARIES,
        today: Callable[[], date] = date.today,
    ):
        self.store = store
        self.base_salaries = base_salaries
        self.today = today

    # ------------------------------------------------------------------
    # Record management
    # ------------------------------------------------------------------

    async def create(self, employee: Employee) -> Result[Employee]:
        """Persist a new employee. Any client-supplied id is discarded."""
        logger.info("Creating a new employee: %s", employee.name)
        employee.emp_id = None
        created = await self.store.create(employee)
        logger.info("Employee created with ID: %s", created.emp_id)
        return Ok(created)

    async def get_all(self) -> Result[list[Employee]]:
        logger.info("Fetching all employees...")
        employees = await self.store.find_all()
        logger.info("Found %d employees.", len(employees))
        return Ok(employees)

    async def get_by_id(self, emp_id: int) -> Result[Employee]:
        logger.info("Fetching employee with ID: %s", emp_id)
        employee = await self.store.find_by_id(emp_id)
        if employee is None:
            logger.error("Employee with ID %s not found.", emp_id)
            return Err.not_found(f"Employee with ID {emp_id} not found")
        return Ok(employee)

    async def update(self, emp_id: int, new_data: Employee) -> Result[Employee]:
        """Replace the mutable fields of an existing employee.

        ``hire_date`` is left as stored.
        """
        logger.info("Updating employee with ID: %s", emp_id)
        employee = await self.store.find_by_id(emp_id)
        if employee is None:
            logger.error("Employee with ID %s not found for update.", emp_id)
            return Err.not_found(f"Employee with ID {emp_id} not found")

        employee.name = new_data.name
        employee.salary = new_data.salary
        employee.department = new_data.department
        employee.designation = new_data.designation
        employee.employment_type = new_data.employment_type

        saved = await self.store.save(employee)
        logger.info("Employee updated with ID: %s", emp_id)
        return Ok(saved)

    async def delete(self, emp_id: int) -> Result[None]:
        logger.info("Deleting employee with ID: %s", emp_id)
        if await self.store.find_by_id(emp_id) is None:
            logger.error("Employee with ID %s not found for deletion.", emp_id)
            return Err.not_found(f"Employee with ID {emp_id} not found")

        await self.store.delete_by_id(emp_id)
        logger.info("Employee with ID %s successfully deleted.", emp_id)
        return Ok(None)

    # ------------------------------------------------------------------
    # Aggregations
    # ------------------------------------------------------------------

    async def total_payroll(self) -> Result[float]:
        """Sum base salary plus individual salary across all employees.

        One employee with an unknown designation fails the whole call.
        """
        logger.info("Calculating total payroll...")
        total = 0.0
        for employee in await self.store.find_all():
            role = employee.designation
            base_salary = self.base_salaries.lookup(role)
            if base_salary is None:
                logger.error("Base salary not found for role: %s", role)
                return Err.not_found(f"Salary base not found for role: {role}")
            total += base_salary + employee.salary

        logger.info("Total payroll calculated: %s", total)
        return Ok(total)

    async def average_salary_by_department(self, department: str) -> Result[float]:
        # Exact match here, unlike employees_by_department.
        logger.info("Calculating average salary for department: %s", department)
        salaries = [
            employee.salary
            for employee in await self.store.find_all()
            if employee.department == department
        ]
        if not salaries:
            logger.error("No employees found in department: %s", department)
            return Err.not_found("No Employee Present in this Department")

        average = sum(salaries) / len(salaries)
        logger.info("Average salary for department %s: %s", department, average)
        return Ok(average)

    async def group_by_department(self) -> Result[dict[str, list[str]]]:
        logger.info("Grouping employees by department...")
        grouped: dict[str, list[str]] = {}
        for employee in await self.store.find_all():
            grouped.setdefault(employee.department, []).append(employee.name)

        if not grouped:
            logger.error("No employees found to group by department.")
            return Err.not_found("No Employees found in any Department")

        logger.info("Employees grouped into %d departments.", len(grouped))
        return Ok(grouped)

    async def top_n_highest_paid(self, n: int) -> Result[list[Employee]]:
        """Return up to ``n`` employees by descending salary.

        Ties keep store order. ``n <= 0`` yields an empty list.
        """
        logger.info("Fetching top %d highest-paid employees...", n)
        if n <= 0:
            return Ok([])

        ranked = sorted(
            await self.store.find_all(),
            key=lambda employee: employee.salary,
            reverse=True,
        )
        top = ranked[:n]
        logger.info("Top %d highest-paid employees fetched (%d returned).", n, len(top))
        return Ok(top)

    async def payroll_by_job_title(self, job_title: str | None) -> Result[JobTitlePayroll]:
        """Collect the employees holding ``job_title``.

        The combined payroll for the title is computed and logged but is not
        part of the returned value.
        """
        logger.info("Calculating payroll by job title: %s", job_title)
        if job_title is None or not job_title.strip():
            logger.error("Job title is empty or null.")
            return Err.invalid_argument(JOB_TITLE_REQUIRED)

        employees = [
            employee
            for employee in await self.store.find_all()
            if employee.designation == job_title
        ]
        if not employees:
            logger.error("No employees found with the designation: %s", job_title)
            return Err.not_found(f"No employee found with the designation: {job_title}")

        base_salary = self.base_salaries.lookup(job_title)
        if base_salary is None:
            logger.error("No base salary defined for job title: %s", job_title)
            return Err.not_found(f"No base salary defined for job title: {job_title}")

        total = sum(base_salary + employee.salary for employee in employees)
        logger.info(
            "Payroll calculation for job title %s completed. Total Payroll: %s",
            job_title,
            total,
        )
        return Ok(JobTitlePayroll(job_title=job_title, employees=employees))

    async def employees_hired_in_last_n_months(self, months: int) -> Result[list[Employee]]:
        logger.info("Fetching employees hired in the last %d months.", months)
        cutoff = self.today() - relativedelta(months=months)

        employees = [
            employee
            for employee in await self.store.find_all()
            if employee.hire_date is not None and employee.hire_date > cutoff
        ]
        logger.info("Found %d employees hired in the last %d months.", len(employees), months)
        return Ok(employees)

    async def employees_by_department(self, department: str) -> Result[list[str]]:
        logger.info("Fetching employees from the department %s.", department)
        wanted = department.casefold()
        names = [
            employee.name
            for employee in await self.store.find_all()
            if employee.department.casefold() == wanted
        ]
        if not names:
            logger.error("No employees found in the department: %s", department)
            return Err.not_found(f"No employee found in the Department: {department}")

        logger.info("Found %d employees from the %s department", len(names), department)
        return Ok(names)
