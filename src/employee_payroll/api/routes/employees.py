"""Employee API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Path, Response, status

from employee_payroll.api.dependencies import Payroll
from employee_payroll.api.errors import unwrap
from employee_payroll.api.schemas import (
    EmployeeCreate,
    EmployeeResponse,
    ErrorResponse,
    JobTitlePayrollResponse,
)
from employee_payroll.models import Employee

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

NOT_FOUND = {404: {"model": ErrorResponse}}
BAD_REQUEST = {400: {"model": ErrorResponse}}


def _to_response(employees: list[Employee]) -> list[EmployeeResponse]:
    return [EmployeeResponse.model_validate(employee) for employee in employees]


# ============================================================================
# Aggregations
# ============================================================================
# Declared before "/{emp_id}" so single-segment paths resolve here first.


@router.get("/payroll", response_model=float, responses=NOT_FOUND)
async def total_payroll(payroll: Payroll) -> float:
    """Total of base salary plus individual salary across all employees."""
    logger.info("Received request: GET /api/employees/payroll")
    return unwrap(await payroll.total_payroll())


@router.get(
    "/payroll/job-title/{job_title}",
    response_model=JobTitlePayrollResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def payroll_by_job_title(
    payroll: Payroll,
    job_title: Annotated[str, Path()],
) -> JobTitlePayrollResponse:
    """Employees holding a job title."""
    logger.info("Received request: GET /api/employees/payroll/job-title/%s", job_title)
    result = unwrap(await payroll.payroll_by_job_title(job_title))
    return JobTitlePayrollResponse(
        job_title=result.job_title,
        employees=_to_response(result.employees),
    )


@router.get(
    "/department/{department}/average-salary",
    response_model=float,
    responses=NOT_FOUND,
)
async def average_salary_by_department(
    payroll: Payroll,
    department: Annotated[str, Path()],
) -> float:
    """Mean individual salary in a department (case-sensitive match)."""
    logger.info(
        "Received request: GET /api/employees/department/%s/average-salary", department
    )
    return unwrap(await payroll.average_salary_by_department(department))


@router.get(
    "/grouped-by-department",
    response_model=dict[str, list[str]],
    responses=NOT_FOUND,
)
async def group_by_department(payroll: Payroll) -> dict[str, list[str]]:
    """Employee names grouped by department."""
    logger.info("Received request: GET /api/employees/grouped-by-department")
    return unwrap(await payroll.group_by_department())


@router.get("/top-salaries/{n}", response_model=list[EmployeeResponse])
async def top_n_highest_paid(
    payroll: Payroll,
    n: Annotated[int, Path()],
) -> list[EmployeeResponse]:
    """Up to ``n`` employees by descending salary."""
    logger.info("Received request: GET /api/employees/top-salaries/%d", n)
    return _to_response(unwrap(await payroll.top_n_highest_paid(n)))


@router.get("/hired-in-last/{months}", response_model=list[EmployeeResponse])
async def employees_hired_in_last_n_months(
    payroll: Payroll,
    months: Annotated[int, Path()],
) -> list[EmployeeResponse]:
    """Employees hired after today minus ``months`` months."""
    logger.info("Received request: GET /api/employees/hired-in-last/%d", months)
    return _to_response(unwrap(await payroll.employees_hired_in_last_n_months(months)))


@router.get(
    "/filter-by-department/{department}",
    response_model=list[str],
    responses=NOT_FOUND,
)
async def employees_by_department(
    payroll: Payroll,
    department: Annotated[str, Path()],
) -> list[str]:
    """Employee names in a department (case-insensitive match)."""
    logger.info("Received request: GET /api/employees/filter-by-department/%s", department)
    return unwrap(await payroll.employees_by_department(department))


# ============================================================================
# Employee CRUD
# ============================================================================


@router.post(
    "",
    response_model=EmployeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_REQUEST,
)
async def create_employee(payroll: Payroll, payload: EmployeeCreate) -> EmployeeResponse:
    """Create a new employee."""
    logger.info("Received request: POST /api/employees with data: %s", payload)
    employee = unwrap(await payroll.create(Employee(**payload.model_dump())))
    return EmployeeResponse.model_validate(employee)


@router.get("", response_model=list[EmployeeResponse])
async def list_employees(payroll: Payroll) -> list[EmployeeResponse]:
    """List every employee."""
    logger.info("Received request: GET /api/employees")
    return _to_response(unwrap(await payroll.get_all()))


@router.get("/{emp_id}", response_model=EmployeeResponse, responses=NOT_FOUND)
async def get_employee(
    payroll: Payroll,
    emp_id: Annotated[int, Path()],
) -> EmployeeResponse:
    """Get a specific employee by ID."""
    logger.info("Received request: GET /api/employees/%d", emp_id)
    return EmployeeResponse.model_validate(unwrap(await payroll.get_by_id(emp_id)))


@router.put(
    "/{emp_id}",
    response_model=EmployeeResponse,
    responses={**NOT_FOUND, **BAD_REQUEST},
)
async def update_employee(
    payroll: Payroll,
    emp_id: Annotated[int, Path()],
    payload: EmployeeCreate,
) -> EmployeeResponse:
    """Replace an employee's details. The stored hire date is kept."""
    logger.info("Received request: PUT /api/employees/%d with data: %s", emp_id, payload)
    employee = unwrap(await payroll.update(emp_id, Employee(**payload.model_dump())))
    return EmployeeResponse.model_validate(employee)


@router.delete(
    "/{emp_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_employee(
    payroll: Payroll,
    emp_id: Annotated[int, Path()],
) -> Response:
    """Delete an employee."""
    logger.info("Received request: DELETE /api/employees/%d", emp_id)
    unwrap(await payroll.delete(emp_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
