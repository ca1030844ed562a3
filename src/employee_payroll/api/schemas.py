"""Pydantic schemas for API request/response models."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Employee schemas
# ============================================================================


class EmployeeBase(BaseModel):
    """Fields shared by employee requests and responses."""

    name: str
    salary: float = Field(ge=0)
    department: str
    designation: str
    employment_type: str | None = None
    hire_date: date | None = None


class EmployeeCreate(EmployeeBase):
    """Schema for creating or replacing an employee.

    An ``emp_id`` sent by the client is not part of the schema and is dropped.
    """


class EmployeeResponse(EmployeeBase):
    """Schema for employee response."""

    model_config = ConfigDict(from_attributes=True)

    emp_id: int


# ============================================================================
# Aggregation schemas
# ============================================================================


class JobTitlePayrollResponse(BaseModel):
    """Employees holding a job title."""

    model_config = ConfigDict(populate_by_name=True)

    job_title: str = Field(alias="Designation/JobTitle")
    employees: list[EmployeeResponse] = Field(alias="Employees")


# ============================================================================
# Error schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Schema for error response."""

    timestamp: datetime
    message: str
    status: int
