"""Employee model."""

from __future__ import annotations

from datetime import date

from sqlalchemy import CheckConstraint, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_payroll.models.base import Base


class Employee(Base):
    """Employee record.

    ``salary`` is the individually negotiated component; the base salary for
    the employee's designation is added on top of it when payroll is computed.
    """

    __tablename__ = "employees"

    emp_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    salary: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    department: Mapped[str] = mapped_column("department_title", String, nullable=False)
    designation: Mapped[str] = mapped_column(String, nullable=False)
    employment_type: Mapped[str | None] = mapped_column(String, nullable=True)
    hire_date: Mapped[date | None] = mapped_column(nullable=True)

    __table_args__ = (
        CheckConstraint("salary >= 0", name="employees_salary_non_negative"),
    )

    def __repr__(self) -> str:
        return (
            f"Employee(emp_id={self.emp_id!r}, name={self.name!r}, "
            f"department={self.department!r}, designation={self.designation!r})"
        )
