"""API routes."""

from employee_payroll.api.routes.employees import router as employees_router
from employee_payroll.api.routes.health import router as health_router

__all__ = ["employees_router", "health_router"]
