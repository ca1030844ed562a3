"""FastAPI dependencies for dependency injection."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from employee_payroll.database import init_db
from employee_payroll.repositories import EmployeeRepository
from employee_payroll.services import PayrollService


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency."""
    _, session_factory = init_db()
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


# Type aliases for cleaner dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_payroll_service(db: DbSession) -> PayrollService:
    """Build a payroll service bound to the request's session."""
    return PayrollService(EmployeeRepository(db))


Payroll = Annotated[PayrollService, Depends(get_payroll_service)]
