"""Employee store contract and its SQLAlchemy implementation.

The payroll service only talks to storage through ``EmployeeStore``. Each
write is committed on its own; there is no cross-call transaction.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from employee_payroll.models import Employee


@runtime_checkable
class EmployeeStore(Protocol):
    """Minimal list/lookup/write contract over employee records."""

    async def create(self, employee: Employee) -> Employee:
        """Persist a new employee and return it with its assigned id."""
        ...

    async def find_all(self) -> list[Employee]:
        """Return every employee in store order."""
        ...

    async def find_by_id(self, emp_id: int) -> Employee | None:
        """Return the employee with ``emp_id`` or None."""
        ...

    async def save(self, employee: Employee) -> Employee:
        """Upsert an employee on its identifier."""
        ...

    async def delete_by_id(self, emp_id: int) -> None:
        """Delete an employee. Does nothing if the id is absent."""
        ...


class EmployeeRepository:
    """``EmployeeStore`` backed by the ``employees`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, employee: Employee) -> Employee:
        self.session.add(employee)
        await self.session.commit()
        await self.session.refresh(employee)
        return employee

    async def find_all(self) -> list[Employee]:
        result = await self.session.execute(select(Employee).order_by(Employee.emp_id))
        return list(result.scalars().all())

    async def find_by_id(self, emp_id: int) -> Employee | None:
        return await self.session.get(Employee, emp_id)

    async def save(self, employee: Employee) -> Employee:
        merged = await self.session.merge(employee)
        await self.session.commit()
        await self.session.refresh(merged)
        return merged

    async def delete_by_id(self, emp_id: int) -> None:
        await self.session.execute(delete(Employee).where(Employee.emp_id == emp_id))
        await self.session.commit()
