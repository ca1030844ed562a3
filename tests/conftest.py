"""Pytest fixtures for employee payroll tests."""

from __future__ import annotations

from datetime import date
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from employee_payroll.models import Base, Employee
from employee_payroll.repositories import EmployeeRepository

# A single shared in-memory SQLite connection per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def engine():
    """Create a fresh test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    """Session factory configured like the application's."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def repository(session: AsyncSession) -> EmployeeRepository:
    """Employee repository bound to the test session."""
    return EmployeeRepository(session)


@pytest.fixture
def make_employee() -> Callable[..., Employee]:
    """Factory for unsaved employees with sensible defaults."""

    def _make(
        name: str = "Alice",
        salary: float = 2300.45,
        department: str = "IT",
        designation: str = "JuniorEngineer",
        employment_type: str | None = "Full-Time",
        hire_date: date | None = date(2023, 1, 1),
        emp_id: int | None = None,
    ) -> Employee:
        return Employee(
            emp_id=emp_id,
            name=name,
            salary=salary,
            department=department,
            designation=designation,
            employment_type=employment_type,
            hire_date=hire_date,
        )

    return _make


@pytest_asyncio.fixture
async def test_employees(
    repository: EmployeeRepository, make_employee: Callable[..., Employee]
) -> list[Employee]:
    """Alice (IT) and Clary (HR), stored in that order."""
    alice = await repository.create(make_employee())
    clary = await repository.create(
        make_employee(
            name="Clary",
            salary=2100.45,
            department="HR",
            designation="HR",
            employment_type="Part-Time",
            hire_date=date(2024, 10, 17),
        )
    )
    return [alice, clary]
