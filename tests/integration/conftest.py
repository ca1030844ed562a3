"""API test fixtures with an in-memory database."""

from collections.abc import AsyncGenerator
from datetime import date
from typing import Any

import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from employee_payroll.api.app import create_app
from employee_payroll.api.dependencies import get_db_session
from employee_payroll.models import Employee
from employee_payroll.repositories import EmployeeRepository


@pytest_asyncio.fixture
async def app(session_factory) -> AsyncGenerator[FastAPI, None]:
    """Application wired to the test database."""
    app = create_app()

    async def override_get_db_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield app
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def seeded(session_factory) -> list[dict[str, Any]]:
    """Store Alice (IT, JuniorEngineer) and Clary (HR, HR)."""
    rows = [
        Employee(
            name="Alice",
            salary=2300.45,
            department="IT",
            designation="JuniorEngineer",
            employment_type="Full-Time",
            hire_date=date(2023, 1, 1),
        ),
        Employee(
            name="Clary",
            salary=2100.45,
            department="HR",
            designation="HR",
            employment_type="Part-Time",
            hire_date=date(2024, 10, 17),
        ),
    ]
    async with session_factory() as session:
        repository = EmployeeRepository(session)
        return [(await repository.create(row)).to_dict() for row in rows]

