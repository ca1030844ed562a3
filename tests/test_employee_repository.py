"""Tests for the SQLAlchemy employee store."""

from datetime import date

import pytest

from employee_payroll.repositories import EmployeeRepository, EmployeeStore

pytestmark = pytest.mark.asyncio


class TestEmployeeRepository:
    """Test the store contract against SQLite."""

    async def test_satisfies_store_protocol(self, repository):
        """The repository is an EmployeeStore."""
        assert isinstance(repository, EmployeeStore)

    async def test_create_assigns_sequential_ids(self, repository, make_employee):
        """Ids are assigned by the database."""
        first = await repository.create(make_employee())
        second = await repository.create(make_employee(name="Bob"))

        assert first.emp_id is not None
        assert second.emp_id > first.emp_id

    async def test_find_all_in_id_order(self, repository, test_employees):
        """find_all returns records in insertion order."""
        employees = await repository.find_all()

        assert [e.name for e in employees] == ["Alice", "Clary"]

    async def test_find_by_id(self, repository, test_employees):
        """Known id returns the record, unknown id returns None."""
        clary = test_employees[1]

        found = await repository.find_by_id(clary.emp_id)

        assert found is not None
        assert found.department == "HR"
        assert found.hire_date == date(2024, 10, 17)
        assert await repository.find_by_id(12345) is None

    async def test_save_persists_changes(self, session_factory, repository, test_employees):
        """save writes changes visible to a new session."""
        alice = test_employees[0]
        alice.salary = 9999.0

        await repository.save(alice)

        async with session_factory() as other:
            reloaded = await EmployeeRepository(other).find_by_id(alice.emp_id)
            assert reloaded.salary == 9999.0

    async def test_delete_by_id(self, repository, test_employees):
        """delete_by_id removes the row."""
        alice = test_employees[0]

        await repository.delete_by_id(alice.emp_id)

        assert [e.name for e in await repository.find_all()] == ["Clary"]

    async def test_delete_missing_is_silent(self, repository, test_employees):
        """Deleting an absent id does nothing."""
        await repository.delete_by_id(12345)

        assert len(await repository.find_all()) == 2

    async def test_department_column_name(self, repository, test_employees):
        """department is stored in the department_title column."""
        alice = test_employees[0]

        assert alice.to_dict()["department"] == "IT"
        assert "department_title" in alice.__table__.columns
