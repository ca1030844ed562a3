"""Tests for the base salary table and result values."""

import pytest

from employee_payroll.models import Employee
from employee_payroll.services import BASE_SALARIES, BaseSalaryTable, Err, ErrorKind, Ok


class TestBaseSalaryTable:
    """Test the fixed job title -> base salary table."""

    def test_default_entries(self):
        """The default table holds the six known titles."""
        assert dict(BASE_SALARIES) == {
            "Manager": 30000.00,
            "HR": 20000.00,
            "JuniorEngineer": 15000.00,
            "SeniorEngineer": 30000.00,
            "Tester": 25000.00,
            "Analyst": 25000.00,
        }

    def test_lookup_known_and_unknown(self):
        """lookup returns None instead of raising."""
        assert BASE_SALARIES.lookup("Tester") == 25000.00
        assert BASE_SALARIES.lookup("Intern") is None
        assert BASE_SALARIES.lookup(None) is None

    def test_lookup_is_case_sensitive(self):
        """Titles must match exactly."""
        assert BASE_SALARIES.lookup("manager") is None

    def test_table_is_read_only(self):
        """The table cannot be written."""
        with pytest.raises(TypeError):
            BASE_SALARIES["Intern"] = 1.0  # type: ignore[index]

    def test_copy_is_isolated_from_source(self):
        """Mutating the source mapping does not leak into the table."""
        source = {"Intern": 500.0}
        table = BaseSalaryTable(source)
        source["Intern"] = 9999.0

        assert table.lookup("Intern") == 500.0
        assert len(table) == 1

    def test_negative_amount_rejected(self):
        """Base salaries are non-negative."""
        with pytest.raises(ValueError):
            BaseSalaryTable({"Intern": -1.0})


class TestResultTypes:
    """Test the result values themselves."""

    def test_ok_and_err_flags(self):
        """Ok reports success and Err reports failure."""
        assert Ok(1).ok is True
        assert Err.not_found("x").ok is False
        assert Err.invalid_argument("y").kind is ErrorKind.INVALID_ARGUMENT

    def test_results_are_values(self):
        """Equal contents compare equal."""
        assert Ok([1]) == Ok([1])
        assert Err.not_found("a") == Err(ErrorKind.NOT_FOUND, "a")


def test_employee_repr_names_the_record():
    """repr shows identifying fields."""
    employee = Employee(emp_id=3, name="Ann", department="IT", designation="Tester")

    assert "Ann" in repr(employee)
    assert "Tester" in repr(employee)
