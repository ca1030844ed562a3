"""HTTP surface of the employee payroll service."""
