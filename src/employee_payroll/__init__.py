"""Employee records and payroll statistics service."""

__version__ = "0.1.0"
