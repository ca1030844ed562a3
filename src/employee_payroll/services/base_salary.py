"""Fixed base salary per job title."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

DEFAULT_BASE_SALARIES: Mapping[str, float] = MappingProxyType(
    {
        "Manager": 30000.00,
        "HR": 20000.00,
        "JuniorEngineer": 15000.00,
        "SeniorEngineer": 30000.00,
        "Tester": 25000.00,
        "Analyst": 25000.00,
    }
)


class BaseSalaryTable(Mapping[str, float]):
    """Read-only job title -> base salary mapping.

    Keys are matched exactly (case-sensitive). The table is copied on
    construction and never written afterwards, so a single instance can be
    shared between concurrent requests.
    """

    def __init__(self, entries: Mapping[str, float] | None = None):
        source = DEFAULT_BASE_SALARIES if entries is None else entries
        for title, amount in source.items():
            if amount < 0:
                raise ValueError(f"Base salary for {title!r} must not be negative")
        self._entries: Mapping[str, float] = MappingProxyType(dict(source))

    def lookup(self, job_title: str | None) -> float | None:
        """Return the base salary for ``job_title`` or None if undefined."""
        if job_title is None:
            return None
        return self._entries.get(job_title)

    def __getitem__(self, job_title: str) -> float:
        return self._entries[job_title]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"BaseSalaryTable({dict(self._entries)!r})"


BASE_SALARIES = BaseSalaryTable()
