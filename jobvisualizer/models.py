"""Data records shared by the loader, the filters and the user interfaces."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class JobData:
    """One job posting."""

    location: str = ""
    job_title: str = ""
    company_name: str = ""
    description: str = ""
    date_posted: str = ""
    salary: int = 0
    work_from_home: str = ""
    qualifications: str = ""
    links: str = ""
    country: str = ""


@dataclass
class FilterEntries:
    """The filters a user has applied to the job list."""

    keyword: str = ""
    location: str = ""
    min_salary: str = ""
    work_from_home: bool = False

    def is_active(self) -> bool:
        """Return True when at least one filter is set."""
        return bool(self.keyword or self.location or self.min_salary or self.work_from_home)

    def clear(self) -> None:
        """Remove every filter."""
        self.keyword = ""
        self.location = ""
        self.min_salary = ""
        self.work_from_home = False