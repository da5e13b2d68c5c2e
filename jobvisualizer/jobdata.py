"""Turning spreadsheet rows into jobs, and filtering jobs."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Iterable, Sequence

from .models import FilterEntries, JobData

logger = logging.getLogger(__name__)

_HOURS_PER_WEEK = 40
_WEEKS_PER_YEAR = 50
_INTEGER = re.compile(r"[+-]?\d+")


class RowError(ValueError):
    """A spreadsheet row cannot be turned into a job."""


def process_rows(rows: Sequence[Sequence[str]]) -> list[JobData]:
    """Build jobs from spreadsheet rows; the first row is a header and is skipped."""
    if not rows:
        raise RowError("the sheet has no header row")
    jobs = []
    for number, row in enumerate(rows[1:], start=2):
        try:
            jobs.append(
                JobData(
                    company_name=row[0],
                    date_posted=row[1],
                    country=row[3],
                    location=row[4],
                    salary=calc_salary(row),
                    job_title=row[9],
                )
            )
        except IndexError as exc:
            raise RowError(f"row {number} has only {len(row)} columns") from exc
    return jobs


def _parse_float(text: str) -> float:
    if text != text.strip():
        raise RowError(f"invalid salary value {text!r}")
    try:
        value = float(text)
    except ValueError as exc:
        raise RowError(f"invalid salary value {text!r}") from exc
    return value


def calc_salary(row: Sequence[str]) -> int:
    """Yearly salary: the mean of the maximum and minimum, scaled up when hourly."""
    try:
        max_text, min_text, period = row[6], row[7], row[8]
    except IndexError as exc:
        raise RowError(f"row has only {len(row)} columns") from exc
    average = (_parse_float(max_text) + _parse_float(min_text)) / 2
    if not math.isfinite(average):
        raise RowError(f"salary is not a finite number: {max_text!r}, {min_text!r}")
    salary = int(average)
    if period == "hourly":
        salary *= _HOURS_PER_WEEK * _WEEKS_PER_YEAR
    return salary


def filter_jobs(jobs: Iterable[JobData], filters: FilterEntries) -> list[JobData]:
    """Return the jobs that pass every active filter."""
    if not filters.is_active():
        return list(jobs)
    return [job for job in jobs if matches_filters(job, filters)]


def matches_filters(job: JobData, filters: FilterEntries) -> bool:
    """True when the job passes every active filter."""
    if filters.keyword and not filter_keyword(job, filters.keyword):
        return False
    if filters.location and not filter_location(job, filters.location):
        return False
    if filters.min_salary and not filter_min_salary(job, filters.min_salary):
        return False
    if filters.work_from_home and not filter_work_from_home(job):
        return False
    return True


def filter_keyword(job: JobData, keyword: str) -> bool:
    """Case-insensitive search in title, company, description and qualifications."""
    needle = keyword.lower()
    return any(
        needle in field.lower()
        for field in (job.job_title, job.company_name, job.description, job.qualifications)
    )


def filter_location(job: JobData, location: str) -> bool:
    """Case-insensitive search in the job's location."""
    return location.lower() in job.location.lower()


def filter_min_salary(job: JobData, min_salary: str) -> bool:
    """True when the salary is above the minimum; an unreadable minimum counts as 0."""
    if _INTEGER.fullmatch(min_salary):
        minimum = int(min_salary)
    else:
        logger.warning("invalid minimum salary %r, using 0", min_salary)
        minimum = 0
    return job.salary > minimum


def filter_work_from_home(job: JobData) -> bool:
    """True when the job is marked as remote."""
    return job.work_from_home == "Yes"