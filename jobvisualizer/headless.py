"""Plain-text output of the job list for runs without a window."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from .models import JobData

_HEADER_EVERY = 100
_RULE = "-" * 120


def _line(number: str, location: str, title: str, company: str) -> str:
    return f"{number:<4} | {location:<25} | {title:<55} | {company:<25}"


def format_table(jobs: Iterable[JobData]) -> str:
    """Lay out the jobs as a table, repeating the header every hundred rows."""
    lines = []
    for index, job in enumerate(jobs):
        if index % _HEADER_EVERY == 0:
            lines.append(_line("#", "Location", "Job Title", "Company Name"))
            lines.append(_RULE)
        lines.append(_line(str(index + 1), job.location, job.job_title, job.company_name))
    return "".join(f"{line}\n" for line in lines)


def print_table(jobs: Iterable[JobData], file: TextIO | None = None) -> None:
    """Write the job table to file, standard output by default."""
    (file or sys.stdout).write(format_table(jobs))