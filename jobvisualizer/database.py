"""Storing jobs in a SQLite database."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from .models import JobData

DEFAULT_DATABASE_PATH = "job_data.sqlite"

_SCHEMA = """
CREATE TABLE IF NOT EXISTS job_data(
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    location TEXT NOT NULL,
    job_title TEXT NOT NULL,
    company_name TEXT NOT NULL,
    description TEXT,
    date_posted TEXT NOT NULL,
    salary INT,
    work_from_home TEXT,
    qualifications TEXT,
    links TEXT,
    country TEXT
);
CREATE TABLE IF NOT EXISTS qualifications(
    id INTEGER PRIMARY KEY,
    qualifications TEXT NOT NULL,
    FOREIGN KEY (id) REFERENCES job_data(id)
);
CREATE TABLE IF NOT EXISTS links(
    id INTEGER PRIMARY KEY,
    links TEXT NOT NULL,
    FOREIGN KEY (id) REFERENCES job_data(id)
);
"""

_INSERT_JOB = """INSERT INTO job_data (location, job_title, company_name, description, date_posted,
    salary, work_from_home, qualifications, links, country) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?);"""
_INSERT_QUALIFICATIONS = "INSERT OR IGNORE INTO qualifications (id, qualifications) VALUES (?, ?);"
_INSERT_LINKS = "INSERT OR IGNORE INTO links (id, links) VALUES (?, ?);"


def create_database(path: str | PathLike[str] = DEFAULT_DATABASE_PATH) -> sqlite3.Connection:
    """Delete any existing database at path and open a fresh one."""
    Path(path).unlink(missing_ok=True)
    return sqlite3.connect(path)


def setup_database(conn: sqlite3.Connection) -> None:
    """Create the job, qualification and link tables."""
    conn.executescript(_SCHEMA)


def write_to_database(conn: sqlite3.Connection, jobs: Iterable[JobData]) -> None:
    """Insert every job, with its qualifications and links under the same id."""
    with conn:
        for job in jobs:
            cursor = conn.execute(
                _INSERT_JOB,
                (
                    job.location,
                    job.job_title,
                    job.company_name,
                    job.description,
                    job.date_posted,
                    job.salary,
                    job.work_from_home,
                    job.qualifications,
                    job.links,
                    job.country,
                ),
            )
            row_id = cursor.lastrowid
            conn.execute(_INSERT_QUALIFICATIONS, (row_id, job.qualifications))
            conn.execute(_INSERT_LINKS, (row_id, job.links))