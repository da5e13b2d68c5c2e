# jobvisualizer

Reads a spreadsheet of job listings, stores them in a SQLite database and lets
you look through them, either in a desktop window with filters or as a plain
table on the terminal.

## Installing

```
pip install .
```

Only the standard library is needed. The desktop window uses Tk (`tkinter`).

## Input

The program reads `JobData.xlsx` from the current directory, from the sheet
named `Jobs` (the sheet name is matched without regard to case). The first
row is a header and is skipped. Each later row supplies these columns,
counted from zero:

| Column | Meaning                                        |
|--------|------------------------------------------------|
| 0      | company name                                   |
| 1      | date posted                                    |
| 3      | country                                        |
| 4      | location                                       |
| 6      | maximum salary                                 |
| 7      | minimum salary                                 |
| 8      | `hourly` for hourly pay, anything else yearly  |
| 9      | job title                                      |

The salary of a job is the midpoint of the minimum and maximum, with the
fraction dropped. Hourly rates are turned into a yearly figure by multiplying
by 40 hours and 50 weeks. A row with fewer than ten columns, or a salary cell
that is not a finite number, is an error.

The description, work-from-home, qualifications and links fields of a job are
not read from the spreadsheet and stay empty.

## Running

```
job-visualizer
```

Each run deletes any existing `job_data.sqlite` in the current directory and
writes a new one. The database has a `job_data` table with one row per
listing, plus `qualifications` and `links` tables keyed by the same id.

If the workbook cannot be read, a row is malformed or the database cannot be
written, the command prints the error to standard error and exits with
status 1.

After that the desktop window opens. The left side has:

* a button that clears all filters and shows every job,
* entries for a keyword, a location and a minimum salary, each with a button
  that applies it,
* a "Remote Work" check box that limits the list to jobs marked `Yes` for
  work from home,
* a button that applies the filters to the list,
* the list of matching jobs, shown by company name.

The keyword matches the job title, company name, description or
qualifications, ignoring case. The location matches any part of the location,
ignoring case. The minimum salary keeps only jobs paying strictly more than
the whole number entered; anything else is logged as a warning and treated
as 0. Pick a company in the list and press the details button on the right
to see the full listing.

To skip the window and print a table instead:

```
job-visualizer --headless
```

(`-headless` is accepted too.) The table lists row number, location, job
title and company name, and repeats its header every 100 rows.

## What it does not do

The window has a "Click to open/refresh map" button, but no map is drawn:
the button does nothing. Because the spreadsheet supplies no work-from-home
column, the "Remote Work" filter matches no jobs loaded from a workbook.

## Using it from Python

```python
from jobvisualizer.excel import read_rows
from jobvisualizer.jobdata import process_rows
from jobvisualizer.headless import format_table

rows = read_rows("JobData.xlsx", "Jobs")
jobs = process_rows(rows)
print(format_table(jobs))
```

* `jobvisualizer.models` has the `JobData` and `FilterEntries` dataclasses.
* `jobvisualizer.jobdata` has `process_rows`, `calc_salary`, `filter_jobs`,
  `matches_filters`, `filter_keyword`, `filter_location`,
  `filter_min_salary` and `filter_work_from_home`; bad rows raise `RowError`.
* `jobvisualizer.excel` has `read_rows`; unreadable workbooks raise
  `WorkbookError`.
* `jobvisualizer.database` has `create_database`, `setup_database` and
  `write_to_database`.
* `jobvisualizer.headless` has `format_table` and `print_table`.
* `jobvisualizer.gui` has `JobBrowser`, the window's state without any
  widgets (`refresh`, `reset`, `select`, `list_labels`), plus
  `format_job_details`, `JobVisualizerWindow` and `create_gui`.

## Tests

```
pip install ".[test]"
pytest
```