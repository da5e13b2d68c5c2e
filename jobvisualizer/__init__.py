"""Load job listings from an .xlsx workbook, store them in SQLite, filter them and browse them."""

__version__ = "0.1.0"