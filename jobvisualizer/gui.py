"""The desktop window for browsing and filtering jobs."""

from __future__ import annotations

from collections.abc import Iterable
from functools import partial

from .jobdata import filter_jobs
from .models import FilterEntries, JobData

_KEYWORD_PLACEHOLDER = "Enter keyword filter here"
_LOCATION_PLACEHOLDER = "Enter location filter here"
_MIN_SALARY_PLACEHOLDER = "Enter minimum salary filter here"


def format_job_details(job: JobData) -> str:
    """Describe one job for the details pane."""
    return (
        f"Company Name:\n\t{job.company_name}\n\n"
        f"Job Title:\n\t{job.job_title}\n\n"
        f"Location:\n\t{job.location}\n\n"
        f"Date Posted:\n\t{job.date_posted}\n\n"
        f"Salary:\n\t{job.salary}\n\n"
        f"Work From Home:\n\t{job.work_from_home}\n\n"
        f"Qualifications:\n\t{job.qualifications}\n\n"
        f"Links:\n\t{job.links}\n\n"
    )


class JobBrowser:
    """State behind the window: all jobs, the filters, the shown list and the selection."""

    def __init__(self, jobs: Iterable[JobData], filters: FilterEntries | None = None) -> None:
        self.jobs = list(jobs)
        self.filters = filters if filters is not None else FilterEntries()
        self.shown: list[JobData] = []
        self.selected_details = ""

    def refresh(self) -> None:
        """Show the jobs that pass the current filters."""
        self.shown = filter_jobs(self.jobs, self.filters)

    def reset(self) -> None:
        """Drop every filter and show all jobs."""
        self.filters.clear()
        self.refresh()

    def select(self, index: int) -> str:
        """Select a shown job and return its details."""
        if not 0 <= index < len(self.shown):
            raise IndexError(f"no job at position {index}")
        self.selected_details = format_job_details(self.shown[index])
        return self.selected_details

    def list_labels(self) -> list[str]:
        """Company names of the shown jobs, in list order."""
        return [job.company_name for job in self.shown]


class _PlaceholderEntry:
    """A text entry that shows grey hint text while it is empty."""

    def __init__(self, tk, master, placeholder: str) -> None:
        self._placeholder = placeholder
        self._showing = False
        self.entry = tk.Entry(master)
        self._normal_colour = self.entry.cget("foreground")
        self.entry.bind("<FocusIn>", self._hide)
        self.entry.bind("<FocusOut>", self._show_if_empty)
        self._show()

    def _show(self) -> None:
        self.entry.delete(0, "end")
        self.entry.insert(0, self._placeholder)
        self.entry.configure(foreground="grey")
        self._showing = True

    def _hide(self, _event=None) -> None:
        if self._showing:
            self.entry.delete(0, "end")
            self.entry.configure(foreground=self._normal_colour)
            self._showing = False

    def _show_if_empty(self, _event=None) -> None:
        if not self.entry.get():
            self._show()

    @property
    def text(self) -> str:
        return "" if self._showing else self.entry.get()

    def clear(self) -> None:
        self._show()


class JobVisualizerWindow:
    """The main window: filters and a job list on the left, details on the right."""

    def __init__(self, jobs: Iterable[JobData]) -> None:
        self.browser = JobBrowser(jobs)
        self._entries: list[_PlaceholderEntry] = []
        self._listbox = None
        self._details = None

    def run(self) -> None:
        """Build the window and run until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title("Job Visualizer")
        root.geometry("1000x600")

        content = tk.PanedWindow(root, orient=tk.HORIZONTAL)
        content.pack(fill=tk.BOTH, expand=True)
        content.add(self._build_left(tk, content))
        content.add(self._build_right(tk, content))

        root.mainloop()

    def _build_left(self, tk, master):
        split = tk.PanedWindow(master, orient=tk.VERTICAL)

        top = tk.Frame(split)
        tk.Button(
            top,
            text="Click get the unfiltered jobs or refresh list of jobs/filters to original",
            command=self._on_reset,
        ).pack(fill=tk.X)
        tk.Button(top, text="Click to open/refresh map").pack(fill=tk.X)

        for attribute, placeholder, label in (
            ("keyword", _KEYWORD_PLACEHOLDER, "Click to apply keyword"),
            ("location", _LOCATION_PLACEHOLDER, "Click to apply location"),
            ("min_salary", _MIN_SALARY_PLACEHOLDER, "Click to apply minimum salary"),
        ):
            row = tk.Frame(top)
            row.pack(fill=tk.X)
            row.columnconfigure(0, weight=1, uniform="filter")
            row.columnconfigure(1, weight=1, uniform="filter")
            entry = _PlaceholderEntry(tk, row, placeholder)
            entry.entry.grid(row=0, column=0, sticky="ew")
            tk.Button(row, text=label, command=partial(self._apply, attribute, entry)).grid(
                row=0, column=1, sticky="ew"
            )
            self._entries.append(entry)

        remote = tk.BooleanVar(value=False)
        tk.Checkbutton(
            top,
            text="Remote Work: check for yes, uncheck for all",
            variable=remote,
            command=lambda: setattr(self.browser.filters, "work_from_home", remote.get()),
        ).pack(anchor=tk.W)
        tk.Button(top, text="Click to filter the jobs", command=self._on_filter).pack(fill=tk.X)
        split.add(top)

        bottom = tk.Frame(split)
        scrollbar = tk.Scrollbar(bottom, orient=tk.VERTICAL)
        self._listbox = tk.Listbox(bottom, yscrollcommand=scrollbar.set, exportselection=False)
        scrollbar.configure(command=self._listbox.yview)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        self._listbox.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self._listbox.bind("<<ListboxSelect>>", self._on_select)
        split.add(bottom)
        return split

    def _build_right(self, tk, master):
        pane = tk.Frame(master)
        tk.Button(
            pane, text="Click to display selected job details", command=self._show_details
        ).pack(fill=tk.X)
        self._details = tk.Label(
            pane,
            text="Select a job to display details",
            anchor="nw",
            justify=tk.LEFT,
            wraplength=450,
        )
        self._details.pack(fill=tk.BOTH, expand=True)
        return pane

    def _apply(self, attribute: str, entry: _PlaceholderEntry) -> None:
        setattr(self.browser.filters, attribute, entry.text)

    def _on_reset(self) -> None:
        self.browser.reset()
        for entry in self._entries:
            entry.clear()
        self._reload_list()

    def _on_filter(self) -> None:
        self.browser.refresh()
        self._reload_list()

    def _reload_list(self) -> None:
        self._listbox.delete(0, "end")
        for label in self.browser.list_labels():
            self._listbox.insert("end", label)

    def _on_select(self, _event=None) -> None:
        selection = self._listbox.curselection()
        if selection:
            self.browser.select(selection[0])

    def _show_details(self) -> None:
        self._details.configure(text=self.browser.selected_details)


def create_gui(jobs: Iterable[JobData]) -> None:
    """Open the job window and run until it is closed."""
    JobVisualizerWindow(jobs).run()