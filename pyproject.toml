[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jobvisualizer"
version = "0.1.0"
description = "Load job listings from a spreadsheet, store them in SQLite and browse or filter them in a window or on the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["jobs", "job search", "spreadsheet", "xlsx", "sqlite", "salary", "filter"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
job-visualizer = "jobvisualizer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jobvisualizer"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
