import pytest

from jobvisualizer.models import FilterEntries, JobData


def test_job_data_defaults_are_empty():
    job = JobData()
    assert job.location == ""
    assert job.company_name == ""
    assert job.salary == 0
    assert job.work_from_home == ""


def test_job_data_equality_by_value():
    first = JobData(location="Denver", job_title="Engineer", salary=50000)
    second = JobData(location="Denver", job_title="Engineer", salary=50000)
    assert first == second
    assert first != JobData(location="Boston", job_title="Engineer", salary=50000)


def test_default_filters_are_inactive():
    assert FilterEntries().is_active() is False


@pytest.mark.parametrize(
    "filters",
    [
        FilterEntries(keyword="python"),
        FilterEntries(location="Denver"),
        FilterEntries(min_salary="1000"),
        FilterEntries(work_from_home=True),
    ],
)
def test_any_single_filter_is_active(filters):
    assert filters.is_active() is True


def test_clear_resets_every_filter():
    filters = FilterEntries(keyword="python", location="Denver", min_salary="10", work_from_home=True)
    filters.clear()
    assert filters == FilterEntries()
    assert filters.is_active() is False