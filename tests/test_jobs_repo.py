"""
Tests for jobs_repo.py - statements built from fragments against SQLite.
"""

import pytest

from jobly.jobs_repo import find_jobs, get_job_by_id, update_job
from jobly.sql import EmptyInputError, FilterCriteria


class TestFindJobs:
    """Test filtered search."""

    def test_no_filter_returns_all_ordered_by_title(self, session):
        jobs = find_jobs(session, FilterCriteria())
        assert [job.title for job in jobs] == ["Accountant", "Engineer", "Senior ENGINEER"]

    def test_title_is_case_insensitive_substring(self, session):
        jobs = find_jobs(session, FilterCriteria(title="eng"))
        assert [job.title for job in jobs] == ["Engineer", "Senior ENGINEER"]

    def test_min_salary_is_inclusive(self, session):
        jobs = find_jobs(session, FilterCriteria(min_salary=100000))
        assert [job.salary for job in jobs] == [100000, 150000]

    def test_has_equity_excludes_zero_and_null(self, session):
        jobs = find_jobs(session, FilterCriteria(has_equity=True))
        assert [job.title for job in jobs] == ["Engineer"]

    def test_all_filters(self, session):
        jobs = find_jobs(session, FilterCriteria(title="ENG", min_salary=120000, has_equity=True))
        assert jobs == []

    def test_rows_map_to_jobs(self, session, seeded_jobs):
        (job,) = find_jobs(session, FilterCriteria(title="accountant"))
        assert job.id == seeded_jobs["Accountant"]
        assert job.company_handle == "c2"
        assert job.equity is None


class TestUpdateJob:
    """Test partial updates."""

    def test_updates_only_given_fields(self, session, seeded_jobs):
        job_id = seeded_jobs["Engineer"]
        job = update_job(session, job_id, {"title": "Staff Engineer", "salary": 200000})

        assert job.title == "Staff Engineer"
        assert job.salary == 200000
        assert job.equity == 0.1
        assert get_job_by_id(session, job_id).title == "Staff Engineer"

    def test_set_to_null(self, session, seeded_jobs):
        job = update_job(session, seeded_jobs["Engineer"], {"equity": None})
        assert job.equity is None

    def test_values_are_not_interpolated(self, session, seeded_jobs):
        title = "x'; DROP TABLE jobs; --"
        job = update_job(session, seeded_jobs["Engineer"], {"title": title})
        assert job.title == title
        assert len(find_jobs(session, FilterCriteria())) == 3

    def test_missing_job_returns_none(self, session):
        assert update_job(session, 999999, {"title": "Nope"}) is None

    def test_empty_data_raises_before_touching_db(self, session, seeded_jobs):
        with pytest.raises(EmptyInputError):
            update_job(session, seeded_jobs["Engineer"], {})
