'''
jobly.jobs_repo
jobs repository layer, DB only.
Knows nothing about HTTP or status codes: fetch this, store that.
Partial updates and searches run as raw statements built by jobly.sql.
'''

import logging
from typing import Any, Mapping

from sqlmodel import Session

from jobly.dialects import dialect_for
from jobly.models import Company, Job
from jobly.sql import FilterCriteria, sql_for_job_filter, sql_for_partial_update

logger = logging.getLogger(__name__)

# logical (API) name -> column; anything not listed is used as-is
JOB_COLUMNS = {"companyHandle": "company_handle"}

JOB_SELECT = "SELECT id, title, salary, equity, company_handle FROM jobs"


def get_job_by_id(session: Session, job_id: int) -> Job | None:
    return session.get(Job, job_id)


def get_company_by_handle(session: Session, handle: str) -> Company | None:
    return session.get(Company, handle)


def save_job(session: Session, job: Job) -> Job:
    session.add(job)
    session.commit()
    session.refresh(job)
    return job


def delete_job(session: Session, job: Job) -> None:
    session.delete(job)
    session.commit()


def find_jobs(session: Session, criteria: FilterCriteria) -> list[Job]:
    dialect = dialect_for(session.get_bind())
    predicate = sql_for_job_filter(criteria, dialect=dialect)

    statement = JOB_SELECT
    if predicate.where:
        statement += f" WHERE {predicate.where}"
    statement += " ORDER BY title, id"

    logger.debug("find_jobs: %s", statement)
    rows = session.connection().exec_driver_sql(statement, predicate.values).mappings().all()
    return [Job(**row) for row in rows]


def update_job(session: Session, job_id: int, data: Mapping[str, Any]) -> Job | None:
    """Apply a partial update; None when no job has this id."""
    dialect = dialect_for(session.get_bind())
    clause = sql_for_partial_update(data, JOB_COLUMNS, dialect=dialect)
    id_placeholder = dialect.placeholder(len(clause.values) + 1)

    statement = f"UPDATE jobs SET {clause.set_cols} WHERE id = {id_placeholder}"
    logger.debug("update_job: %s", statement)
    result = session.connection().exec_driver_sql(statement, (*clause.values, job_id))
    matched = result.rowcount
    session.commit()

    if not matched:
        return None
    return session.get(Job, job_id)
