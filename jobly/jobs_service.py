'''
jobly.jobs_service
Decides how job requests are handled (business rules):
missing jobs are errors, jobs must belong to an existing company,
an update must change at least one field.
'''

import logging
from typing import Any, Mapping

from fastapi import HTTPException
from sqlmodel import Session

from jobly.jobs_repo import (
    delete_job,
    find_jobs,
    get_company_by_handle,
    get_job_by_id,
    save_job,
    update_job,
)
from jobly.models import Job
from jobly.sql import FilterCriteria

logger = logging.getLogger(__name__)


def _job_not_found(job_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"No job: {job_id}")


def create_job(session: Session, data: Mapping[str, Any]) -> Job:
    handle = data["company_handle"]
    if get_company_by_handle(session, handle) is None:
        raise HTTPException(status_code=400, detail=f"No company: {handle}")

    job = save_job(session, Job(**data))
    logger.info("created job %s for %s", job.id, handle)
    return job


def search_jobs(session: Session, criteria: FilterCriteria) -> list[Job]:
    return find_jobs(session, criteria)


def get_job_detail(session: Session, job_id: int) -> dict:
    job = get_job_by_id(session, job_id)
    if not job:
        raise _job_not_found(job_id)

    company = get_company_by_handle(session, job.company_handle)
    return {**job.model_dump(), "company": company.model_dump() if company else None}


def update_job_fields(session: Session, job_id: int, data: Mapping[str, Any]) -> Job:
    # EmptyInputError (a ValueError) propagates to the router
    job = update_job(session, job_id, data)
    if not job:
        raise _job_not_found(job_id)
    logger.info("updated job %s: %s", job_id, ", ".join(data))
    return job


def remove_job(session: Session, job_id: int) -> None:
    job = get_job_by_id(session, job_id)
    if not job:
        raise _job_not_found(job_id)
    delete_job(session, job)
    logger.info("deleted job %s", job_id)
