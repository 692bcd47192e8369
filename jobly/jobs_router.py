'''
jobly.jobs_router
HTTP endpoints for jobs.
Request -> Service call -> Response, nothing else.
'''

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field, field_validator
from sqlmodel import Session

from jobly.auth import ensure_admin
from jobly.db import get_session
from jobly.jobs_service import (
    create_job,
    get_job_detail,
    remove_job,
    search_jobs,
    update_job_fields,
)
from jobly.sql import FilterCriteria

router = APIRouter(prefix="/jobs", tags=["jobs"])


class JobNewRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    title: str = Field(min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)
    company_handle: str = Field(alias="companyHandle", min_length=1, max_length=25)


class JobUpdateRequest(BaseModel):
    # id and companyHandle are not updatable
    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(default=None, min_length=1)
    salary: int | None = Field(default=None, ge=0)
    equity: float | None = Field(default=None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def title_not_null(cls, value):
        if value is None:
            raise ValueError("title cannot be null")
        return value


class CompanyOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    handle: str
    name: str
    description: str
    num_employees: int | None = Field(default=None, alias="numEmployees")
    logo_url: str | None = Field(default=None, alias="logoUrl")


class JobOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    title: str
    salary: int | None = None
    equity: float | None = None
    company_handle: str = Field(alias="companyHandle")


class JobDetailOut(JobOut):
    company: CompanyOut | None = None


class JobResponse(BaseModel):
    job: JobOut


class JobDetailResponse(BaseModel):
    job: JobDetailOut


class JobListResponse(BaseModel):
    jobs: list[JobOut]


class DeletedResponse(BaseModel):
    deleted: int


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
def add_job(
    payload: JobNewRequest,
    session: Session = Depends(get_session),
    _admin=Depends(ensure_admin),
):
    job = create_job(session, payload.model_dump())
    return {"job": job}


@router.get("", response_model=JobListResponse)
def read_jobs(
    title: str | None = Query(default=None, min_length=1),
    min_salary: int | None = Query(default=None, alias="minSalary", ge=0),
    has_equity: str | None = Query(default=None, alias="hasEquity"),
    session: Session = Depends(get_session),
):
    """title matches case-insensitively on substrings; only hasEquity=true filters, other values are ignored."""
    criteria = FilterCriteria(title=title, min_salary=min_salary, has_equity=has_equity == "true")
    return {"jobs": search_jobs(session, criteria)}


@router.get("/{id}", response_model=JobDetailResponse)
def read_job(id: int, session: Session = Depends(get_session)):
    return {"job": get_job_detail(session, id)}


@router.patch("/{id}", response_model=JobResponse)
def patch_job(
    id: int,
    payload: JobUpdateRequest,
    session: Session = Depends(get_session),
    _admin=Depends(ensure_admin),
):
    data = payload.model_dump(exclude_unset=True, by_alias=True)
    try:
        job = update_job_fields(session, id, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"job": job}


@router.delete("/{id}", response_model=DeletedResponse)
def delete_job(
    id: int,
    session: Session = Depends(get_session),
    _admin=Depends(ensure_admin),
):
    remove_job(session, id)
    return {"deleted": id}
