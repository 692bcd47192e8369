from typing import Optional

from sqlalchemy import CheckConstraint, Column, Float
from sqlmodel import SQLModel, Field


class Company(SQLModel, table=True):
    __tablename__ = "companies"

    handle: str = Field(primary_key=True, max_length=25)
    name: str = Field(nullable=False, unique=True)
    num_employees: Optional[int] = Field(default=None)
    description: str = Field(nullable=False)
    logo_url: Optional[str] = Field(default=None)


class Job(SQLModel, table=True):
    __tablename__ = "jobs"
    __table_args__ = (
        CheckConstraint("salary >= 0", name="jobs_salary_check"),
        CheckConstraint("equity <= 1.0", name="jobs_equity_check"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(nullable=False)
    salary: Optional[int] = Field(default=None)
    # numeric in postgres; float keeps sqlite happy too
    equity: Optional[float] = Field(default=None, sa_column=Column(Float, nullable=True))
    company_handle: str = Field(foreign_key="companies.handle", nullable=False, index=True)
