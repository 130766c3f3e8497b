import os

# Settings() requires DATABASE_URL at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobboard.database import Base
from jobboard.models import JobRecord, ResumeRecord  # noqa: F401
from jobboard.repos.job_repo import JobStore
from jobboard.repos.resume_repo import ResumeStore
from jobboard.schemas.job import NewJob
from jobboard.schemas.resume import ResumeInfo


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def job_store(session_factory) -> JobStore:
    return JobStore(session_factory)


@pytest.fixture
def resume_store(session_factory) -> ResumeStore:
    return ResumeStore(session_factory)


@pytest.fixture
def new_job() -> NewJob:
    return NewJob(
        job_name="Engineer",
        company_id=1,
        location="Remote",
        quantity=2,
        salary=90000,
        job_level="Senior",
        description="Build things",
    )


@pytest.fixture
def resume_info() -> ResumeInfo:
    return ResumeInfo(user_id=7, email="dev@example.com", url="https://cdn.example.com/r/7.pdf")
