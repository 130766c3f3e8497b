"""Service factories for the HTTP layer to inject per request."""
from jobboard.database import SessionLocal
from jobboard.repos.job_repo import JobStore
from jobboard.repos.resume_repo import ResumeStore
from jobboard.services.job_service import JobService
from jobboard.services.resume_service import ResumeService


def get_job_service() -> JobService:
    return JobService(JobStore(SessionLocal))


def get_resume_service() -> ResumeService:
    return ResumeService(ResumeStore(SessionLocal))
