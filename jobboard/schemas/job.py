from pydantic import BaseModel

from jobboard.schemas.ids import CompanyId, JobId


class NewJob(BaseModel):
    """Fields required to publish a job; id and is_delete are set by the store."""

    job_name: str
    company_id: CompanyId
    location: str
    quantity: int
    salary: int
    job_level: str
    description: str


class Job(BaseModel):
    id: JobId | None = None
    job_name: str
    company_id: CompanyId
    location: str
    quantity: int
    salary: int
    job_level: str
    description: str
    is_delete: bool = False

    class Config:
        from_attributes = True
