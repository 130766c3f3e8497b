from sqlalchemy import Boolean, Column, Integer, String, Text, false

from jobboard.database import Base


class JobRecord(Base):
    """A job posting published by a company."""

    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True)
    job_name = Column(String, nullable=False)
    # companies table is owned by another service; no FK constraint here
    company_id = Column(Integer, nullable=False, index=True)
    location = Column(String, nullable=False)
    quantity = Column(Integer, nullable=False)
    salary = Column(Integer, nullable=False)
    job_level = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    is_delete = Column(Boolean, nullable=False, default=False, server_default=false())
