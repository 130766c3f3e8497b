from sqlalchemy import Boolean, Column, Integer, String, false

from jobboard.database import Base


class ResumeRecord(Base):
    __tablename__ = "resumes"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)  # users table lives elsewhere
    email = Column(String, nullable=False)
    url = Column(String, nullable=False)
    is_delete = Column(Boolean, nullable=False, default=False, server_default=false())
