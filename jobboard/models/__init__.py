from jobboard.models.job import JobRecord
from jobboard.models.resume import ResumeRecord

__all__ = [
    "JobRecord",
    "ResumeRecord",
]
