"""
Job actions exposed to the HTTP layer.

Forwards to the job store unchanged. The store already logs failures at
ERROR, so errors pass through here without being logged a second time.
"""
import logging

from jobboard.schemas.ids import JobId
from jobboard.schemas.job import Job, NewJob

logger = logging.getLogger(__name__)


class JobService:
    def __init__(self, store):
        self.store = store

    def create(self, new_job: NewJob) -> Job:
        return self.store.create_job(new_job)

    def get_by_id(self, job_id: JobId) -> Job:
        return self.store.get_job_by_id(job_id)

    def list(self, limit: int | None, offset: int, include_deleted: bool = False) -> list[Job]:
        jobs = self.store.get_list_job(limit, offset, include_deleted=include_deleted)
        logger.debug("Listed %d jobs limit=%s offset=%d", len(jobs), limit, offset)
        return jobs

    def update(self, job: Job) -> Job:
        updated = self.store.update_job(job)
        logger.info("Updated job %s", updated.id)
        return updated

    def delete(self, job_id: JobId) -> bool:
        deleted = self.store.delete_job(job_id)
        logger.info("Soft-deleted job %s", job_id)
        return deleted
