"""
Jobs store.

Every method issues exactly one statement on a session borrowed from the
injected factory and returns the session before handing back the result.
Failures are logged here and raised as DatabaseQueryError / NotFoundError.

Calls are synchronous. Concurrent callers each run on their own thread and
share the engine connection pool behind the factory; nothing else is shared.
"""
import logging

from sqlalchemy import insert, select, update
from sqlalchemy.orm import sessionmaker

from jobboard.core.errors import query_errors
from jobboard.models.job import JobRecord
from jobboard.schemas.ids import JobId
from jobboard.schemas.job import Job, NewJob

logger = logging.getLogger(__name__)


class JobStore:
    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create_job(self, new_job: NewJob) -> Job:
        stmt = (
            insert(JobRecord)
            .values(**new_job.model_dump(), is_delete=False)
            .returning(JobRecord)
        )
        with query_errors(logger, "create_job", diagnostics=True):
            with self._session_factory() as db:
                job = Job.model_validate(db.execute(stmt).scalar_one())
                db.commit()
        logger.info("Created job %s for company %s", job.id, job.company_id)
        return job

    def get_job_by_id(self, job_id: JobId) -> Job:
        """Fetch one job; soft-deleted jobs are returned with is_delete=True."""
        stmt = select(JobRecord).where(JobRecord.id == job_id)
        with query_errors(logger, "get_job_by_id"):
            with self._session_factory() as db:
                return Job.model_validate(db.execute(stmt).scalar_one())

    def get_list_job(
        self,
        limit: int | None,
        offset: int,
        include_deleted: bool = False,
    ) -> list[Job]:
        """
        List jobs ordered by id, skipping `offset` rows.

        limit=None returns every remaining row. Soft-deleted jobs are left out
        unless include_deleted is set.
        """
        stmt = select(JobRecord).order_by(JobRecord.id).offset(offset)
        if not include_deleted:
            stmt = stmt.where(JobRecord.is_delete.is_(False))
        if limit is not None:
            stmt = stmt.limit(limit)
        with query_errors(logger, "get_list_job"):
            with self._session_factory() as db:
                return [Job.model_validate(r) for r in db.execute(stmt).scalars().all()]

    def update_job(self, job: Job) -> Job:
        """Overwrite every column of the job identified by job.id."""
        stmt = (
            update(JobRecord)
            .where(JobRecord.id == job.id)
            .values(**job.model_dump(exclude={"id"}))
            .returning(JobRecord)
        )
        with query_errors(logger, "update_job", diagnostics=True):
            with self._session_factory() as db:
                updated = Job.model_validate(db.execute(stmt).scalar_one())
                db.commit()
        return updated

    def delete_job(self, job_id: JobId) -> bool:
        """Soft delete. True means the statement ran, not that a row matched."""
        stmt = update(JobRecord).where(JobRecord.id == job_id).values(is_delete=True)
        with query_errors(logger, "delete_job"):
            with self._session_factory() as db:
                db.execute(stmt)
                db.commit()
        return True
