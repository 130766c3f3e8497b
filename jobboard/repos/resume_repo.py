import logging

from sqlalchemy import insert, select, update
from sqlalchemy.orm import sessionmaker

from jobboard.core.errors import query_errors
from jobboard.models.resume import ResumeRecord
from jobboard.schemas.ids import ResumeId, UserId
from jobboard.schemas.resume import Resume, ResumeInfo

logger = logging.getLogger(__name__)


class ResumeStore:
    """Resume persistence; same one-statement-per-call contract as JobStore."""

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def create_resume(self, new_resume: ResumeInfo) -> Resume:
        stmt = (
            insert(ResumeRecord)
            .values(**new_resume.model_dump(), is_delete=False)
            .returning(ResumeRecord)
        )
        with query_errors(logger, "create_resume", diagnostics=True):
            with self._session_factory() as db:
                resume = Resume.model_validate(db.execute(stmt).scalar_one())
                db.commit()
        logger.info("Created resume %s for user %s", resume.id, resume.user_id)
        return resume

    def get_resume_by_id(self, resume_id: ResumeId) -> Resume:
        stmt = select(ResumeRecord).where(ResumeRecord.id == resume_id)
        with query_errors(logger, "get_resume_by_id"):
            with self._session_factory() as db:
                return Resume.model_validate(db.execute(stmt).scalar_one())

    def get_resume_by_user_id(self, user_id: UserId, include_deleted: bool = False) -> Resume:
        """
        Fetch the single resume owned by user_id.

        Fails with DatabaseQueryError when the user has more than one
        matching resume, and NotFoundError when they have none.
        """
        stmt = select(ResumeRecord).where(ResumeRecord.user_id == user_id)
        if not include_deleted:
            stmt = stmt.where(ResumeRecord.is_delete.is_(False))
        with query_errors(logger, "get_resume_by_user_id"):
            with self._session_factory() as db:
                return Resume.model_validate(db.execute(stmt).scalar_one())

    def get_list_resumes(self, include_deleted: bool = False) -> list[Resume]:
        stmt = select(ResumeRecord).order_by(ResumeRecord.id)
        if not include_deleted:
            stmt = stmt.where(ResumeRecord.is_delete.is_(False))
        with query_errors(logger, "get_list_resumes"):
            with self._session_factory() as db:
                return [Resume.model_validate(r) for r in db.execute(stmt).scalars().all()]

    def update_resume(self, resume_id: ResumeId, resume_info: ResumeInfo) -> Resume:
        stmt = (
            update(ResumeRecord)
            .where(ResumeRecord.id == resume_id)
            .values(**resume_info.model_dump())
            .returning(ResumeRecord)
        )
        with query_errors(logger, "update_resume", diagnostics=True):
            with self._session_factory() as db:
                resume = Resume.model_validate(db.execute(stmt).scalar_one())
                db.commit()
        return resume

    def delete_resume(self, resume_id: ResumeId) -> bool:
        # True even when no row matched the id
        stmt = update(ResumeRecord).where(ResumeRecord.id == resume_id).values(is_delete=True)
        with query_errors(logger, "delete_resume"):
            with self._session_factory() as db:
                db.execute(stmt)
                db.commit()
        return True
