import logging

from jobboard.schemas.ids import ResumeId, UserId
from jobboard.schemas.resume import Resume, ResumeInfo

logger = logging.getLogger(__name__)


class ResumeService:
    """Resume actions; pass-through to ResumeStore like JobService."""

    def __init__(self, store):
        self.store = store

    def create(self, resume_info: ResumeInfo) -> Resume:
        return self.store.create_resume(resume_info)

    def get_by_id(self, resume_id: ResumeId) -> Resume:
        return self.store.get_resume_by_id(resume_id)

    def get_by_user_id(self, user_id: UserId, include_deleted: bool = False) -> Resume:
        return self.store.get_resume_by_user_id(user_id, include_deleted=include_deleted)

    def list(self, include_deleted: bool = False) -> list[Resume]:
        return self.store.get_list_resumes(include_deleted=include_deleted)

    def update(self, resume_id: ResumeId, resume_info: ResumeInfo) -> Resume:
        resume = self.store.update_resume(resume_id, resume_info)
        logger.info("Updated resume %s", resume_id)
        return resume

    def delete(self, resume_id: ResumeId) -> bool:
        deleted = self.store.delete_resume(resume_id)
        logger.info("Soft-deleted resume %s", resume_id)
        return deleted
