from pydantic import BaseModel

from jobboard.schemas.ids import ResumeId, UserId


class ResumeInfo(BaseModel):
    """Create/update payload for a resume."""

    user_id: UserId
    email: str
    url: str


class Resume(BaseModel):
    id: ResumeId | None = None
    user_id: UserId
    email: str
    url: str
    is_delete: bool = False

    class Config:
        from_attributes = True
