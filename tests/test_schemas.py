import pytest
from pydantic import ValidationError

from jobboard.schemas.job import Job, NewJob
from jobboard.schemas.resume import Resume, ResumeInfo


def test_new_job_requires_all_fields():
    with pytest.raises(ValidationError):
        NewJob(job_name="Engineer", company_id=1, location="Remote")


def test_new_job_has_no_id_or_delete_flag():
    assert "id" not in NewJob.model_fields
    assert "is_delete" not in NewJob.model_fields


def test_job_defaults_before_persistence(new_job):
    job = Job(**new_job.model_dump())
    assert job.id is None
    assert job.is_delete is False


def test_job_reads_from_attributes():
    row = type(
        "Row",
        (),
        {
            "id": 5,
            "job_name": "Engineer",
            "company_id": 1,
            "location": "Remote",
            "quantity": 2,
            "salary": 90000,
            "job_level": "Senior",
            "description": "Build things",
            "is_delete": True,
        },
    )()
    job = Job.model_validate(row)
    assert job.id == 5
    assert job.is_delete is True


def test_resume_json_shape():
    resume = Resume(id=1, user_id=7, email="dev@example.com", url="https://x/7")
    assert resume.model_dump(mode="json") == {
        "id": 1,
        "user_id": 7,
        "email": "dev@example.com",
        "url": "https://x/7",
        "is_delete": False,
    }


def test_resume_info_rejects_non_integer_user_id():
    with pytest.raises(ValidationError):
        ResumeInfo(user_id="abc", email="dev@example.com", url="https://x/7")
