"""
Job Seeker Service - candidate profiles linked one-to-one with JobSeeker users.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from hirehub.core.exceptions import ConflictError, NotFoundError
from hirehub.db.tables import JobSeeker
from hirehub.repositories import JobSeekerRepository, UserRepository
from hirehub.schemas.schemas import JobSeekerCreate, JobSeekerUpdate

logger = logging.getLogger(__name__)


class JobSeekerService:
    def __init__(self, db: Session):
        self.job_seekers = JobSeekerRepository(db)
        self.users = UserRepository(db)

    def get_all(self) -> List[JobSeeker]:
        return self.job_seekers.get_all()

    def get_by_id(self, job_seeker_id: str) -> JobSeeker:
        job_seeker = self.job_seekers.get_by_id(job_seeker_id)
        if job_seeker is None:
            raise NotFoundError.for_entity("JobSeeker", job_seeker_id)
        return job_seeker

    def get_by_user_id(self, user_id: str) -> JobSeeker:
        job_seeker = self.job_seekers.get_by_user_id(user_id)
        if job_seeker is None:
            raise NotFoundError(f"JobSeeker for user '{user_id}' not found.")
        return job_seeker

    def search_by_college(self, college: str) -> List[JobSeeker]:
        return self.job_seekers.search_by_college(college)

    def search_by_skill(self, skill: str) -> List[JobSeeker]:
        return self.job_seekers.search_by_skill(skill)

    def create(self, dto: JobSeekerCreate) -> JobSeeker:
        if self.users.get_by_id(dto.user_id) is None:
            raise NotFoundError.for_entity("User", dto.user_id)
        if self.job_seekers.get_by_user_id(dto.user_id) is not None:
            raise ConflictError(f"A job seeker profile already exists for user '{dto.user_id}'.")

        job_seeker = self.job_seekers.add(JobSeeker(**dto.model_dump()))
        self.job_seekers.commit()
        logger.info("Created job seeker %s for user %s", job_seeker.job_seeker_id, job_seeker.user_id)
        return job_seeker

    def update(self, job_seeker_id: str, dto: JobSeekerUpdate) -> JobSeeker:
        job_seeker = self.get_by_id(job_seeker_id)
        for field, value in dto.model_dump(exclude_unset=True).items():
            setattr(job_seeker, field, value)
        self.job_seekers.update(job_seeker)
        self.job_seekers.commit()
        return job_seeker

    def delete(self, job_seeker_id: str) -> None:
        job_seeker = self.get_by_id(job_seeker_id)
        if self.job_seekers.has_dependents(job_seeker_id):
            raise ConflictError(
                f"JobSeeker '{job_seeker_id}' still has resumes or applications and cannot be deleted."
            )
        self.job_seekers.delete(job_seeker)
        self.job_seekers.commit()
        logger.info("Deleted job seeker %s", job_seeker_id)
