from typing import List, Optional

from sqlalchemy import select

from hirehub.db.tables import Application, JobSeeker, Resume
from hirehub.repositories.base import BaseRepository, contains


class JobSeekerRepository(BaseRepository[JobSeeker]):
    model = JobSeeker

    def get_by_user_id(self, user_id: str) -> Optional[JobSeeker]:
        return self.db.scalar(select(JobSeeker).where(JobSeeker.user_id == user_id))

    def search_by_college(self, college: str) -> List[JobSeeker]:
        return list(self.db.scalars(select(JobSeeker).where(contains(JobSeeker.college, college))))

    def search_by_skill(self, skill: str) -> List[JobSeeker]:
        return list(self.db.scalars(select(JobSeeker).where(contains(JobSeeker.skills, skill))))

    def has_dependents(self, job_seeker_id: str) -> bool:
        """True while resumes or applications still reference the seeker."""
        resume = self.db.scalar(select(Resume.resume_id).where(Resume.job_seeker_id == job_seeker_id).limit(1))
        if resume is not None:
            return True
        application = self.db.scalar(
            select(Application.application_id).where(Application.job_seeker_id == job_seeker_id).limit(1)
        )
        return application is not None
