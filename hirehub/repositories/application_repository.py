from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import joinedload

from hirehub.db.tables import Application, Employer, Job, JobSeeker
from hirehub.repositories.base import BaseRepository


class ApplicationRepository(BaseRepository[Application]):
    model = Application

    def _select(self):
        return select(Application).order_by(Application.applied_at.desc(), Application.application_id.desc())

    def get_all(self) -> List[Application]:
        return list(self.db.scalars(self._select()))

    def get_by_id_with_details(self, application_id: int) -> Optional[Application]:
        """Eager-load job -> employer -> user and job seeker -> user for notifications."""
        return self.db.scalar(
            select(Application)
            .options(
                joinedload(Application.job).joinedload(Job.employer).joinedload(Employer.user),
                joinedload(Application.job_seeker).joinedload(JobSeeker.user),
                joinedload(Application.resume),
            )
            .where(Application.application_id == application_id)
        )

    def get_by_job(self, job_id: int) -> List[Application]:
        return list(self.db.scalars(self._select().where(Application.job_id == job_id)))

    def get_by_job_seeker(self, job_seeker_id: str) -> List[Application]:
        return list(self.db.scalars(self._select().where(Application.job_seeker_id == job_seeker_id)))

    def get_shortlisted_by_job(self, job_id: int) -> List[Application]:
        return list(self.db.scalars(
            self._select().where(
                Application.job_id == job_id,
                (Application.is_shortlisted.is_(True)) | (func.lower(Application.status) == "shortlisted"),
            )
        ))

    def get_with_interview_by_job(self, job_id: int) -> List[Application]:
        return list(self.db.scalars(
            self._select().where(Application.job_id == job_id, Application.interview_date.is_not(None))
        ))

    def exists_for(self, job_id: int, job_seeker_id: str) -> bool:
        return self.db.scalar(
            select(Application.application_id).where(
                Application.job_id == job_id, Application.job_seeker_id == job_seeker_id
            ).limit(1)
        ) is not None

    def count_by_resume(self, resume_id: int) -> int:
        return self.db.scalar(
            select(func.count()).select_from(Application).where(Application.resume_id == resume_id)
        ) or 0
