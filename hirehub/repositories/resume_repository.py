from typing import List, Optional

from sqlalchemy import func, select, update

from hirehub.db.tables import Resume
from hirehub.repositories.base import BaseRepository


class ResumeRepository(BaseRepository[Resume]):
    model = Resume

    def get_by_job_seeker(self, job_seeker_id: str) -> List[Resume]:
        return list(self.db.scalars(
            select(Resume).where(Resume.job_seeker_id == job_seeker_id)
            .order_by(Resume.is_default.desc(), Resume.updated_at.desc())
        ))

    def get_default(self, job_seeker_id: str) -> Optional[Resume]:
        return self.db.scalar(
            select(Resume).where(Resume.job_seeker_id == job_seeker_id, Resume.is_default.is_(True))
        )

    def name_exists(self, job_seeker_id: str, resume_name: str, exclude_id: Optional[int] = None) -> bool:
        query = select(Resume.resume_id).where(
            Resume.job_seeker_id == job_seeker_id,
            func.lower(Resume.resume_name) == resume_name.strip().lower(),
        )
        if exclude_id is not None:
            query = query.where(Resume.resume_id != exclude_id)
        return self.db.scalar(query.limit(1)) is not None

    def clear_default(self, job_seeker_id: str, keep_id: Optional[int] = None) -> None:
        """Unset is_default on every resume of the seeker except keep_id."""
        statement = update(Resume).where(Resume.job_seeker_id == job_seeker_id, Resume.is_default.is_(True))
        if keep_id is not None:
            statement = statement.where(Resume.resume_id != keep_id)
        self.db.execute(statement.values(is_default=False).execution_options(synchronize_session="fetch"))
