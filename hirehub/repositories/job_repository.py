from typing import List

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from hirehub.db.tables import Employer, Job
from hirehub.repositories.base import BaseRepository, contains


class JobRepository(BaseRepository[Job]):
    model = Job

    def _select(self):
        return select(Job).options(joinedload(Job.employer)).order_by(Job.created_at.desc(), Job.job_id.desc())

    def get_all(self) -> List[Job]:
        return list(self.db.scalars(self._select()))

    def get_by_employer(self, employer_id: str) -> List[Job]:
        return list(self.db.scalars(self._select().where(Job.employer_id == employer_id)))

    def search_by_title(self, query: str) -> List[Job]:
        return list(self.db.scalars(self._select().where(contains(Job.title, query))))

    def search_by_location(self, location: str) -> List[Job]:
        return list(self.db.scalars(self._select().where(contains(Job.location, location))))

    def search_by_skill(self, skill: str) -> List[Job]:
        return list(self.db.scalars(self._select().where(contains(Job.skills_required, skill))))

    def search_by_company(self, company: str) -> List[Job]:
        return list(self.db.scalars(
            self._select().join(Job.employer).where(contains(Employer.company_name, company))
        ))

    def get_all_skills_required(self) -> List[str]:
        """Raw comma separated skills_required values of every job."""
        return [row for row in self.db.scalars(select(Job.skills_required).where(Job.skills_required.is_not(None)))]
