from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.orm import joinedload

from hirehub.db.tables import Employer, Job
from hirehub.repositories.base import BaseRepository, contains


class EmployerRepository(BaseRepository[Employer]):
    model = Employer

    def get_all(self) -> List[Employer]:
        return list(self.db.scalars(
            select(Employer).options(joinedload(Employer.user)).order_by(Employer.company_name)
        ))

    def get_by_user_id(self, user_id: str) -> Optional[Employer]:
        return self.db.scalar(select(Employer).where(Employer.user_id == user_id))

    def search_by_company(self, company: str) -> List[Employer]:
        return list(self.db.scalars(
            select(Employer).where(contains(Employer.company_name, company)).order_by(Employer.company_name)
        ))

    def get_by_job_id(self, job_id: int) -> Optional[Employer]:
        return self.db.scalar(select(Employer).join(Job).where(Job.job_id == job_id))
