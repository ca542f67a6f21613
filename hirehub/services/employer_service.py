"""
Employer Service - company profiles linked one-to-one with Employer users.
"""

import logging
from typing import List

from sqlalchemy.orm import Session

from hirehub.core.exceptions import ConflictError, NotFoundError
from hirehub.db.tables import Employer
from hirehub.repositories import EmployerRepository, UserRepository
from hirehub.schemas.schemas import EmployerCreate, EmployerUpdate

logger = logging.getLogger(__name__)


class EmployerService:
    def __init__(self, db: Session):
        self.employers = EmployerRepository(db)
        self.users = UserRepository(db)

    def get_all(self) -> List[Employer]:
        return self.employers.get_all()

    def get_by_id(self, employer_id: str) -> Employer:
        employer = self.employers.get_by_id(employer_id)
        if employer is None:
            raise NotFoundError.for_entity("Employer", employer_id)
        return employer

    def get_by_user_id(self, user_id: str) -> Employer:
        employer = self.employers.get_by_user_id(user_id)
        if employer is None:
            raise NotFoundError(f"Employer for user '{user_id}' not found.")
        return employer

    def search_by_company(self, company: str) -> List[Employer]:
        return self.employers.search_by_company(company)

    def get_by_job_id(self, job_id: int) -> Employer:
        employer = self.employers.get_by_job_id(job_id)
        if employer is None:
            raise NotFoundError(f"Employer for job '{job_id}' not found.")
        return employer

    def create(self, dto: EmployerCreate) -> Employer:
        if self.users.get_by_id(dto.user_id) is None:
            raise NotFoundError.for_entity("User", dto.user_id)
        if self.employers.get_by_user_id(dto.user_id) is not None:
            raise ConflictError(f"An employer profile already exists for user '{dto.user_id}'.")

        employer = self.employers.add(Employer(**dto.model_dump()))
        self.employers.commit()
        logger.info("Created employer %s for user %s", employer.employer_id, employer.user_id)
        return employer

    def update(self, employer_id: str, dto: EmployerUpdate) -> Employer:
        employer = self.get_by_id(employer_id)
        for field, value in dto.model_dump(exclude_unset=True).items():
            if field == "company_name" and value is None:
                continue
            setattr(employer, field, value)
        self.employers.update(employer)
        self.employers.commit()
        return employer

    def delete(self, employer_id: str) -> None:
        employer = self.get_by_id(employer_id)
        self.employers.delete(employer)
        self.employers.commit()
        logger.info("Deleted employer %s", employer_id)
