"""
Job Service - job postings and job search.
"""

import logging
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from hirehub.core.exceptions import NotFoundError
from hirehub.db.tables import Job
from hirehub.repositories import EmployerRepository, JobRepository
from hirehub.schemas.schemas import JobCreate, JobStatus, JobUpdate

logger = logging.getLogger(__name__)


def _to_decimal(value):
    return Decimal(str(value)) if value is not None else None


class JobService:
    def __init__(self, db: Session):
        self.jobs = JobRepository(db)
        self.employers = EmployerRepository(db)

    def get_all(self) -> List[Job]:
        return self.jobs.get_all()

    def get_by_id(self, job_id: int) -> Job:
        job = self.jobs.get_by_id(job_id)
        if job is None:
            raise NotFoundError.for_entity("Job", job_id)
        return job

    def get_by_employer(self, employer_id: str) -> List[Job]:
        return self.jobs.get_by_employer(employer_id)

    def search_by_title(self, query: str) -> List[Job]:
        return self.jobs.search_by_title(query)

    def search_by_location(self, location: str) -> List[Job]:
        return self.jobs.search_by_location(location)

    def search_by_skill(self, skill: str) -> List[Job]:
        return self.jobs.search_by_skill(skill)

    def search_by_company(self, company: str) -> List[Job]:
        return self.jobs.search_by_company(company)

    def create(self, dto: JobCreate) -> Job:
        if self.employers.get_by_id(dto.employer_id) is None:
            raise NotFoundError.for_entity("Employer", dto.employer_id)

        data = dto.model_dump()
        data["salary"] = _to_decimal(data["salary"])
        data["status"] = (data.get("status") or "").strip() or JobStatus.open.value
        job = self.jobs.add(Job(**data))
        self.jobs.commit()
        logger.info("Employer %s posted job %s", job.employer_id, job.job_id)
        return job

    def update(self, job_id: int, dto: JobUpdate) -> Job:
        job = self.get_by_id(job_id)
        for field, value in dto.model_dump(exclude_unset=True).items():
            if field == "salary":
                value = _to_decimal(value)
            if field == "title" and value is None:
                continue
            setattr(job, field, value)
        self.jobs.update(job)
        self.jobs.commit()
        return job

    def delete(self, job_id: int) -> None:
        job = self.get_by_id(job_id)
        self.jobs.delete(job)
        self.jobs.commit()
        logger.info("Deleted job %s", job_id)
