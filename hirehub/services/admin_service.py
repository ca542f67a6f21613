"""
Admin Service - dashboard counts. Listing and deleting go through the
entity services directly.
"""

from sqlalchemy.orm import Session

from hirehub.repositories import ApplicationRepository, JobRepository, UserRepository
from hirehub.schemas.schemas import AdminStatsResponse


class AdminService:
    def __init__(self, db: Session):
        self.users = UserRepository(db)
        self.jobs = JobRepository(db)
        self.applications = ApplicationRepository(db)

    def get_stats(self) -> AdminStatsResponse:
        return AdminStatsResponse(
            total_users=self.users.count(),
            total_jobs=self.jobs.count(),
            total_applications=self.applications.count(),
        )
