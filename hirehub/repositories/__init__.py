"""
Repositories - one thin query class per table.

Repositories only flush; the route's session commits through the service.
"""
from hirehub.repositories.application_repository import ApplicationRepository
from hirehub.repositories.employer_repository import EmployerRepository
from hirehub.repositories.job_repository import JobRepository
from hirehub.repositories.job_seeker_repository import JobSeekerRepository
from hirehub.repositories.notification_repository import NotificationRepository
from hirehub.repositories.password_reset_repository import PasswordResetRepository
from hirehub.repositories.resume_repository import ResumeRepository
from hirehub.repositories.user_repository import UserRepository

__all__ = [
    "ApplicationRepository",
    "EmployerRepository",
    "JobRepository",
    "JobSeekerRepository",
    "NotificationRepository",
    "PasswordResetRepository",
    "ResumeRepository",
    "UserRepository",
]
