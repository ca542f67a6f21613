"""
Service providers for route injection.

Each request gets services bound to its own database session. Tests swap
the email backend by overriding get_email_service.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from hirehub.db.database import get_db
from hirehub.services.admin_service import AdminService
from hirehub.services.application_service import ApplicationService
from hirehub.services.email_service import EmailService, get_email_service
from hirehub.services.employer_service import EmployerService
from hirehub.services.job_seeker_service import JobSeekerService
from hirehub.services.job_service import JobService
from hirehub.services.notification_service import NotificationService
from hirehub.services.resume_service import ResumeService
from hirehub.services.user_service import UserService


def get_user_service(
    db: Session = Depends(get_db), email_service: EmailService = Depends(get_email_service)
) -> UserService:
    return UserService(db, email_service)


def get_employer_service(db: Session = Depends(get_db)) -> EmployerService:
    return EmployerService(db)


def get_job_seeker_service(db: Session = Depends(get_db)) -> JobSeekerService:
    return JobSeekerService(db)


def get_job_service(db: Session = Depends(get_db)) -> JobService:
    return JobService(db)


def get_resume_service(db: Session = Depends(get_db)) -> ResumeService:
    return ResumeService(db)


def get_notification_service(
    db: Session = Depends(get_db), email_service: EmailService = Depends(get_email_service)
) -> NotificationService:
    return NotificationService(db, email_service)


def get_application_service(
    db: Session = Depends(get_db),
    notification_service: NotificationService = Depends(get_notification_service),
) -> ApplicationService:
    return ApplicationService(db, notification_service)


def get_admin_service(db: Session = Depends(get_db)) -> AdminService:
    return AdminService(db)
