"""
Notification Service - in-app notifications with optional email copies.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from hirehub.core.exceptions import ForbiddenError, NotFoundError
from hirehub.db.tables import Notification
from hirehub.repositories import (
    ApplicationRepository, JobRepository, JobSeekerRepository, NotificationRepository, UserRepository
)
from hirehub.schemas.schemas import (
    EmployerNotifyApplicant, JobSeekerNotifyEmployer, NotificationCreate, NotificationUpdate
)
from hirehub.services import email_templates
from hirehub.services.email_service import EmailService

logger = logging.getLogger(__name__)

DEFAULT_SUBJECT = "Notification from HireHub"
MESSAGE_MAX_LENGTH = 300
SUBJECT_MAX_LENGTH = 100


class NotificationService:
    def __init__(self, db: Session, email_service: EmailService):
        self.notifications = NotificationRepository(db)
        self.users = UserRepository(db)
        self.applications = ApplicationRepository(db)
        self.jobs = JobRepository(db)
        self.job_seekers = JobSeekerRepository(db)
        self.email_service = email_service

    # ------------------- GET -------------------

    def get_by_user(self, user_id: str) -> List[Notification]:
        return self.notifications.get_by_user(user_id)

    def get_unread_by_user(self, user_id: str) -> List[Notification]:
        return self.notifications.get_unread_by_user(user_id)

    def get_recent_by_user(self, user_id: str, limit: int = 20) -> List[Notification]:
        return self.notifications.get_recent_by_user(user_id, limit)

    def get_by_id(self, notification_id: int) -> Notification:
        notification = self.notifications.get_by_id(notification_id)
        if notification is None:
            logger.warning("Notification %s not found", notification_id)
            raise NotFoundError.for_entity("Notification", notification_id)
        return notification

    # ------------------- CREATE -------------------

    async def create(self, dto: NotificationCreate) -> Notification:
        return await self.notify(dto.user_id, dto.message, dto.subject, dto.send_email)

    async def notify(
        self,
        user_id: str,
        message: str,
        subject: Optional[str] = None,
        send_email: bool = False,
        html_content: Optional[str] = None,
    ) -> Notification:
        """
        Store a notification and, when send_email is set, email it.

        Message and subject are cut to the column lengths, so callers may
        pass text built from long job titles or user input. html_content
        replaces the default escaped-message body. A failed email leaves
        sent_email False but never fails the call.
        """
        user = self.users.get_by_id(user_id)
        if user is None:
            raise NotFoundError.for_entity("User", user_id)

        message = message[:MESSAGE_MAX_LENGTH]
        subject = subject[:SUBJECT_MAX_LENGTH] if subject else None
        notification = self.notifications.add(Notification(
            user_id=user_id,
            message=message,
            subject=subject,
            is_read=False,
            sent_email=False,
        ))
        self.notifications.commit()
        logger.info("Notification %s created for user %s", notification.notification_id, user.user_id)

        if send_email:
            await self._email(notification, subject or DEFAULT_SUBJECT,
                              html_content or email_templates.plain_message(message))
        return notification

    async def _email(self, notification: Notification, subject: str, html_content: str) -> None:
        recipient = notification.user.email if notification.user else None
        if not recipient:
            logger.warning("No recipient email for notification %s", notification.notification_id)
            return
        try:
            sent = await self.email_service.send_email(recipient, subject, html_content)
        except Exception:
            logger.exception("Failed to send email for notification %s", notification.notification_id)
            return

        if sent:
            notification.sent_email = True
            self.notifications.commit()
            logger.info("Email sent for notification %s", notification.notification_id)
        else:
            logger.warning("Email NOT sent for notification %s", notification.notification_id)

    async def notify_applicant_by_application(
        self, dto: EmployerNotifyApplicant, employer_user_id: str
    ) -> Notification:
        """Employer messages the applicant of one of their own jobs."""
        application = self.applications.get_by_id_with_details(dto.application_id)
        if application is None:
            raise NotFoundError.for_entity("Application", dto.application_id)

        job = application.job
        if job.employer is None or job.employer.user_id != employer_user_id:
            raise ForbiddenError("Not authorized to message this applicant.")

        seeker_user = application.job_seeker.user
        candidate = seeker_user.full_name or "Candidate"
        title = job.title or "your role"
        company = job.employer.company_name or "the employer"
        subject = dto.subject or "Message from employer"

        if "interview" in subject.lower() or "interview" in (application.status or "").lower():
            html = email_templates.interview_scheduled(candidate, title, company, application.interview_date)
        elif application.is_shortlisted or (application.status or "").lower() == "shortlisted":
            html = email_templates.shortlisted(candidate, title, company)
        else:
            html = None

        return await self.notify(
            seeker_user.user_id, dto.message, subject, send_email=dto.send_email, html_content=html
        )

    async def notify_employer_by_job(
        self, dto: JobSeekerNotifyEmployer, job_seeker_user_id: str
    ) -> Notification:
        """Job seeker messages the employer who posted a job."""
        job = self.jobs.get_by_id(dto.job_id)
        if job is None:
            raise NotFoundError.for_entity("Job", dto.job_id)

        job_seeker = self.job_seekers.get_by_user_id(job_seeker_user_id)
        if job_seeker is None:
            raise NotFoundError(f"JobSeeker for user '{job_seeker_user_id}' not found.")

        sender = job_seeker.user.full_name if job_seeker.user else "A candidate"
        return await self.notify(
            job.employer.user_id,
            f"{sender}: {dto.message}",
            dto.subject or f"Message about {job.title}",
            send_email=dto.send_email,
        )

    # ------------------- UPDATE -------------------

    def update(self, notification_id: int, dto: NotificationUpdate) -> Notification:
        notification = self.get_by_id(notification_id)
        notification.is_read = dto.is_read
        if dto.message and dto.message.strip():
            notification.message = dto.message
        self.notifications.update(notification)
        self.notifications.commit()
        return notification

    def mark_as_read(self, notification_id: int) -> bool:
        notification = self.notifications.get_by_id(notification_id)
        if notification is None:
            return False
        notification.is_read = True
        self.notifications.commit()
        return True

    def mark_all_as_read(self, user_id: str) -> int:
        updated = self.notifications.mark_all_read(user_id)
        self.notifications.commit()
        logger.info("Marked %d notifications read for user %s", updated, user_id)
        return updated

    # ------------------- DELETE -------------------

    def delete(self, notification_id: int) -> None:
        notification = self.get_by_id(notification_id)
        self.notifications.delete(notification)
        self.notifications.commit()
