"""
Application Service - job applications and the notifications they trigger.

Applying notifies the employer; a status change notifies the applicant.
Both notifications are best effort: the application is committed first
and a failed notification is only logged.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from hirehub.core.exceptions import BadRequestError, ConflictError, NotFoundError
from hirehub.db.tables import Application, utcnow
from hirehub.repositories import (
    ApplicationRepository, JobRepository, JobSeekerRepository, ResumeRepository
)
from hirehub.schemas.schemas import (
    ApplicationCreate, ApplicationStatus, ApplicationUpdate, JobStatus
)
from hirehub.services import email_templates
from hirehub.services.notification_service import NotificationService

logger = logging.getLogger(__name__)


class ApplicationService:
    def __init__(self, db: Session, notification_service: NotificationService):
        self.db = db
        self.repository = ApplicationRepository(db)
        self.jobs = JobRepository(db)
        self.job_seekers = JobSeekerRepository(db)
        self.resumes = ResumeRepository(db)
        self.notification_service = notification_service

    # ------------------- QUERIES -------------------

    def get_all(self) -> List[Application]:
        return self.repository.get_all()

    def get_by_id(self, application_id: int) -> Application:
        application = self.repository.get_by_id(application_id)
        if application is None:
            raise NotFoundError.for_entity("Application", application_id)
        return application

    def get_by_job(self, job_id: int) -> List[Application]:
        return self.repository.get_by_job(job_id)

    def get_by_job_seeker(self, job_seeker_id: str) -> List[Application]:
        return self.repository.get_by_job_seeker(job_seeker_id)

    def get_shortlisted_by_job(self, job_id: int) -> List[Application]:
        return self.repository.get_shortlisted_by_job(job_id)

    def get_with_interview_by_job(self, job_id: int) -> List[Application]:
        return self.repository.get_with_interview_by_job(job_id)

    def _load_with_details(self, application_id: int) -> Optional[Application]:
        """Prefer the eager-loading lookup; plain get_by_id when the repository has none."""
        loader = getattr(self.repository, "get_by_id_with_details", None)
        if callable(loader):
            try:
                return loader(application_id)
            except Exception:
                logger.warning("Detailed load of application %s failed, using plain lookup",
                               application_id, exc_info=True)
        return self.repository.get_by_id(application_id)

    # ------------------- CREATE -------------------

    async def create(self, dto: ApplicationCreate) -> Application:
        job = self.jobs.get_by_id(dto.job_id)
        if job is None:
            raise NotFoundError.for_entity("Job", dto.job_id)
        if self.job_seekers.get_by_id(dto.job_seeker_id) is None:
            raise NotFoundError.for_entity("JobSeeker", dto.job_seeker_id)

        if dto.resume_id is None:
            resume = self.resumes.get_default(dto.job_seeker_id)
            if resume is None:
                raise BadRequestError("No resume selected and the job seeker has no default resume.")
        else:
            resume = self.resumes.get_by_id(dto.resume_id)
            if resume is None:
                raise NotFoundError.for_entity("Resume", dto.resume_id)
            if resume.job_seeker_id != dto.job_seeker_id:
                raise BadRequestError("The resume does not belong to this job seeker.")

        if (job.status or "").lower() != JobStatus.open.value.lower():
            raise BadRequestError(f"Job '{job.title}' is not open for applications.")
        if self.repository.exists_for(dto.job_id, dto.job_seeker_id):
            raise ConflictError("You have already applied to this job.")

        application = self.repository.add(Application(
            job_id=dto.job_id,
            job_seeker_id=dto.job_seeker_id,
            resume_id=resume.resume_id,
            cover_letter=dto.cover_letter,
            status=ApplicationStatus.applied.value,
            applied_at=utcnow(),
        ))
        self.repository.commit()
        application_id = application.application_id
        logger.info("Application %s created for job %s", application_id, dto.job_id)

        await self._notify_employer(application_id)
        return self.get_by_id(application_id)

    async def _notify_employer(self, application_id: int) -> None:
        try:
            details = self._load_with_details(application_id)
            job = details.job if details else None
            employer_user = job.employer.user if job and job.employer else None
            if employer_user is None:
                logger.warning("No employer user to notify for application %s", application_id)
                return

            seeker_user = details.job_seeker.user if details.job_seeker else None
            applicant = (seeker_user.full_name if seeker_user else None) or "A candidate"
            title = job.title or "your job"
            await self.notification_service.notify(
                employer_user.user_id,
                f"{applicant} has applied for '{title}'.",
                f"New applicant for {title}",
                send_email=True,
            )
        except Exception:
            self.db.rollback()
            logger.exception("Failed to notify employer about application %s", application_id)

    # ------------------- UPDATE -------------------

    async def update(self, application_id: int, dto: ApplicationUpdate) -> Application:
        application = self.get_by_id(application_id)
        old_status = application.status or ""

        for field, value in dto.model_dump(exclude_unset=True).items():
            if field == "is_shortlisted" and value is None:
                continue
            setattr(application, field, value)
        if dto.is_shortlisted is None and dto.status.lower() == ApplicationStatus.shortlisted.value.lower():
            application.is_shortlisted = True
        self.repository.update(application)
        self.repository.commit()

        if old_status.lower() != dto.status.lower():
            logger.info("Application %s status %r -> %r", application_id, old_status, dto.status)
            await self._notify_status_change(application_id, dto.status)
        return self.get_by_id(application_id)

    async def _notify_status_change(self, application_id: int, new_status: str) -> None:
        try:
            details = self._load_with_details(application_id)
            seeker_user = details.job_seeker.user if details and details.job_seeker else None
            if seeker_user is None:
                logger.warning("No applicant user to notify for application %s", application_id)
                return

            job = details.job
            title = (job.title if job else None) or "your application"
            employer = (job.employer.company_name if job and job.employer else None) or "the employer"
            subject, message, html = status_change_message(
                new_status, title, employer, seeker_user.full_name or "Candidate", details.interview_date
            )
            await self.notification_service.notify(
                seeker_user.user_id, message, subject, send_email=True, html_content=html
            )
        except Exception:
            self.db.rollback()
            logger.exception("Failed to notify applicant about application %s", application_id)

    def mark_reviewed(self, application_id: int, notes: Optional[str] = None) -> Application:
        application = self.get_by_id(application_id)
        application.reviewed_at = utcnow()
        if notes is not None:
            application.notes = notes
        self.repository.update(application)
        self.repository.commit()
        return application

    # ------------------- DELETE -------------------

    def delete(self, application_id: int) -> None:
        application = self.get_by_id(application_id)
        self.repository.delete(application)
        self.repository.commit()
        logger.info("Deleted application %s", application_id)


def status_change_message(new_status: str, job_title: str, employer_name: str,
                          candidate_name: str = "Candidate", interview_date=None):
    """Subject, message and optional HTML email body for a status change."""
    status = new_status.lower()
    if status == ApplicationStatus.shortlisted.value.lower():
        return (
            f"You are shortlisted for {job_title}",
            f"Congratulations! You have been shortlisted for {job_title} at {employer_name}. "
            f"Please check your application for details.",
            email_templates.shortlisted(candidate_name, job_title, employer_name),
        )
    if "interview" in status:
        when = f" Interview scheduled on {email_templates.format_datetime(interview_date)}." if interview_date else ""
        return (
            f"Interview scheduled for {job_title}",
            f"Your interview for {job_title} at {employer_name} is scheduled.{when}",
            email_templates.interview_scheduled(candidate_name, job_title, employer_name, interview_date),
        )
    if status == ApplicationStatus.rejected.value.lower():
        return (
            f"Application update: {job_title}",
            f"We're sorry, your application for {job_title} at {employer_name} was not selected.",
            None,
        )
    return (
        f"Update: {job_title}",
        f"Your application status changed to '{new_status}' for {job_title}.",
        None,
    )
