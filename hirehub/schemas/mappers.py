"""
Entity -> response schema mapping.

Flat columns are copied through from_attributes; the names that come from
related rows (company name, applicant name, ...) are filled in here.
"""

from hirehub.db.tables import Application, Employer, Job, JobSeeker, Notification, Resume, User
from hirehub.schemas.schemas import (
    ApplicationResponse, EmployerResponse, JobResponse, JobSeekerResponse,
    NotificationResponse, ResumeResponse, UserResponse
)


def to_user_response(user: User) -> UserResponse:
    return UserResponse.model_validate(user)


def to_employer_response(employer: Employer) -> EmployerResponse:
    response = EmployerResponse.model_validate(employer)
    if employer.user is not None:
        response.user_full_name = employer.user.full_name
        response.user_email = employer.user.email
    return response


def to_job_seeker_response(job_seeker: JobSeeker) -> JobSeekerResponse:
    response = JobSeekerResponse.model_validate(job_seeker)
    if job_seeker.user is not None:
        response.user_full_name = job_seeker.user.full_name
        response.user_email = job_seeker.user.email
    return response


def to_job_response(job: Job) -> JobResponse:
    return JobResponse(
        job_id=job.job_id,
        employer_id=job.employer_id,
        employer_name=job.employer.company_name if job.employer else None,
        title=job.title,
        description=job.description,
        location=job.location,
        salary=float(job.salary) if job.salary is not None else None,
        skills_required=job.skills_required,
        academic_eligibility=job.academic_eligibility,
        allowed_batches=job.allowed_batches,
        backlogs=job.backlogs,
        status=job.status,
        created_at=job.created_at,
    )


def to_application_response(application: Application) -> ApplicationResponse:
    response = ApplicationResponse.model_validate(application)
    if application.job is not None:
        response.job_title = application.job.title
    if application.job_seeker is not None and application.job_seeker.user is not None:
        response.job_seeker_name = application.job_seeker.user.full_name
    if application.resume is not None:
        response.resume_name = application.resume.resume_name
    return response


def to_resume_response(resume: Resume) -> ResumeResponse:
    response = ResumeResponse.model_validate(resume)
    if resume.job_seeker is not None and resume.job_seeker.user is not None:
        response.job_seeker_name = resume.job_seeker.user.full_name
    return response


def to_notification_response(notification: Notification) -> NotificationResponse:
    response = NotificationResponse.model_validate(notification)
    if notification.user is not None:
        response.user_email = notification.user.email
    return response
