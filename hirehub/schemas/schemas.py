"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
JSON uses camelCase keys (the web client's convention); snake_case
names are accepted on input too.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import date, datetime
from enum import Enum


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ============================================================
# ENUMS
# ============================================================

class UserRole(str, Enum):
    employer = "Employer"
    job_seeker = "JobSeeker"
    admin = "Admin"


class JobStatus(str, Enum):
    open = "Open"
    closed = "Closed"


class ApplicationStatus(str, Enum):
    applied = "Applied"
    reviewed = "Reviewed"
    shortlisted = "Shortlisted"
    interview_scheduled = "InterviewScheduled"
    rejected = "Rejected"
    hired = "Hired"


# ============================================================
# USER / AUTH SCHEMAS
# ============================================================

class UserCreate(CamelModel):
    full_name: str = Field(..., min_length=1, max_length=50)
    email: EmailStr = Field(..., max_length=100)
    password: str = Field(..., min_length=6, max_length=20)
    role: UserRole = UserRole.job_seeker
    date_of_birth: Optional[date] = None
    gender: Optional[str] = Field(None, max_length=10)
    address: Optional[str] = Field(None, max_length=250)


class UserUpdate(CamelModel):
    """Email cannot be changed."""
    full_name: Optional[str] = Field(None, min_length=1, max_length=50)
    role: Optional[UserRole] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = Field(None, max_length=10)
    address: Optional[str] = Field(None, max_length=250)


class UserResponse(CamelModel):
    user_id: str
    full_name: str
    email: str
    role: str
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    address: Optional[str] = None
    created_at: datetime
    is_active: bool = True


class LoginRequest(CamelModel):
    email: EmailStr
    password: str


class AuthResponse(CamelModel):
    token: str
    expires_at: datetime
    role: str
    user_id: str


class ForgotPasswordRequest(CamelModel):
    email: str = ""
    origin_base_url: Optional[str] = None


class ResetPasswordRequest(CamelModel):
    token: str = ""
    new_password: str = ""


# ============================================================
# EMPLOYER SCHEMAS
# ============================================================

class EmployerCreate(CamelModel):
    user_id: str
    company_name: str = Field(..., min_length=1, max_length=200)
    position: Optional[str] = Field(None, max_length=100)
    contact_info: Optional[str] = Field(None, max_length=200)


class EmployerUpdate(CamelModel):
    company_name: Optional[str] = Field(None, min_length=1, max_length=200)
    position: Optional[str] = Field(None, max_length=100)
    contact_info: Optional[str] = Field(None, max_length=200)


class EmployerResponse(CamelModel):
    employer_id: str
    user_id: str
    company_name: str
    position: Optional[str] = None
    contact_info: Optional[str] = None
    user_full_name: Optional[str] = None
    user_email: Optional[str] = None


# ============================================================
# JOB SEEKER SCHEMAS
# ============================================================

class JobSeekerCreate(CamelModel):
    user_id: str
    education_details: Optional[str] = Field(None, max_length=300)
    skills: Optional[str] = Field(None, max_length=500)
    college: Optional[str] = Field(None, max_length=100)
    work_status: Optional[str] = Field(None, max_length=50)
    experience: Optional[str] = Field(None, max_length=100)


class JobSeekerUpdate(CamelModel):
    education_details: Optional[str] = Field(None, max_length=300)
    skills: Optional[str] = Field(None, max_length=500)
    college: Optional[str] = Field(None, max_length=100)
    work_status: Optional[str] = Field(None, max_length=50)
    experience: Optional[str] = Field(None, max_length=100)


class JobSeekerResponse(CamelModel):
    job_seeker_id: str
    user_id: str
    education_details: Optional[str] = None
    skills: Optional[str] = None
    college: Optional[str] = None
    work_status: Optional[str] = None
    experience: Optional[str] = None
    user_full_name: Optional[str] = None
    user_email: Optional[str] = None


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(CamelModel):
    employer_id: str
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    location: Optional[str] = Field(None, max_length=200)
    salary: Optional[float] = Field(None, ge=0)
    skills_required: Optional[str] = Field(None, max_length=500)
    academic_eligibility: Optional[str] = Field(None, max_length=300)
    allowed_batches: Optional[str] = Field(None, max_length=200)
    backlogs: Optional[int] = Field(None, ge=0)
    status: Optional[str] = Field(None, max_length=50)


class JobUpdate(CamelModel):
    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = Field(None, max_length=1000)
    location: Optional[str] = Field(None, max_length=200)
    salary: Optional[float] = Field(None, ge=0)
    skills_required: Optional[str] = Field(None, max_length=500)
    academic_eligibility: Optional[str] = Field(None, max_length=300)
    allowed_batches: Optional[str] = Field(None, max_length=200)
    backlogs: Optional[int] = Field(None, ge=0)
    status: str = Field(..., min_length=1, max_length=50)


class JobResponse(CamelModel):
    job_id: int
    employer_id: str
    employer_name: Optional[str] = None
    title: str
    description: Optional[str] = None
    location: Optional[str] = None
    salary: Optional[float] = None
    skills_required: Optional[str] = None
    academic_eligibility: Optional[str] = None
    allowed_batches: Optional[str] = None
    backlogs: Optional[int] = None
    status: str
    created_at: datetime


# ============================================================
# APPLICATION SCHEMAS
# ============================================================

class ApplicationCreate(CamelModel):
    job_id: int
    job_seeker_id: str
    resume_id: Optional[int] = Field(None, description="Defaults to the seeker's default resume")
    cover_letter: Optional[str] = None


class ApplicationUpdate(CamelModel):
    status: str = Field(..., min_length=1, max_length=50)
    cover_letter: Optional[str] = None
    is_shortlisted: Optional[bool] = None
    interview_date: Optional[datetime] = None
    employer_feedback: Optional[str] = Field(None, max_length=1000)


class ApplicationReview(CamelModel):
    notes: Optional[str] = Field(None, max_length=1000)


class ApplicationResponse(CamelModel):
    application_id: int
    job_id: int
    job_title: Optional[str] = None
    job_seeker_id: str
    job_seeker_name: Optional[str] = None
    resume_id: int
    resume_name: Optional[str] = None
    cover_letter: Optional[str] = None
    status: str
    applied_at: datetime
    notes: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    is_shortlisted: bool = False
    interview_date: Optional[datetime] = None
    employer_feedback: Optional[str] = None


# ============================================================
# RESUME SCHEMAS
# ============================================================

class ResumeCreate(CamelModel):
    job_seeker_id: str
    resume_name: str = Field(..., min_length=1, max_length=150)
    file_path: Optional[str] = Field(None, max_length=300)
    file_type: Optional[str] = Field(None, max_length=10)
    is_default: bool = False
    parsed_skills: Optional[str] = Field(None, max_length=800)


class ResumeUpdate(CamelModel):
    resume_name: Optional[str] = Field(None, min_length=1, max_length=150)
    file_path: Optional[str] = Field(None, max_length=300)
    file_type: Optional[str] = Field(None, max_length=10)
    is_default: Optional[bool] = None
    parsed_skills: Optional[str] = Field(None, max_length=800)


class ResumeResponse(CamelModel):
    resume_id: int
    job_seeker_id: str
    job_seeker_name: Optional[str] = None
    resume_name: str
    file_path: Optional[str] = None
    file_type: Optional[str] = None
    is_default: bool = False
    parsed_skills: Optional[str] = None
    updated_at: datetime


# ============================================================
# NOTIFICATION SCHEMAS
# ============================================================

class NotificationCreate(CamelModel):
    user_id: str
    message: str = Field(..., min_length=1, max_length=300)
    subject: Optional[str] = Field(None, max_length=100)
    send_email: bool = False


class NotificationUpdate(CamelModel):
    is_read: bool
    message: Optional[str] = Field(None, min_length=1, max_length=300)


class EmployerNotifyApplicant(CamelModel):
    application_id: int
    message: str = Field(..., min_length=1, max_length=300)
    subject: Optional[str] = Field(None, max_length=100)
    send_email: bool = True


class JobSeekerNotifyEmployer(CamelModel):
    job_id: int
    message: str = Field(..., min_length=1, max_length=300)
    subject: Optional[str] = Field(None, max_length=100)
    send_email: bool = True


class NotificationResponse(CamelModel):
    notification_id: int
    user_id: str
    user_email: Optional[str] = None
    message: str
    subject: Optional[str] = None
    is_read: bool = False
    sent_email: bool = False
    created_at: datetime


class MarkAllReadResponse(CamelModel):
    updated: int


# ============================================================
# ADMIN SCHEMAS
# ============================================================

class AdminStatsResponse(CamelModel):
    total_users: int
    total_jobs: int
    total_applications: int


# ============================================================
# COMMON SCHEMAS
# ============================================================

class MessageResponse(CamelModel):
    message: str


class ErrorResponse(CamelModel):
    error: str
    details: Optional[dict] = None
