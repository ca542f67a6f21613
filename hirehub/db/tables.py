"""Database table models."""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hirehub.db.database import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp; every datetime column stores UTC without tzinfo."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    """User account. Role is one of Employer, JobSeeker, Admin."""

    __tablename__ = "users"

    user_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    full_name: Mapped[str] = mapped_column(String(50))
    email: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(255))
    role: Mapped[str] = mapped_column(String(20), default="JobSeeker")
    date_of_birth: Mapped[Optional[date]] = mapped_column(Date, default=None)
    gender: Mapped[Optional[str]] = mapped_column(String(10), default=None)
    address: Mapped[Optional[str]] = mapped_column(String(250), default=None)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)
    deactivated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, default=None)
    deletion_scheduled_at: Mapped[Optional[datetime]] = mapped_column(DateTime, default=None)

    employer: Mapped[Optional["Employer"]] = relationship(
        back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    job_seeker: Mapped[Optional["JobSeeker"]] = relationship(
        back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    notifications: Mapped[List["Notification"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
    password_resets: Mapped[List["PasswordReset"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )


class Employer(Base):
    """Company profile owned by an Employer user."""

    __tablename__ = "employers"

    employer_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.user_id"), unique=True)
    company_name: Mapped[str] = mapped_column(String(200))
    position: Mapped[Optional[str]] = mapped_column(String(100), default=None)
    contact_info: Mapped[Optional[str]] = mapped_column(String(200), default=None)

    user: Mapped["User"] = relationship(back_populates="employer")
    jobs: Mapped[List["Job"]] = relationship(back_populates="employer", cascade="all, delete-orphan")


class JobSeeker(Base):
    """Candidate profile owned by a JobSeeker user."""

    __tablename__ = "job_seekers"

    job_seeker_id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.user_id"), unique=True)
    education_details: Mapped[Optional[str]] = mapped_column(String(300), default=None)
    skills: Mapped[Optional[str]] = mapped_column(String(500), default=None)
    college: Mapped[Optional[str]] = mapped_column(String(100), default=None)
    work_status: Mapped[Optional[str]] = mapped_column(String(50), default=None)
    experience: Mapped[Optional[str]] = mapped_column(String(100), default=None)

    user: Mapped["User"] = relationship(back_populates="job_seeker")
    # No cascade: a seeker with resumes or applications cannot be deleted
    resumes: Mapped[List["Resume"]] = relationship(back_populates="job_seeker")
    applications: Mapped[List["Application"]] = relationship(back_populates="job_seeker")


class Job(Base):
    """Job posting."""

    __tablename__ = "jobs"

    job_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    employer_id: Mapped[str] = mapped_column(ForeignKey("employers.employer_id"), index=True)
    title: Mapped[str] = mapped_column(String(200))
    description: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    location: Mapped[Optional[str]] = mapped_column(String(200), default=None)
    salary: Mapped[Optional[Decimal]] = mapped_column(Numeric(18, 2), default=None)
    skills_required: Mapped[Optional[str]] = mapped_column(String(500), default=None)
    academic_eligibility: Mapped[Optional[str]] = mapped_column(String(300), default=None)
    allowed_batches: Mapped[Optional[str]] = mapped_column(String(200), default=None)
    backlogs: Mapped[Optional[int]] = mapped_column(Integer, default=None)
    status: Mapped[str] = mapped_column(String(50), default="Open")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    employer: Mapped["Employer"] = relationship(back_populates="jobs")
    applications: Mapped[List["Application"]] = relationship(
        back_populates="job", cascade="all, delete-orphan"
    )


class Application(Base):
    """A job seeker's application to a job with one of their resumes."""

    __tablename__ = "applications"

    application_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_id: Mapped[int] = mapped_column(ForeignKey("jobs.job_id", ondelete="CASCADE"), index=True)
    job_seeker_id: Mapped[str] = mapped_column(
        ForeignKey("job_seekers.job_seeker_id", ondelete="RESTRICT"), index=True
    )
    resume_id: Mapped[int] = mapped_column(ForeignKey("resumes.resume_id", ondelete="RESTRICT"))
    cover_letter: Mapped[Optional[str]] = mapped_column(Text, default=None)
    status: Mapped[str] = mapped_column(String(50), default="Applied")
    applied_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)
    notes: Mapped[Optional[str]] = mapped_column(String(1000), default=None)
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, default=None)
    is_shortlisted: Mapped[bool] = mapped_column(Boolean, default=False)
    interview_date: Mapped[Optional[datetime]] = mapped_column(DateTime, default=None)
    employer_feedback: Mapped[Optional[str]] = mapped_column(String(1000), default=None)

    job: Mapped["Job"] = relationship(back_populates="applications")
    job_seeker: Mapped["JobSeeker"] = relationship(back_populates="applications")
    resume: Mapped["Resume"] = relationship(back_populates="applications")


class Resume(Base):
    """Resume metadata; the file itself lives in the upload directory."""

    __tablename__ = "resumes"

    resume_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_seeker_id: Mapped[str] = mapped_column(ForeignKey("job_seekers.job_seeker_id"), index=True)
    resume_name: Mapped[str] = mapped_column(String(150))
    file_path: Mapped[Optional[str]] = mapped_column(String(300), default=None)
    file_type: Mapped[Optional[str]] = mapped_column(String(10), default=None)
    is_default: Mapped[bool] = mapped_column(Boolean, default=False)
    parsed_skills: Mapped[Optional[str]] = mapped_column(String(800), default=None)
    updated_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow, onupdate=utcnow)

    job_seeker: Mapped["JobSeeker"] = relationship(back_populates="resumes")
    applications: Mapped[List["Application"]] = relationship(back_populates="resume")


class Notification(Base):
    __tablename__ = "notifications"

    notification_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.user_id"), index=True)
    message: Mapped[str] = mapped_column(String(300))
    subject: Mapped[Optional[str]] = mapped_column(String(100), default=None)
    is_read: Mapped[bool] = mapped_column(Boolean, default=False)
    sent_email: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    user: Mapped["User"] = relationship(back_populates="notifications")


class PasswordReset(Base):
    """Single-use password reset token. Only the sha256 of the token is stored."""

    __tablename__ = "password_resets"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_uuid)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.user_id"), index=True)
    token_hash: Mapped[str] = mapped_column(String(64), index=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime)
    used: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=utcnow)

    user: Mapped["User"] = relationship(back_populates="password_resets")
