"""
Resume Service - resume metadata, uploaded files and the default resume.

A job seeker has at most one default resume and resume names are unique
per job seeker.
"""

import logging
from typing import List, Optional

from fastapi import HTTPException, UploadFile
from sqlalchemy.orm import Session

from hirehub.core.config import get_settings
from hirehub.core.exceptions import ConflictError, NotFoundError
from hirehub.db.tables import Resume
from hirehub.repositories import ApplicationRepository, JobRepository, JobSeekerRepository, ResumeRepository
from hirehub.schemas.schemas import ResumeCreate, ResumeUpdate
from hirehub.utils.file_upload import (
    delete_stored_file, extract_skills, extract_text, read_upload, save_upload, split_skills
)

logger = logging.getLogger(__name__)


class ResumeService:
    def __init__(self, db: Session):
        self.resumes = ResumeRepository(db)
        self.job_seekers = JobSeekerRepository(db)
        self.applications = ApplicationRepository(db)
        self.jobs = JobRepository(db)
        self.settings = get_settings()

    # ------------------- QUERIES -------------------

    def get_all(self) -> List[Resume]:
        return self.resumes.get_all()

    def get_by_id(self, resume_id: int) -> Resume:
        resume = self.resumes.get_by_id(resume_id)
        if resume is None:
            raise NotFoundError.for_entity("Resume", resume_id)
        return resume

    def get_by_job_seeker(self, job_seeker_id: str) -> List[Resume]:
        return self.resumes.get_by_job_seeker(job_seeker_id)

    def get_default(self, job_seeker_id: str) -> Resume:
        resume = self.resumes.get_default(job_seeker_id)
        if resume is None:
            raise NotFoundError(f"No default resume found for job seeker '{job_seeker_id}'.")
        return resume

    # ------------------- CREATE -------------------

    def create(self, dto: ResumeCreate) -> Resume:
        if self.job_seekers.get_by_id(dto.job_seeker_id) is None:
            raise NotFoundError.for_entity("JobSeeker", dto.job_seeker_id)
        if self.resumes.name_exists(dto.job_seeker_id, dto.resume_name):
            raise ConflictError(f"Resume name '{dto.resume_name}' already exists for this job seeker.")

        resume = self.resumes.add(Resume(**dto.model_dump()))
        if resume.is_default:
            self.resumes.clear_default(resume.job_seeker_id, keep_id=resume.resume_id)
        self.resumes.commit()
        logger.info("Created resume %s for job seeker %s", resume.resume_id, resume.job_seeker_id)
        return resume

    async def upload(
        self,
        job_seeker_id: str,
        resume_name: str,
        is_default: bool = False,
        parsed_skills: Optional[str] = None,
        file: Optional[UploadFile] = None,
    ) -> Resume:
        """
        Create a resume from a multipart form. The file is optional; when
        given without parsed skills, skills are read from its text.
        """
        # Validate before anything touches the disk
        if self.job_seekers.get_by_id(job_seeker_id) is None:
            raise NotFoundError.for_entity("JobSeeker", job_seeker_id)
        if self.resumes.name_exists(job_seeker_id, resume_name):
            raise ConflictError(f"Resume name '{resume_name}' already exists for this job seeker.")

        file_path, file_type = None, None
        if file is not None and file.filename:
            content, ext = await read_upload(file, self.settings.max_upload_mb)
            if not parsed_skills:
                parsed_skills = self._skills_from_file(content, ext) or None
            file_path, file_type = save_upload(content, ext, self.settings.upload_dir)

        try:
            return self.create(ResumeCreate(
                job_seeker_id=job_seeker_id,
                resume_name=resume_name,
                file_path=file_path,
                file_type=file_type,
                is_default=is_default,
                parsed_skills=parsed_skills,
            ))
        except Exception:
            delete_stored_file(file_path, self.settings.upload_dir)
            raise

    def _skills_from_file(self, content: bytes, ext: str) -> str:
        try:
            text = extract_text(content, ext)
        except HTTPException as e:
            logger.warning("Could not extract resume text: %s", e.detail)
            return ""
        vocabulary = split_skills(self.jobs.get_all_skills_required())
        return extract_skills(text, vocabulary)

    # ------------------- UPDATE -------------------

    def update(self, resume_id: int, dto: ResumeUpdate) -> Resume:
        resume = self.get_by_id(resume_id)
        changes = dto.model_dump(exclude_unset=True)

        new_name = changes.get("resume_name")
        if new_name and self.resumes.name_exists(resume.job_seeker_id, new_name, exclude_id=resume_id):
            raise ConflictError(f"Resume name '{new_name}' already exists for this job seeker.")

        for field, value in changes.items():
            if field in ("resume_name", "is_default") and value is None:
                continue
            setattr(resume, field, value)
        if resume.is_default:
            self.resumes.clear_default(resume.job_seeker_id, keep_id=resume.resume_id)
        self.resumes.update(resume)
        self.resumes.commit()
        return resume

    def set_default(self, job_seeker_id: str, resume_id: int) -> None:
        resume = self.resumes.get_by_id(resume_id)
        if resume is None or resume.job_seeker_id != job_seeker_id:
            raise NotFoundError(f"Resume with id '{resume_id}' not found for job seeker '{job_seeker_id}'.")
        self.resumes.clear_default(job_seeker_id, keep_id=resume_id)
        resume.is_default = True
        self.resumes.commit()
        logger.info("Resume %s is now the default for job seeker %s", resume_id, job_seeker_id)

    # ------------------- DELETE -------------------

    def delete(self, resume_id: int) -> None:
        resume = self.get_by_id(resume_id)
        if self.applications.count_by_resume(resume_id):
            raise ConflictError(
                "This resume is used by one or more applications and cannot be deleted."
            )
        file_path = resume.file_path
        self.resumes.delete(resume)
        self.resumes.commit()
        delete_stored_file(file_path, self.settings.upload_dir)
        logger.info("Deleted resume %s", resume_id)
