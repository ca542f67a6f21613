"""
Resume Routes

GET /Resume - List resumes (admin)
GET /Resume/formats - Supported upload formats
GET /Resume/jobseeker/{job_seeker_id} - Resumes of a job seeker
GET /Resume/jobseeker/{job_seeker_id}/default - Default resume of a job seeker
GET /Resume/{resume_id} - Get resume
POST /Resume/upload - Create resume with file upload (multipart)
POST /Resume/metadata - Create resume from JSON metadata
PUT /Resume/{resume_id} - Update resume
DELETE /Resume/{resume_id} - Delete resume and its file
POST /Resume/jobseeker/{job_seeker_id}/set-default/{resume_id} - Make resume the default
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import JSONResponse

from hirehub.api.deps import get_resume_service
from hirehub.core.auth import ADMIN, EMPLOYER, JOB_SEEKER, require_roles
from hirehub.core.config import get_settings
from hirehub.schemas.mappers import to_resume_response
from hirehub.schemas.schemas import MessageResponse, ResumeCreate, ResumeResponse, ResumeUpdate
from hirehub.services.resume_service import ResumeService
from hirehub.utils.file_upload import get_supported_formats

router = APIRouter(prefix="/Resume", tags=["Resumes"])

job_seeker_only = Depends(require_roles(JOB_SEEKER))
admin_or_job_seeker = Depends(require_roles(ADMIN, JOB_SEEKER))


@router.get("", response_model=List[ResumeResponse], dependencies=[Depends(require_roles(ADMIN))])
async def list_resumes(service: ResumeService = Depends(get_resume_service)):
    return [to_resume_response(r) for r in service.get_all()]


@router.get("/formats")
async def supported_formats():
    """Get supported file formats for resume upload."""
    return get_supported_formats(get_settings().max_upload_mb)


@router.get("/jobseeker/{job_seeker_id}", response_model=List[ResumeResponse], dependencies=[admin_or_job_seeker])
async def resumes_for_job_seeker(job_seeker_id: UUID, service: ResumeService = Depends(get_resume_service)):
    return [to_resume_response(r) for r in service.get_by_job_seeker(str(job_seeker_id))]


@router.get("/jobseeker/{job_seeker_id}/default", response_model=ResumeResponse, dependencies=[admin_or_job_seeker])
async def default_resume(job_seeker_id: UUID, service: ResumeService = Depends(get_resume_service)):
    return to_resume_response(service.get_default(str(job_seeker_id)))


@router.get(
    "/{resume_id}",
    response_model=ResumeResponse,
    dependencies=[Depends(require_roles(ADMIN, JOB_SEEKER, EMPLOYER))],
)
async def get_resume(resume_id: int, service: ResumeService = Depends(get_resume_service)):
    return to_resume_response(service.get_by_id(resume_id))


@router.post("/upload", response_model=ResumeResponse, status_code=201, dependencies=[job_seeker_only])
async def upload_resume(
    job_seeker_id: UUID = Form(..., alias="jobSeekerId"),
    resume_name: str = Form("", alias="resumeName"),
    is_default: bool = Form(False, alias="isDefault"),
    parsed_skills: Optional[str] = Form(None, alias="parsedSkills"),
    file: Optional[UploadFile] = File(None),
    service: ResumeService = Depends(get_resume_service),
):
    """
    Upload a resume (PDF, DOCX or TXT). Without parsedSkills the skills
    are read from the file and matched against skills that jobs ask for.
    """
    if not resume_name.strip():
        return JSONResponse(status_code=400, content={"message": "resumeName is required"})
    if len(resume_name) > 150:
        return JSONResponse(status_code=400, content={"message": "resumeName must be at most 150 characters"})
    resume = await service.upload(
        job_seeker_id=str(job_seeker_id),
        resume_name=resume_name.strip(),
        is_default=is_default,
        parsed_skills=(parsed_skills or "").strip()[:800] or None,
        file=file,
    )
    return to_resume_response(resume)


@router.post("/metadata", response_model=ResumeResponse, status_code=201, dependencies=[job_seeker_only])
async def create_resume_metadata(request: ResumeCreate, service: ResumeService = Depends(get_resume_service)):
    return to_resume_response(service.create(request))


@router.put("/{resume_id}", response_model=ResumeResponse, dependencies=[job_seeker_only])
async def update_resume(resume_id: int, request: ResumeUpdate, service: ResumeService = Depends(get_resume_service)):
    return to_resume_response(service.update(resume_id, request))


@router.delete("/{resume_id}", status_code=204, dependencies=[job_seeker_only])
async def delete_resume(resume_id: int, service: ResumeService = Depends(get_resume_service)):
    """Delete a resume. Refused with 409 while applications use it."""
    service.delete(resume_id)
    return Response(status_code=204)


@router.post(
    "/jobseeker/{job_seeker_id}/set-default/{resume_id}",
    response_model=MessageResponse,
    dependencies=[job_seeker_only],
)
async def set_default_resume(job_seeker_id: UUID, resume_id: int, service: ResumeService = Depends(get_resume_service)):
    service.set_default(str(job_seeker_id), resume_id)
    return MessageResponse(message="Default resume updated successfully.")
