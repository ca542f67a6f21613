"""
Application Routes

GET /Application - List applications (admin)
GET /Application/job/{job_id} - Applications for a job
GET /Application/job/{job_id}/shortlisted - Shortlisted applications for a job
GET /Application/job/{job_id}/interviews - Applications with an interview date
GET /Application/jobseeker/{job_seeker_id} - Applications of a job seeker
GET /Application/{application_id} - Get application
POST /Application - Apply to a job (job seeker only)
PUT /Application/{application_id} - Update status/feedback (employer/admin)
DELETE /Application/{application_id} - Withdraw/delete (job seeker/admin)
POST /Application/{application_id}/review - Mark reviewed with notes
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, Response

from hirehub.api.deps import get_application_service
from hirehub.core.auth import ADMIN, ALL_ROLES, EMPLOYER, JOB_SEEKER, require_roles
from hirehub.schemas.mappers import to_application_response
from hirehub.schemas.schemas import (
    ApplicationCreate, ApplicationResponse, ApplicationReview, ApplicationUpdate
)
from hirehub.services.application_service import ApplicationService

router = APIRouter(prefix="/Application", tags=["Applications"])

employer_or_admin = Depends(require_roles(EMPLOYER, ADMIN))
job_seeker_or_admin = Depends(require_roles(JOB_SEEKER, ADMIN))


@router.get("", response_model=List[ApplicationResponse], dependencies=[Depends(require_roles(ADMIN))])
async def list_applications(service: ApplicationService = Depends(get_application_service)):
    return [to_application_response(a) for a in service.get_all()]


@router.get("/job/{job_id}", response_model=List[ApplicationResponse], dependencies=[employer_or_admin])
async def applications_for_job(job_id: int, service: ApplicationService = Depends(get_application_service)):
    return [to_application_response(a) for a in service.get_by_job(job_id)]


@router.get("/job/{job_id}/shortlisted", response_model=List[ApplicationResponse], dependencies=[employer_or_admin])
async def shortlisted_for_job(job_id: int, service: ApplicationService = Depends(get_application_service)):
    return [to_application_response(a) for a in service.get_shortlisted_by_job(job_id)]


@router.get("/job/{job_id}/interviews", response_model=List[ApplicationResponse], dependencies=[employer_or_admin])
async def interviews_for_job(job_id: int, service: ApplicationService = Depends(get_application_service)):
    return [to_application_response(a) for a in service.get_with_interview_by_job(job_id)]


@router.get(
    "/jobseeker/{job_seeker_id}",
    response_model=List[ApplicationResponse],
    dependencies=[job_seeker_or_admin],
)
async def applications_for_job_seeker(
    job_seeker_id: UUID, service: ApplicationService = Depends(get_application_service)
):
    return [to_application_response(a) for a in service.get_by_job_seeker(str(job_seeker_id))]


@router.get(
    "/{application_id}",
    response_model=ApplicationResponse,
    dependencies=[Depends(require_roles(*ALL_ROLES))],
)
async def get_application(application_id: int, service: ApplicationService = Depends(get_application_service)):
    return to_application_response(service.get_by_id(application_id))


@router.post(
    "",
    response_model=ApplicationResponse,
    status_code=201,
    dependencies=[Depends(require_roles(JOB_SEEKER))],
)
async def apply(request: ApplicationCreate, service: ApplicationService = Depends(get_application_service)):
    """
    Apply to a job with one of your resumes (the default one when resumeId
    is omitted). The employer is notified.
    """
    return to_application_response(await service.create(request))


@router.put("/{application_id}", response_model=ApplicationResponse, dependencies=[employer_or_admin])
async def update_application(
    application_id: int,
    request: ApplicationUpdate,
    service: ApplicationService = Depends(get_application_service),
):
    """Update status and feedback. The applicant is notified when the status changes."""
    return to_application_response(await service.update(application_id, request))


@router.delete("/{application_id}", status_code=204, dependencies=[job_seeker_or_admin])
async def delete_application(application_id: int, service: ApplicationService = Depends(get_application_service)):
    service.delete(application_id)
    return Response(status_code=204)


@router.post("/{application_id}/review", response_model=ApplicationResponse, dependencies=[employer_or_admin])
async def review_application(
    application_id: int,
    request: Optional[ApplicationReview] = Body(None),
    service: ApplicationService = Depends(get_application_service),
):
    notes = request.notes if request else None
    return to_application_response(service.mark_reviewed(application_id, notes))
