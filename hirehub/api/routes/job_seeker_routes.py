"""
Job Seeker Routes

GET /JobSeeker - List job seekers (admin)
GET /JobSeeker/search/college?name= - Search by college
GET /JobSeeker/search/skill?skill= - Search by skill
GET /JobSeeker/by-user/{user_id} - Job seeker profile of a user
GET /JobSeeker/{job_seeker_id} - Get job seeker (admin)
POST /JobSeeker - Create profile (one per user)
PUT /JobSeeker/{job_seeker_id} - Update profile
DELETE /JobSeeker/{job_seeker_id} - Delete profile (no resumes/applications left)
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from hirehub.api.deps import get_job_seeker_service
from hirehub.core.auth import ADMIN, JOB_SEEKER, require_roles
from hirehub.schemas.mappers import to_job_seeker_response
from hirehub.schemas.schemas import JobSeekerCreate, JobSeekerResponse, JobSeekerUpdate
from hirehub.services.job_seeker_service import JobSeekerService

router = APIRouter(prefix="/JobSeeker", tags=["Job Seekers"])

admin_or_job_seeker = Depends(require_roles(ADMIN, JOB_SEEKER))


@router.get("", response_model=List[JobSeekerResponse], dependencies=[Depends(require_roles(ADMIN))])
async def list_job_seekers(service: JobSeekerService = Depends(get_job_seeker_service)):
    return [to_job_seeker_response(j) for j in service.get_all()]


@router.get("/search/college", response_model=List[JobSeekerResponse])
async def search_by_college(name: str = Query(""), service: JobSeekerService = Depends(get_job_seeker_service)):
    return [to_job_seeker_response(j) for j in service.search_by_college(name)]


@router.get("/search/skill", response_model=List[JobSeekerResponse])
async def search_by_skill(skill: str = Query(""), service: JobSeekerService = Depends(get_job_seeker_service)):
    return [to_job_seeker_response(j) for j in service.search_by_skill(skill)]


@router.get("/by-user/{user_id}", response_model=JobSeekerResponse, dependencies=[admin_or_job_seeker])
async def job_seeker_by_user(user_id: UUID, service: JobSeekerService = Depends(get_job_seeker_service)):
    return to_job_seeker_response(service.get_by_user_id(str(user_id)))


@router.get("/{job_seeker_id}", response_model=JobSeekerResponse, dependencies=[Depends(require_roles(ADMIN))])
async def get_job_seeker(job_seeker_id: UUID, service: JobSeekerService = Depends(get_job_seeker_service)):
    return to_job_seeker_response(service.get_by_id(str(job_seeker_id)))


@router.post("", response_model=JobSeekerResponse, status_code=201, dependencies=[admin_or_job_seeker])
async def create_job_seeker(request: JobSeekerCreate, service: JobSeekerService = Depends(get_job_seeker_service)):
    return to_job_seeker_response(service.create(request))


@router.put("/{job_seeker_id}", response_model=JobSeekerResponse, dependencies=[admin_or_job_seeker])
async def update_job_seeker(
    job_seeker_id: UUID, request: JobSeekerUpdate, service: JobSeekerService = Depends(get_job_seeker_service)
):
    return to_job_seeker_response(service.update(str(job_seeker_id), request))


@router.delete("/{job_seeker_id}", status_code=204, dependencies=[admin_or_job_seeker])
async def delete_job_seeker(job_seeker_id: UUID, service: JobSeekerService = Depends(get_job_seeker_service)):
    service.delete(str(job_seeker_id))
    return Response(status_code=204)
