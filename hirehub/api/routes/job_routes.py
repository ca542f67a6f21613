"""
Job Routes

GET /Job - List all jobs
GET /Job/search/title?query= - Search by title
GET /Job/search/location?location= - Search by location
GET /Job/search/skill?skill= - Search by required skill
GET /Job/search/company?company= - Search by company name
GET /Job/employer/{employer_id} - Jobs of an employer (employer/admin)
GET /Job/{job_id} - Get job details
POST /Job - Create job posting (employer only)
PUT /Job/{job_id} - Update job (employer only)
DELETE /Job/{job_id} - Delete job (employer/admin)
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from hirehub.api.deps import get_job_service
from hirehub.core.auth import ADMIN, EMPLOYER, require_roles
from hirehub.schemas.mappers import to_job_response
from hirehub.schemas.schemas import JobCreate, JobResponse, JobUpdate
from hirehub.services.job_service import JobService

router = APIRouter(prefix="/Job", tags=["Jobs"])


@router.get("", response_model=List[JobResponse])
async def list_jobs(service: JobService = Depends(get_job_service)):
    """List all job postings, newest first."""
    return [to_job_response(j) for j in service.get_all()]


@router.get("/search/title", response_model=List[JobResponse])
async def search_by_title(query: str = Query(""), service: JobService = Depends(get_job_service)):
    return [to_job_response(j) for j in service.search_by_title(query)]


@router.get("/search/location", response_model=List[JobResponse])
async def search_by_location(location: str = Query(""), service: JobService = Depends(get_job_service)):
    return [to_job_response(j) for j in service.search_by_location(location)]


@router.get("/search/skill", response_model=List[JobResponse])
async def search_by_skill(skill: str = Query(""), service: JobService = Depends(get_job_service)):
    return [to_job_response(j) for j in service.search_by_skill(skill)]


@router.get("/search/company", response_model=List[JobResponse])
async def search_by_company(company: str = Query(""), service: JobService = Depends(get_job_service)):
    return [to_job_response(j) for j in service.search_by_company(company)]


@router.get(
    "/employer/{employer_id}",
    response_model=List[JobResponse],
    dependencies=[Depends(require_roles(EMPLOYER, ADMIN))],
)
async def jobs_by_employer(employer_id: UUID, service: JobService = Depends(get_job_service)):
    return [to_job_response(j) for j in service.get_by_employer(str(employer_id))]


@router.get("/{job_id}", response_model=JobResponse)
async def get_job(job_id: int, service: JobService = Depends(get_job_service)):
    return to_job_response(service.get_by_id(job_id))


@router.post("", response_model=JobResponse, status_code=201, dependencies=[Depends(require_roles(EMPLOYER))])
async def create_job(job: JobCreate, service: JobService = Depends(get_job_service)):
    """Create a new job posting. Status defaults to Open."""
    return to_job_response(service.create(job))


@router.put("/{job_id}", response_model=JobResponse, dependencies=[Depends(require_roles(EMPLOYER))])
async def update_job(job_id: int, job: JobUpdate, service: JobService = Depends(get_job_service)):
    return to_job_response(service.update(job_id, job))


@router.delete("/{job_id}", status_code=204, dependencies=[Depends(require_roles(EMPLOYER, ADMIN))])
async def delete_job(job_id: int, service: JobService = Depends(get_job_service)):
    service.delete(job_id)
    return Response(status_code=204)
