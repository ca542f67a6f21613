"""
Employer Routes

GET /Employer - List employers (admin)
GET /Employer/search?company= - Search employers by company name
GET /Employer/by-user/{user_id} - Employer profile of a user
GET /Employer/by-job/{job_id} - Employer that posted a job
GET /Employer/{employer_id} - Get employer (admin)
POST /Employer - Create employer profile
PUT /Employer/{employer_id} - Update employer profile
DELETE /Employer/{employer_id} - Delete employer profile
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from hirehub.api.deps import get_employer_service
from hirehub.core.auth import ADMIN, EMPLOYER, require_roles
from hirehub.schemas.mappers import to_employer_response
from hirehub.schemas.schemas import EmployerCreate, EmployerResponse, EmployerUpdate
from hirehub.services.employer_service import EmployerService

router = APIRouter(prefix="/Employer", tags=["Employers"])

admin_or_employer = Depends(require_roles(ADMIN, EMPLOYER))


@router.get("", response_model=List[EmployerResponse], dependencies=[Depends(require_roles(ADMIN))])
async def list_employers(service: EmployerService = Depends(get_employer_service)):
    return [to_employer_response(e) for e in service.get_all()]


@router.get("/search", response_model=List[EmployerResponse])
async def search_employers(company: str = Query(""), service: EmployerService = Depends(get_employer_service)):
    """Public search by company name."""
    return [to_employer_response(e) for e in service.search_by_company(company)]


@router.get("/by-user/{user_id}", response_model=EmployerResponse, dependencies=[admin_or_employer])
async def employer_by_user(user_id: UUID, service: EmployerService = Depends(get_employer_service)):
    return to_employer_response(service.get_by_user_id(str(user_id)))


@router.get("/by-job/{job_id}", response_model=EmployerResponse)
async def employer_by_job(job_id: int, service: EmployerService = Depends(get_employer_service)):
    return to_employer_response(service.get_by_job_id(job_id))


@router.get("/{employer_id}", response_model=EmployerResponse, dependencies=[Depends(require_roles(ADMIN))])
async def get_employer(employer_id: UUID, service: EmployerService = Depends(get_employer_service)):
    return to_employer_response(service.get_by_id(str(employer_id)))


@router.post("", response_model=EmployerResponse, status_code=201, dependencies=[admin_or_employer])
async def create_employer(request: EmployerCreate, service: EmployerService = Depends(get_employer_service)):
    return to_employer_response(service.create(request))


@router.put("/{employer_id}", response_model=EmployerResponse, dependencies=[admin_or_employer])
async def update_employer(
    employer_id: UUID, request: EmployerUpdate, service: EmployerService = Depends(get_employer_service)
):
    return to_employer_response(service.update(str(employer_id), request))


@router.delete("/{employer_id}", status_code=204, dependencies=[admin_or_employer])
async def delete_employer(employer_id: UUID, service: EmployerService = Depends(get_employer_service)):
    service.delete(str(employer_id))
    return Response(status_code=204)
