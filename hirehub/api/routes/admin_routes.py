"""
Admin Routes (admin only)

GET /Admin/stats - Totals of users, jobs and applications
GET /Admin/users - List users
GET /Admin/users/{user_id} - Get user
DELETE /Admin/users/{user_id} - Delete user
GET /Admin/jobs - List jobs
DELETE /Admin/jobs/{job_id} - Delete job
GET /Admin/applications - List applications
DELETE /Admin/applications/{application_id} - Delete application
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Response

from hirehub.api.deps import get_admin_service, get_application_service, get_job_service, get_user_service
from hirehub.core.auth import ADMIN, require_roles
from hirehub.schemas.mappers import to_application_response, to_job_response, to_user_response
from hirehub.schemas.schemas import AdminStatsResponse, ApplicationResponse, JobResponse, UserResponse
from hirehub.services.admin_service import AdminService
from hirehub.services.application_service import ApplicationService
from hirehub.services.job_service import JobService
from hirehub.services.user_service import UserService

router = APIRouter(prefix="/Admin", tags=["Admin"], dependencies=[Depends(require_roles(ADMIN))])


@router.get("/stats", response_model=AdminStatsResponse)
async def stats(service: AdminService = Depends(get_admin_service)):
    return service.get_stats()


@router.get("/users", response_model=List[UserResponse])
async def list_users(service: UserService = Depends(get_user_service)):
    return [to_user_response(u) for u in service.get_all()]


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return to_user_response(service.get_by_id(str(user_id)))


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    service.delete(str(user_id))
    return Response(status_code=204)


@router.get("/jobs", response_model=List[JobResponse])
async def list_jobs(service: JobService = Depends(get_job_service)):
    return [to_job_response(j) for j in service.get_all()]


@router.delete("/jobs/{job_id}", status_code=204)
async def delete_job(job_id: int, service: JobService = Depends(get_job_service)):
    service.delete(job_id)
    return Response(status_code=204)


@router.get("/applications", response_model=List[ApplicationResponse])
async def list_applications(service: ApplicationService = Depends(get_application_service)):
    return [to_application_response(a) for a in service.get_all()]


@router.delete("/applications/{application_id}", status_code=204)
async def delete_application(application_id: int, service: ApplicationService = Depends(get_application_service)):
    service.delete(application_id)
    return Response(status_code=204)
