"""
Notification Routes

GET /Notification/user/{user_id} - Notifications of a user, newest first
GET /Notification/user/{user_id}/unread - Unread notifications
GET /Notification/user/{user_id}/recent?limit= - Most recent notifications
GET /Notification/{notification_id} - Get notification
POST /Notification - Create notification, optionally emailed (admin)
POST /Notification/application/message - Employer messages an applicant
POST /Notification/job/message - Job seeker messages a job's employer
PUT /Notification/{notification_id} - Update read flag/message
POST /Notification/{notification_id}/mark-read - Mark one read
POST /Notification/user/{user_id}/mark-all-read - Mark all read
DELETE /Notification/{notification_id} - Delete notification (admin)
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response

from hirehub.api.deps import get_notification_service
from hirehub.core.auth import ADMIN, ALL_ROLES, EMPLOYER, JOB_SEEKER, require_roles
from hirehub.core.exceptions import NotFoundError
from hirehub.schemas.mappers import to_notification_response
from hirehub.schemas.schemas import (
    EmployerNotifyApplicant, JobSeekerNotifyEmployer, MarkAllReadResponse, MessageResponse,
    NotificationCreate, NotificationResponse, NotificationUpdate
)
from hirehub.services.notification_service import NotificationService

router = APIRouter(prefix="/Notification", tags=["Notifications"])

any_role = Depends(require_roles(*ALL_ROLES))


@router.get("/user/{user_id}", response_model=List[NotificationResponse], dependencies=[any_role])
async def notifications_for_user(user_id: UUID, service: NotificationService = Depends(get_notification_service)):
    return [to_notification_response(n) for n in service.get_by_user(str(user_id))]


@router.get("/user/{user_id}/unread", response_model=List[NotificationResponse], dependencies=[any_role])
async def unread_for_user(user_id: UUID, service: NotificationService = Depends(get_notification_service)):
    return [to_notification_response(n) for n in service.get_unread_by_user(str(user_id))]


@router.get("/user/{user_id}/recent", response_model=List[NotificationResponse], dependencies=[any_role])
async def recent_for_user(
    user_id: UUID,
    limit: int = Query(20, ge=1, le=100),
    service: NotificationService = Depends(get_notification_service),
):
    return [to_notification_response(n) for n in service.get_recent_by_user(str(user_id), limit)]


@router.get("/{notification_id}", response_model=NotificationResponse, dependencies=[any_role])
async def get_notification(notification_id: int, service: NotificationService = Depends(get_notification_service)):
    return to_notification_response(service.get_by_id(notification_id))


@router.post("", response_model=NotificationResponse, status_code=201, dependencies=[Depends(require_roles(ADMIN))])
async def create_notification(
    request: NotificationCreate, service: NotificationService = Depends(get_notification_service)
):
    return to_notification_response(await service.create(request))


@router.post("/application/message", response_model=NotificationResponse, status_code=201)
async def message_applicant(
    request: EmployerNotifyApplicant,
    user: dict = Depends(require_roles(EMPLOYER)),
    service: NotificationService = Depends(get_notification_service),
):
    """Message the applicant of an application to one of your jobs."""
    notification = await service.notify_applicant_by_application(request, user["user_id"])
    return to_notification_response(notification)


@router.post("/job/message", response_model=NotificationResponse, status_code=201)
async def message_employer(
    request: JobSeekerNotifyEmployer,
    user: dict = Depends(require_roles(JOB_SEEKER)),
    service: NotificationService = Depends(get_notification_service),
):
    """Message the employer that posted a job."""
    notification = await service.notify_employer_by_job(request, user["user_id"])
    return to_notification_response(notification)


@router.put("/{notification_id}", response_model=NotificationResponse, dependencies=[any_role])
async def update_notification(
    notification_id: int,
    request: NotificationUpdate,
    service: NotificationService = Depends(get_notification_service),
):
    return to_notification_response(service.update(notification_id, request))


@router.post("/{notification_id}/mark-read", response_model=MessageResponse, dependencies=[any_role])
async def mark_read(notification_id: int, service: NotificationService = Depends(get_notification_service)):
    if not service.mark_as_read(notification_id):
        raise NotFoundError.for_entity("Notification", notification_id)
    return MessageResponse(message="Notification marked as read.")


@router.post("/user/{user_id}/mark-all-read", response_model=MarkAllReadResponse, dependencies=[any_role])
async def mark_all_read(user_id: UUID, service: NotificationService = Depends(get_notification_service)):
    return MarkAllReadResponse(updated=service.mark_all_as_read(str(user_id)))


@router.delete("/{notification_id}", status_code=204, dependencies=[Depends(require_roles(ADMIN))])
async def delete_notification(notification_id: int, service: NotificationService = Depends(get_notification_service)):
    service.delete(notification_id)
    return Response(status_code=204)
