"""
User Routes

POST /User/register - Register new user
POST /User/login - Login and get JWT token
POST /User/forgot-password - Email a password reset link
POST /User/reset-password - Set a new password with a reset token
GET /User - List users (admin)
GET /User/by-role/{role} - Users with a role (admin)
GET /User/search?name= - Search users by name (admin)
GET /User/{user_id} - Get user
PUT /User/{user_id} - Update user (self or admin)
DELETE /User/{user_id} - Delete user (self or admin)
POST /User/{user_id}/schedule-deletion - Deactivate and delete later
POST /User/{user_id}/deactivate - Deactivate account
POST /User/{user_id}/reactivate - Reactivate account
DELETE /User/{user_id}/delete-permanently - Delete account and all its data
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from hirehub.api.deps import get_user_service
from hirehub.core.auth import ADMIN, ALL_ROLES, is_self_or_admin, require_roles
from hirehub.core.exceptions import ForbiddenError
from hirehub.schemas.mappers import to_user_response
from hirehub.schemas.schemas import (
    AuthResponse, ForgotPasswordRequest, LoginRequest, MessageResponse,
    ResetPasswordRequest, UserCreate, UserResponse, UserRole, UserUpdate
)
from hirehub.services.user_service import UserService

router = APIRouter(prefix="/User", tags=["Users"])


def _ensure_self_or_admin(user: dict, user_id: str) -> None:
    if not is_self_or_admin(user, user_id):
        raise ForbiddenError("You can only manage your own account")


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(request: UserCreate, service: UserService = Depends(get_user_service)):
    """
    Register a new user account.

    After registration, login to get access token, then create a profile.
    """
    if request.role == UserRole.admin:
        raise ForbiddenError("Admin accounts cannot be self-registered")
    return to_user_response(service.create(request))


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, service: UserService = Depends(get_user_service)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    auth = service.login(request)
    if auth is None:
        return JSONResponse(status_code=401, content={"message": "Invalid credentials"})
    return auth


@router.post("/forgot-password", response_model=MessageResponse)
async def forgot_password(
    request: ForgotPasswordRequest,
    http_request: Request,
    service: UserService = Depends(get_user_service),
):
    """Always answers the same way so the endpoint cannot be used to probe emails."""
    if not request.email.strip():
        return JSONResponse(status_code=400, content={"message": "Email required"})
    origin = request.origin_base_url or str(http_request.base_url)
    await service.request_password_reset(request.email, origin)
    return MessageResponse(message="If this email is registered, password reset instructions have been sent.")


@router.post("/reset-password", response_model=MessageResponse)
async def reset_password(request: ResetPasswordRequest, service: UserService = Depends(get_user_service)):
    if not request.token.strip() or not request.new_password.strip():
        return JSONResponse(status_code=400, content={"message": "Token and new password required"})
    if not service.reset_password_with_token(request.token, request.new_password):
        return JSONResponse(status_code=400, content={"message": "Invalid or expired token"})
    return MessageResponse(message="Password updated")


@router.get("", response_model=List[UserResponse], dependencies=[Depends(require_roles(ADMIN))])
async def list_users(service: UserService = Depends(get_user_service)):
    return [to_user_response(u) for u in service.get_all()]


@router.get("/by-role/{role}", response_model=List[UserResponse], dependencies=[Depends(require_roles(ADMIN))])
async def users_by_role(role: str, service: UserService = Depends(get_user_service)):
    return [to_user_response(u) for u in service.get_by_role(role)]


@router.get("/search", response_model=List[UserResponse], dependencies=[Depends(require_roles(ADMIN))])
async def search_users(name: str = Query(""), service: UserService = Depends(get_user_service)):
    return [to_user_response(u) for u in service.search_by_name(name)]


@router.get("/{user_id}", response_model=UserResponse, dependencies=[Depends(require_roles(*ALL_ROLES))])
async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    return to_user_response(service.get_by_id(str(user_id)))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UserUpdate,
    user: dict = Depends(require_roles(*ALL_ROLES)),
    service: UserService = Depends(get_user_service),
):
    """Update profile fields. Email cannot be changed; only admins change roles."""
    _ensure_self_or_admin(user, str(user_id))
    if request.role is not None and request.role.value != user["role"] and user["role"] != ADMIN:
        raise ForbiddenError("Only administrators can change roles")
    return to_user_response(service.update(str(user_id), request))


@router.delete("/{user_id}", status_code=204)
async def delete_user(
    user_id: UUID,
    user: dict = Depends(require_roles(*ALL_ROLES)),
    service: UserService = Depends(get_user_service),
):
    _ensure_self_or_admin(user, str(user_id))
    service.delete(str(user_id))
    return Response(status_code=204)


@router.post("/{user_id}/schedule-deletion", response_model=MessageResponse)
async def schedule_deletion(
    user_id: UUID,
    days: int = Query(30),
    user: dict = Depends(require_roles(*ALL_ROLES)),
    service: UserService = Depends(get_user_service),
):
    _ensure_self_or_admin(user, str(user_id))
    return MessageResponse(message=service.schedule_deletion(str(user_id), days))


@router.post("/{user_id}/deactivate", response_model=MessageResponse)
async def deactivate(
    user_id: UUID,
    user: dict = Depends(require_roles(*ALL_ROLES)),
    service: UserService = Depends(get_user_service),
):
    _ensure_self_or_admin(user, str(user_id))
    if not service.deactivate(str(user_id)):
        return JSONResponse(status_code=404, content={"message": "User not found or already deactivated"})
    return MessageResponse(message="Account deactivated successfully.")


@router.post("/{user_id}/reactivate", response_model=MessageResponse)
async def reactivate(
    user_id: UUID,
    user: dict = Depends(require_roles(*ALL_ROLES)),
    service: UserService = Depends(get_user_service),
):
    """Deactivated users cannot authenticate, so in practice this is an admin action."""
    _ensure_self_or_admin(user, str(user_id))
    if not service.reactivate(str(user_id)):
        return JSONResponse(status_code=404, content={"message": "User not found or already active"})
    return MessageResponse(message="Account reactivated successfully.")


@router.delete("/{user_id}/delete-permanently", response_model=MessageResponse)
async def delete_permanently(
    user_id: UUID,
    user: dict = Depends(require_roles(*ALL_ROLES)),
    service: UserService = Depends(get_user_service),
):
    _ensure_self_or_admin(user, str(user_id))
    if not service.delete_permanently(str(user_id)):
        return JSONResponse(status_code=404, content={"message": "User not found"})
    return MessageResponse(message="Account permanently deleted")
