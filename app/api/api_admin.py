import logging
from typing import Any

from fastapi import APIRouter, Depends

from app.helpers.login_manager import admin_required
from app.schemas.sche_admin import (
    AdminLoginRequest, AdminLoginResponse, AdminUserListResponse, AdminPasswordResetRequest
)
from app.schemas.sche_base import MessageResponse
from app.services.srv_admin import AdminService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post('/login', response_model=AdminLoginResponse)
def admin_login(form_data: AdminLoginRequest, admin_service: AdminService = Depends()) -> Any:
    """
    Log in as the configured admin (ADMIN_USERNAME / ADMIN_PASSWORD).

    The returned token is short-lived and is only accepted by /admin routes.
    """
    return admin_service.login(form_data)


@router.get('/users', dependencies=[Depends(admin_required)], response_model=AdminUserListResponse)
def list_users(admin_service: AdminService = Depends()) -> Any:
    users = admin_service.list_users()
    logger.info(f"list_users success: {len(users)} users")
    return AdminUserListResponse(users=users)


@router.put('/users/{user_id}/password', dependencies=[Depends(admin_required)], response_model=MessageResponse)
def reset_user_password(user_id: int, reset_data: AdminPasswordResetRequest,
                        admin_service: AdminService = Depends()) -> Any:
    """
    Force a new password on a user without knowing the old one.
    """
    admin_service.reset_user_password(user_id, reset_data.new_password)
    return MessageResponse(message='User password reset successfully')
