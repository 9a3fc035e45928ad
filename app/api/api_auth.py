import logging
from typing import Any

from fastapi import APIRouter, Depends

from app.helpers.login_manager import login_required
from app.models.model_user import User
from app.schemas.sche_base import MessageResponse
from app.schemas.sche_user import (
    UserRegisterRequest, UserLoginRequest, UserUpdateMeRequest, UserChangePasswordRequest,
    AuthResponse, ProfileResponse, ProfileUpdateResponse
)
from app.services.srv_user import UserService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post('/register', status_code=201, response_model=AuthResponse)
def register(register_data: UserRegisterRequest, user_service: UserService = Depends()) -> Any:
    """
    Register a new user account.

    Fails with 400 when the username or the email is already used by another
    account. On success a signed access token is issued straight away.
    """
    logger.info(f"register request: username={register_data.username}")
    return user_service.register_user(register_data)


@router.post('/login', response_model=AuthResponse)
def login_access_token(form_data: UserLoginRequest, user_service: UserService = Depends()) -> Any:
    """
    Log in with a username or an email address in the `username` field.
    """
    return user_service.login(form_data)


@router.get('/profile', response_model=ProfileResponse)
def get_profile(current_user: User = Depends(login_required), user_service: UserService = Depends()) -> Any:
    return user_service.get_profile(current_user)


@router.put('/profile', response_model=ProfileUpdateResponse)
def update_profile(user_data: UserUpdateMeRequest,
                   current_user: User = Depends(login_required),
                   user_service: UserService = Depends()) -> Any:
    """
    Update username and email. A new token is returned since the token embeds the username.
    """
    logger.info(f"update_profile request: user_id={current_user.id}")
    return user_service.update_me(user_data, current_user)


@router.put('/password', response_model=MessageResponse)
def change_password(password_data: UserChangePasswordRequest,
                    current_user: User = Depends(login_required),
                    user_service: UserService = Depends()) -> Any:
    user_service.change_password(password_data, current_user)
    return MessageResponse(message='Password updated successfully')
