import logging
from typing import Optional
from fastapi import Depends

from app.core.security import verify_password, get_password_hash, create_access_token
from app.helpers.exception_handler import CustomException
from app.models.model_user import User
from app.repository.repo_user import UserRepository
from app.schemas.sche_user import (
    UserRegisterRequest, UserLoginRequest, UserUpdateMeRequest, UserChangePasswordRequest,
    AuthResponse, ProfileResponse, ProfileUpdateResponse, UserItemResponse, UserProfileResponse
)

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, user_repo: UserRepository = Depends()):
        self.user_repo = user_repo

    def authenticate(self, *, login: str, password: str) -> Optional[User]:
        user = self.user_repo.get_by_login(login)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user

    def register_user(self, data: UserRegisterRequest) -> AuthResponse:
        if self.user_repo.find_conflict(data.username, data.email):
            raise CustomException(http_code=400, code='400', message='Username or email already exists')

        new_user = User(
            username=data.username,
            email=data.email,
            password_hash=get_password_hash(data.password),
        )
        created_user = self.user_repo.create(new_user)
        logger.info(f"User registered: user_id={created_user.id}")
        return AuthResponse(
            message='User registered successfully',
            token=create_access_token(created_user.id, created_user.username),
            user=UserItemResponse.model_validate(created_user)
        )

    def login(self, data: UserLoginRequest) -> AuthResponse:
        user = self.authenticate(login=data.username, password=data.password)
        if not user:
            # same answer for unknown user and wrong password
            logger.warning("Rejected login attempt")
            raise CustomException(http_code=401, code='401', message='Invalid credentials')
        return AuthResponse(
            message='Login successful',
            token=create_access_token(user.id, user.username),
            user=UserItemResponse.model_validate(user)
        )

    def get_profile(self, current_user: User) -> ProfileResponse:
        return ProfileResponse(user=UserProfileResponse.model_validate(current_user))

    def update_me(self, data: UserUpdateMeRequest, current_user: User) -> ProfileUpdateResponse:
        if self.user_repo.find_conflict(data.username, data.email, exclude_user_id=current_user.id):
            raise CustomException(http_code=400, code='400', message='Username or email is already taken')

        current_user.username = data.username
        current_user.email = data.email
        updated_user = self.user_repo.update(current_user)
        return ProfileUpdateResponse(
            message='Profile updated successfully',
            token=create_access_token(updated_user.id, updated_user.username),
            user=UserProfileResponse.model_validate(updated_user)
        )

    def change_password(self, data: UserChangePasswordRequest, current_user: User) -> None:
        if not verify_password(data.current_password, current_user.password_hash):
            raise CustomException(http_code=401, code='401', message='Current password is incorrect')
        self.user_repo.set_password_hash(current_user.id, get_password_hash(data.new_password))
        logger.info(f"Password changed: user_id={current_user.id}")
