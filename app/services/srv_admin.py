import hmac
import logging
from typing import List
from fastapi import Depends

from app.core.config import settings
from app.core.security import create_admin_access_token, get_password_hash
from app.helpers.exception_handler import CustomException
from app.repository.repo_user import UserRepository
from app.schemas.sche_admin import AdminLoginRequest, AdminLoginResponse
from app.schemas.sche_user import UserProfileResponse

logger = logging.getLogger(__name__)


class AdminService:
    """Operations for the fixed admin principal.

    The admin is not a database row: its credentials come from configuration
    and its token carries a ``role: admin`` claim instead of a user id.
    """

    def __init__(self, user_repo: UserRepository = Depends()):
        self.user_repo = user_repo

    def login(self, data: AdminLoginRequest) -> AdminLoginResponse:
        if not settings.ADMIN_USERNAME or not settings.ADMIN_PASSWORD:
            logger.error("Admin login attempted but ADMIN_USERNAME/ADMIN_PASSWORD are not configured")
            raise CustomException(http_code=500, code='500', message='Admin credentials are not configured')

        username_ok = hmac.compare_digest(data.username.encode('utf-8'), settings.ADMIN_USERNAME.encode('utf-8'))
        password_ok = hmac.compare_digest(data.password.encode('utf-8'), settings.ADMIN_PASSWORD.encode('utf-8'))
        if not (username_ok and password_ok):
            logger.warning("Rejected admin login attempt")
            raise CustomException(http_code=401, code='401', message='Invalid admin credentials')

        return AdminLoginResponse(
            message='Admin login successful',
            token=create_admin_access_token(settings.ADMIN_USERNAME)
        )

    def list_users(self) -> List[UserProfileResponse]:
        return [UserProfileResponse.model_validate(u) for u in self.user_repo.get_all()]

    def reset_user_password(self, user_id: int, new_password: str) -> None:
        if not self.user_repo.get_by_id(user_id):
            raise CustomException(http_code=404, code='404', message='User not found')
        self.user_repo.set_password_hash(user_id, get_password_hash(new_password))
        logger.info(f"Admin reset password: user_id={user_id}")
