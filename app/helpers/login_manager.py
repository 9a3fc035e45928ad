import jwt
import logging
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError

from app.core.security import decode_access_token
from app.helpers.exception_handler import CustomException
from app.models.model_user import User
from app.repository.repo_user import UserRepository
from app.schemas.sche_token import AdminTokenPayload, TokenPayload

logger = logging.getLogger(__name__)

# auto_error is off so a missing header answers 401 in our own error shape
reusable_oauth2 = HTTPBearer(
    scheme_name='Authorization',
    auto_error=False
)


def login_required(
    http_authorization_credentials: Optional[HTTPAuthorizationCredentials] = Depends(reusable_oauth2),
    user_repo: UserRepository = Depends()
) -> User:
    if http_authorization_credentials is None:
        raise CustomException(http_code=401, code='401', message='Access token required')
    try:
        payload = decode_access_token(http_authorization_credentials.credentials)
        token_data = TokenPayload(**payload)
    except (jwt.PyJWTError, ValidationError) as e:
        logger.warning(f"Credential validation failed: {e}")
        raise CustomException(http_code=401, code='401', message='Invalid or expired token')

    user = user_repo.get_by_id(token_data.user_id)
    if not user:
        logger.warning(f"User not found: {token_data.user_id}")
        raise CustomException(http_code=404, code='404', message='User not found')
    return user


def admin_required(
    http_authorization_credentials: Optional[HTTPAuthorizationCredentials] = Depends(reusable_oauth2)
) -> AdminTokenPayload:
    if http_authorization_credentials is None:
        raise CustomException(http_code=401, code='401', message='Admin access token required')
    try:
        payload = decode_access_token(http_authorization_credentials.credentials)
        return AdminTokenPayload(**payload)
    except (jwt.PyJWTError, ValidationError) as e:
        logger.warning(f"Admin credential validation failed: {e}")
        raise CustomException(http_code=403, code='403', message='Invalid or unauthorized admin token')
