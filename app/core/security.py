import jwt
import bcrypt
from typing import Any, Dict
from app.core.config import settings
from datetime import datetime, timedelta, timezone

ADMIN_ROLE = 'admin'
BCRYPT_MAX_BYTES = 72


def _encode(claims: Dict[str, Any], expires_in_seconds: int) -> str:
    to_encode = dict(claims)
    to_encode["exp"] = datetime.now(timezone.utc) + timedelta(seconds=expires_in_seconds)
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.SECURITY_ALGORITHM)


def create_access_token(user_id: int, username: str) -> str:
    return _encode(
        {"user_id": user_id, "username": username},
        settings.ACCESS_TOKEN_EXPIRE_SECONDS
    )


def create_admin_access_token(username: str) -> str:
    return _encode(
        {"username": username, "role": ADMIN_ROLE},
        settings.ADMIN_ACCESS_TOKEN_EXPIRE_SECONDS
    )


def decode_access_token(token: str) -> Dict[str, Any]:
    """Raises jwt.PyJWTError when the signature is bad or the token expired."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.SECURITY_ALGORITHM])


def _password_bytes(password: str) -> bytes:
    # bcrypt only reads the first 72 bytes of a secret
    return password.encode('utf-8')[:BCRYPT_MAX_BYTES]


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(_password_bytes(plain_password), hashed_password.encode('utf-8'))


def get_password_hash(password: str) -> str:
    salt = bcrypt.gensalt(rounds=settings.BCRYPT_ROUNDS)
    return bcrypt.hashpw(_password_bytes(password), salt).decode('utf-8')
