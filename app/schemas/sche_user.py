from datetime import datetime
from typing import Annotated, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field


def _check_email(value: str) -> str:
    # the address is stored exactly as typed so it matches at login
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise ValueError(f"value is not a valid email address: {e}")
    return value


Email = Annotated[str, Field(min_length=3, max_length=100), AfterValidator(_check_email)]


class UserItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class UserProfileResponse(UserItemResponse):
    created_at: Optional[datetime] = None


class UserRegisterRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: Email
    password: str = Field(..., min_length=6, max_length=72)


class UserLoginRequest(BaseModel):
    # username or email
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class UserUpdateMeRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    email: Email


class UserChangePasswordRequest(BaseModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=72)


class AuthResponse(BaseModel):
    message: str
    token: str
    user: UserItemResponse


class ProfileResponse(BaseModel):
    user: UserProfileResponse


class ProfileUpdateResponse(BaseModel):
    message: str
    token: str
    user: UserProfileResponse
